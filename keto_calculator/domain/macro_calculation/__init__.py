"""Macro calculation bounded context."""
