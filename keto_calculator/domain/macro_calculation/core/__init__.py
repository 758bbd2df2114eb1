"""Core domain model for macro calculation."""
