"""Application layer for the keto calculator."""
