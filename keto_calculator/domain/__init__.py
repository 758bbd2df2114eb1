"""Domain layer for the keto calculator."""
