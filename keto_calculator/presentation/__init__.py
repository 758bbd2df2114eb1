"""Input parsing and output rendering for the calculator."""
