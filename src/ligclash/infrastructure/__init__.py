"""File-format adapters around the scoring core."""
