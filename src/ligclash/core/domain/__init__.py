"""Domain models, exceptions and rule implementations."""
