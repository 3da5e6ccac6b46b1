"""Infrastructure adapters for settings, logging and external services."""
