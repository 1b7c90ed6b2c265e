"""Preview use cases."""
