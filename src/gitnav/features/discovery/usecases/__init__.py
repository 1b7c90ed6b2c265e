"""Discovery use cases."""
