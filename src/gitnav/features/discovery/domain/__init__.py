"""Discovery value objects."""
