"""Discovery adapters."""
