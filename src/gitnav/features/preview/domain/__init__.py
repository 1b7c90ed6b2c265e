"""Preview value objects and text layout."""
