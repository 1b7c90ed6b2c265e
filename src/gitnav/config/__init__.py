"""Configuration loading and per-user path resolution."""
