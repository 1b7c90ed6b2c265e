"""Application layer coordinating the discovery pipeline for the CLI."""
