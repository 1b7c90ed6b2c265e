"""Feature packages of the discovery, cache and preview pipeline."""
