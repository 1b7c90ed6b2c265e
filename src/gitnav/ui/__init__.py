"""User interface adapters for gitnav."""
