"""Infrastructure adapters: filesystem helpers and logging."""
