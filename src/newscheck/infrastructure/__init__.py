"""Infrastructure adapters: HTTP and the remote model."""
