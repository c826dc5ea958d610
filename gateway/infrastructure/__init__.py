"""Infrastructure: in-process cache, directory backends, and messaging."""
