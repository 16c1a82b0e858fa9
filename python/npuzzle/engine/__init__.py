"""Search, generation and replay engines."""
