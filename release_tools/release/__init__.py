"""Version propagation and draft releases."""
