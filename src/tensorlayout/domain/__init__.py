"""Backend-agnostic shape and dtype definitions (no NumPy dependency)."""
