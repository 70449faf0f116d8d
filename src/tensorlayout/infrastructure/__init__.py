"""NumPy-backed buffer allocation, conversion, and supporting utilities."""
