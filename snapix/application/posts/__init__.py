"""Posts use cases."""
