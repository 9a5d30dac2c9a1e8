"""Posts bounded context."""
