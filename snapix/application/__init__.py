"""Application layer: use cases as commands, queries and their handlers."""
