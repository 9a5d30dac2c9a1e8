"""Presentation layer - HTTP API."""
