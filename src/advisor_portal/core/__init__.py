"""Core utilities: exceptions and security helpers."""
