"""Shared ports (Protocols) and error types."""
