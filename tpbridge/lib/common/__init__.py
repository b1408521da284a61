"""Shared errors, schemas and configuration helpers."""
