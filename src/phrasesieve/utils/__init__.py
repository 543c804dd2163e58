"""Shared helpers (JSON files, hashing, logging)."""
