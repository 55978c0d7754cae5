"""Shared helpers: logging and app paths."""
