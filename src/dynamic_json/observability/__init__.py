"""Logging helpers for applications embedding dynamic-json."""
