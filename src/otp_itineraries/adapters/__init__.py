"""Adapters layer - configuration, payload parsing and formatting."""
