"""Utility modules for query-helpers."""
