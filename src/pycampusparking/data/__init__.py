"""Bundled reference tables."""
