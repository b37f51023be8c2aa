"""Metawriter components."""
