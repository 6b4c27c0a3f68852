"""Packaged JSON schemas for gridpaths documents."""
