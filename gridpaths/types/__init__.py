"""Shared value types for grids, cells and path summaries."""
