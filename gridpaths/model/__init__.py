"""Domain model: grids, paths and the indexed path repository."""
