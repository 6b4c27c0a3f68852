"""NetworkX conversion utilities.

Example:
    >>> import networkx as nx
    >>> from gridpaths.lib.nx import to_networkx
    >>> from gridpaths.model.grid import Grid
    >>> G = to_networkx(Grid.from_rows(["S.", ".E"]))
    >>> nx.shortest_path_length(G, (0, 0), (1, 1))
    2
"""

from __future__ import annotations

from typing import Iterable

import networkx as nx

from gridpaths.model.grid import Grid
from gridpaths.types.base import Cell


def to_networkx(grid: Grid) -> nx.Graph:
    """Convert a grid to an undirected NetworkX graph.

    Nodes are the passable cells (as ``Cell`` tuples) with a ``kind``
    attribute holding the CellKind. Edges join orthogonally adjacent passable
    cells.

    Args:
        grid: Grid to convert.

    Returns:
        ``networkx.Graph`` over the passable cells.
    """
    G = nx.Graph(rows=grid.rows, cols=grid.cols)
    for cell in grid.passable_cells():
        G.add_node(cell, kind=grid.kind(cell))
    for cell in list(G.nodes):
        # down and right are enough to cover every undirected edge once
        for neighbor in (cell.offset(1, 0), cell.offset(0, 1)):
            if neighbor in G:
                G.add_edge(cell, neighbor)
    return G


def is_valid_path(grid: Grid, cells: Iterable[Cell]) -> bool:
    """Return True iff ``cells`` is a non-empty walk over passable grid cells.

    Every cell must be in bounds and passable, and consecutive cells must be
    orthogonally adjacent.
    """
    seq = [Cell(*c) for c in cells]
    if not seq:
        return False
    G = to_networkx(grid)
    if any(c not in G for c in seq):
        return False
    return all(G.has_edge(a, b) for a, b in zip(seq, seq[1:]))
