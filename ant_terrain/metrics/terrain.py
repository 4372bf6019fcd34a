"""Summary metrics over a generated grid: tile counts and same-tile regions."""

from __future__ import annotations

from collections import Counter

import networkx as nx

from ant_terrain.domain.grid import Grid


def tile_counts(grid: Grid) -> dict[str, int]:
    """Number of occupied cells per tile name, most common first."""
    counts = Counter(tile.name for _, _, tile in grid.cells() if tile is not None)
    return dict(counts.most_common())


def region_graph(grid: Grid) -> nx.Graph:
    """Graph of occupied cells with edges between 4-adjacent same-tile cells.

    Each node carries a ``tile`` attribute holding the tile name.
    """
    graph = nx.Graph()
    for x, y, tile in grid.cells():
        if tile is None:
            continue
        graph.add_node((x, y), tile=tile.name)
        for nx_, ny_ in ((x - 1, y), (x, y - 1)):
            neighbor = grid.get(nx_, ny_)
            if neighbor is not None and neighbor.name == tile.name:
                graph.add_edge((x, y), (nx_, ny_))
    return graph


def region_count(grid: Grid) -> int:
    """Count 4-connected same-tile regions among occupied cells."""
    return nx.number_connected_components(region_graph(grid))


def largest_region(grid: Grid) -> tuple[str, int] | None:
    """Return (tile name, cell count) of the biggest region, or None if empty."""
    graph = region_graph(grid)
    if graph.number_of_nodes() == 0:
        return None
    component = max(nx.connected_components(graph), key=len)
    any_cell = next(iter(component))
    return graph.nodes[any_cell]["tile"], len(component)
