"""Metrics layer: summaries of generated terrain."""

from ant_terrain.metrics.terrain import largest_region, region_count, region_graph, tile_counts

__all__ = ["largest_region", "region_count", "region_graph", "tile_counts"]
