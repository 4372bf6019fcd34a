"""Visualization layer: rasterization and preview figures."""

from ant_terrain.viz.render import grid_to_pixels, render_legend_figure, save_grid_png

__all__ = ["grid_to_pixels", "render_legend_figure", "save_grid_png"]
