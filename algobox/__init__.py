"""Classic algorithms and data structures: lists, trees, graphs, grids, dynamic programming and searches."""

__version__ = "0.1.0"