"""Timing of four Kruskal minimum spanning tree variants on random complete graphs."""

__version__ = "0.1.0"
__all__ = ["experiment", "graph", "kruskal", "unionfind"]