from .graph_search import dijkstra, prim, shortest_path, vertices

__all__ = [
    "dijkstra",
    "prim",
    "shortest_path",
    "vertices",
]
