"""Graph algorithms driven by the decrease-key priority queue.

Graphs are plain mappings ``node -> iterable of (neighbour, weight)``. A
node that only appears as a neighbour is still a valid vertex. Undirected
graphs list each edge under both endpoints.
"""

from __future__ import annotations

import logging
from typing import Dict, Hashable, Iterable, List, Mapping, Optional, Tuple

from ..datastructures import Element, TernaryHeapMinPriorityQueue
from ..errors import InvalidArgument, NotFound

logger = logging.getLogger(__name__)

Node = Hashable
Graph = Mapping[Node, Iterable[Tuple[Node, float]]]


def vertices(graph: Graph) -> List[Node]:
    """Keys of `graph` followed by nodes that only appear as neighbours."""
    nodes: List[Node] = list(graph)
    known = set(nodes)
    for adjacent in graph.values():
        for neighbour, _ in adjacent:
            if neighbour not in known:
                known.add(neighbour)
                nodes.append(neighbour)
    return nodes


def dijkstra(graph: Graph, source: Node) -> Tuple[Dict[Node, float], Dict[Node, Node]]:
    """Single-source shortest paths.

    Returns ``(distances, predecessors)`` for every node reachable from
    `source`. The source has distance 0 and no predecessor entry.

    Raises:
        NotFound: if `source` is neither a key nor a neighbour in `graph`.
        InvalidArgument: if a negative edge weight is reached.
    """
    if source not in graph and source not in vertices(graph):
        raise NotFound(f"source {source!r} is not in the graph")

    distances: Dict[Node, float] = {}
    predecessors: Dict[Node, Node] = {}
    # Elements of nodes discovered but not yet settled
    frontier: Dict[Node, Element[Node]] = {source: Element(source, 0)}
    queue: TernaryHeapMinPriorityQueue[Element[Node]] = TernaryHeapMinPriorityQueue()
    queue.insert(frontier[source])

    while queue:
        current = queue.extract_minimum()
        node = current.value
        del frontier[node]
        distances[node] = current.priority

        for neighbour, weight in graph.get(node, ()):
            if weight < 0:
                raise InvalidArgument(f"negative weight {weight!r} on edge {node!r} -> {neighbour!r}")
            if neighbour in distances:
                continue
            candidate = current.priority + weight
            element = frontier.get(neighbour)
            if element is None:
                element = Element(neighbour, candidate)
                frontier[neighbour] = element
                queue.insert(element)
                predecessors[neighbour] = node
            elif candidate < element.priority:
                queue.decrease_priority(element, candidate)
                predecessors[neighbour] = node

    logger.debug("dijkstra from %r settled %d nodes", source, len(distances))
    return distances, predecessors


def shortest_path(graph: Graph, source: Node, target: Node) -> Optional[List[Node]]:
    """Nodes on a shortest path from `source` to `target`, or None if unreachable."""
    distances, predecessors = dijkstra(graph, source)
    if target not in distances:
        return None
    path = [target]
    while path[-1] != source:
        path.append(predecessors[path[-1]])
    path.reverse()
    return path


def prim(graph: Graph) -> List[Tuple[Node, Node, float]]:
    """Minimum spanning forest of an undirected weighted graph.

    Returns the chosen edges as ``(u, v, weight)`` where `u` was already in
    the tree when `v` joined it. Disconnected graphs yield one tree per
    component.
    """
    nodes = vertices(graph)
    in_tree = set()
    edges: List[Tuple[Node, Node, float]] = []
    queue: TernaryHeapMinPriorityQueue[Element[Node]] = TernaryHeapMinPriorityQueue()

    for root in nodes:
        if root in in_tree:
            continue
        frontier: Dict[Node, Element[Node]] = {root: Element(root, 0)}
        attach: Dict[Node, Node] = {}
        queue.insert(frontier[root])

        while queue:
            current = queue.extract_minimum()
            node = current.value
            del frontier[node]
            in_tree.add(node)
            if node in attach:
                edges.append((attach[node], node, current.priority))

            for neighbour, weight in graph.get(node, ()):
                if neighbour in in_tree:
                    continue
                element = frontier.get(neighbour)
                if element is None:
                    element = Element(neighbour, weight)
                    frontier[neighbour] = element
                    queue.insert(element)
                    attach[neighbour] = node
                elif weight < element.priority:
                    queue.decrease_priority(element, weight)
                    attach[neighbour] = node

    logger.debug("prim spanned %d nodes with %d edges", len(in_tree), len(edges))
    return edges
