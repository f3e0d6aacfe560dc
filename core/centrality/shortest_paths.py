"""
Shortest-Path Explorer — single-source traversals for centrality.

Two modes:
    unweighted — breadth-first search, every edge costs one hop
    weighted   — Dijkstra over non-negative edge weights

Both produce the finishing order, distances, shortest-path counts (sigma)
and predecessor lists that Brandes' accumulation needs. Paths are edge
sequences: each parallel edge between the same pair is a separate shortest
path, and self-loops never change a distance.

Time Complexity: O(V + E) BFS, O((V + E) log V) Dijkstra
Memory: O(V)
"""

from collections import deque
from heapq import heappop, heappush
from itertools import count
from typing import Callable, Dict, List, Optional

from core.graph.graph_model import IndexedDiGraph

UNWEIGHTED = "unweighted"
WEIGHTED = "weighted"
MODES = (UNWEIGHTED, WEIGHTED)

WeightFn = Callable[[int, int, int], float]


class NegativeWeightError(ValueError):
    """Dijkstra was handed an edge with negative cost."""


class Traversal:
    """
    Result of one single-source traversal.

    ``distance`` only holds reachable nodes; use ``distance_to`` to get
    ``None`` for unreachable ones instead of a sentinel value.
    """

    def __init__(self, source: int) -> None:
        self.source = source
        self.order: List[int] = []
        self.distance: Dict[int, float] = {source: 0}
        self.sigma: Dict[int, float] = {source: 1.0}
        self.predecessors: Dict[int, List[int]] = {source: []}

    def distance_to(self, node: int) -> Optional[float]:
        return self.distance.get(node)

    def is_reachable(self, node: int) -> bool:
        return node in self.distance

    @property
    def reachable_count(self) -> int:
        """Reachable nodes, the source included."""
        return len(self.distance)

    @property
    def total_distance(self) -> float:
        return sum(self.distance.values())


def bfs_traversal(graph: IndexedDiGraph, source: int) -> Traversal:
    """Breadth-first traversal with unit edge cost."""
    result = Traversal(source)
    distance, sigma, preds = result.distance, result.sigma, result.predecessors

    queue = deque([source])
    while queue:
        v = queue.popleft()
        result.order.append(v)
        dv = distance[v]
        for w, _ in graph.successors(v):
            dw = distance.get(w)
            if dw is None:
                dw = dv + 1
                distance[w] = dw
                sigma[w] = 0.0
                preds[w] = []
                queue.append(w)
            # Shortest path to w via v, once per parallel edge
            if dw == dv + 1:
                sigma[w] += sigma[v]
                preds[w].append(v)
    return result


def label_weight(u: int, v: int, label: int) -> float:
    return float(label)


def dijkstra_traversal(
    graph: IndexedDiGraph,
    source: int,
    weight: WeightFn | None = None,
) -> Traversal:
    """
    Dijkstra traversal over non-negative edge weights.

    ``weight(u, v, label)`` gives the cost of an edge; by default the edge
    label itself. Zero-cost edges are accepted, but a predecessor settled
    after its zero-cost successor does not add to that successor's sigma.

    Raises:
        NegativeWeightError: an edge reachable from ``source`` has cost < 0.
    """
    weight = weight or label_weight
    result = Traversal(source)
    settled, sigma, preds = result.distance, result.sigma, result.predecessors
    settled.clear()

    tentative: Dict[int, float] = {source: 0.0}
    tie = count()
    heap = [(0.0, next(tie), source)]
    while heap:
        dv, _, v = heappop(heap)
        if v in settled:
            continue
        settled[v] = dv
        result.order.append(v)
        for w, label in graph.successors(v):
            if w == v:
                continue
            cost = weight(v, w, label)
            if cost < 0:
                raise NegativeWeightError(
                    f"edge {graph.identity(v)!r} -> {graph.identity(w)!r} "
                    f"has negative weight {cost}"
                )
            if w in settled:
                continue
            alt = dv + cost
            best = tentative.get(w)
            if best is None or alt < best:
                tentative[w] = alt
                sigma[w] = sigma[v]
                preds[w] = [v]
                heappush(heap, (alt, next(tie), w))
            elif alt == best:
                sigma[w] += sigma[v]
                preds[w].append(v)
    return result


def explore(
    graph: IndexedDiGraph,
    source: int,
    mode: str = UNWEIGHTED,
    weight: WeightFn | None = None,
) -> Traversal:
    """Run the traversal for ``mode`` from ``source``."""
    if mode == UNWEIGHTED:
        return bfs_traversal(graph, source)
    if mode == WEIGHTED:
        return dijkstra_traversal(graph, source, weight)
    raise ValueError(f"Unknown shortest-path mode {mode!r}; expected one of {MODES}")


def single_source_distances(
    graph: IndexedDiGraph,
    source: int,
    mode: str = UNWEIGHTED,
    weight: WeightFn | None = None,
) -> Dict[int, float]:
    """Distance map from ``source``; only reachable nodes have entries."""
    return explore(graph, source, mode, weight).distance
