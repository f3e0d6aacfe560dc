"""
Betweenness Centrality — Brandes' dependency accumulation.

Each source contributes a sparse map of dependencies, accumulated by
popping the traversal's finishing order:

    delta[v] += sigma[v] / sigma[w] * (1 + delta[w])   for v in preds[w]

Totals are normalized by (N - 1)(N - 2), the number of ordered pairs of
other nodes in a directed graph. Graphs with N <= 2 have no such pairs and
score zero everywhere.

Time Complexity: O(V × E) unweighted, O(V × E + V² log V) weighted
Memory: O(V + E)
"""

import logging
from typing import Dict

from core.centrality.reduction import run_per_source
from core.centrality.shortest_paths import UNWEIGHTED, Traversal, WeightFn, explore
from core.graph.graph_model import IndexedDiGraph

logger = logging.getLogger(__name__)


def accumulate_dependencies(traversal: Traversal) -> Dict[int, float]:
    """
    Reverse pass over one traversal.

    Returns:
        {node index: dependency} for every reached node other than the
        source whose dependency is non-zero.
    """
    sigma, preds, source = traversal.sigma, traversal.predecessors, traversal.source
    delta: Dict[int, float] = dict.fromkeys(traversal.order, 0.0)
    contributions: Dict[int, float] = {}

    stack = list(traversal.order)
    while stack:
        w = stack.pop()
        # sigma[w] >= 1 for anything placed on the stack
        coeff = (1.0 + delta[w]) / sigma[w]
        for v in preds[w]:
            delta[v] += sigma[v] * coeff
        if w != source and delta[w]:
            contributions[w] = delta[w]
    return contributions


def source_dependencies(
    graph: IndexedDiGraph,
    source: int,
    mode: str = UNWEIGHTED,
    weight: WeightFn | None = None,
) -> Dict[int, float]:
    """Dependencies of every node on ``source``'s shortest paths."""
    return accumulate_dependencies(explore(graph, source, mode, weight))


def normalization_factor(node_count: int) -> float | None:
    """Divisor (N - 1)(N - 2), or None when the graph is too small for it."""
    if node_count <= 2:
        return None
    return float((node_count - 1) * (node_count - 2))


def compute_betweenness_centrality(
    graph: IndexedDiGraph,
    mode: str = UNWEIGHTED,
    workers: int = 1,
    normalized: bool = True,
    weight: WeightFn | None = None,
) -> Dict[str, float]:
    """
    Compute betweenness centrality for every node.

    Returns:
        {node identity: betweenness score}
    """
    totals = [0.0] * graph.node_count

    def _merge(_source: int, partial: Dict[int, float]) -> None:
        for node, value in partial.items():
            totals[node] += value

    run_per_source(
        graph,
        lambda source: source_dependencies(graph, source, mode, weight),
        _merge,
        workers=workers,
    )

    if normalized:
        factor = normalization_factor(graph.node_count)
        if factor is None:
            logger.debug(
                "Betweenness: %d node(s) leave no pair to pass through; all scores 0",
                graph.node_count,
            )
            totals = [0.0] * graph.node_count
        else:
            totals = [value / factor for value in totals]

    return {graph.identity(idx): value for idx, value in enumerate(totals)}
