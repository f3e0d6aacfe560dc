"""
Closeness Centrality — reachable-set Wasserman–Faust closeness.

For every node v, with R nodes reachable from v (v included) and S the sum
of their distances:

    closeness(v) = (R - 1) / S    if S > 0
    closeness(v) = 0              otherwise (v reaches nobody)

Scores are not rescaled by the full graph size, so nodes in small
reachable sets are not penalized.

Time Complexity: O(V × (V + E)) unweighted
Memory: O(V)
"""

import logging
from typing import Dict

from core.centrality.reduction import run_per_source
from core.centrality.shortest_paths import UNWEIGHTED, Traversal, WeightFn, explore
from core.graph.graph_model import IndexedDiGraph

logger = logging.getLogger(__name__)


def closeness_from_traversal(traversal: Traversal) -> float:
    """Closeness score of the source of one traversal."""
    total = traversal.total_distance
    if total <= 0:
        return 0.0
    return (traversal.reachable_count - 1) / total


def node_closeness(
    graph: IndexedDiGraph,
    source: int,
    mode: str = UNWEIGHTED,
    weight: WeightFn | None = None,
) -> float:
    """Closeness score of a single node."""
    return closeness_from_traversal(explore(graph, source, mode, weight))


def compute_closeness_centrality(
    graph: IndexedDiGraph,
    mode: str = UNWEIGHTED,
    workers: int = 1,
    weight: WeightFn | None = None,
) -> Dict[str, float]:
    """
    Compute closeness centrality for every node.

    Returns:
        {node identity: closeness score}
    """
    scores: Dict[str, float] = {}

    def _merge(source: int, score: float) -> None:
        scores[graph.identity(source)] = score

    run_per_source(
        graph,
        lambda source: node_closeness(graph, source, mode, weight),
        _merge,
        workers=workers,
    )

    isolated = sum(1 for score in scores.values() if score == 0.0)
    logger.debug("Closeness: %d of %d nodes reach no other node", isolated, len(scores))
    return scores
