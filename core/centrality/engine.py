"""
Centrality Engine — runs closeness and betweenness over one frozen graph.

The two measures are independent given the graph and run side by side on a
two-thread pool. A fatal error in either (malformed graph, negative edge
weight) aborts the whole computation; callers never see one map without
the other.

Time Complexity: O(V × E) per measure, unweighted
Memory: O(V + E)
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Dict

from app.config import CENTRALITY_WORKERS, SHORTEST_PATH_MODE
from core.centrality.betweenness import compute_betweenness_centrality
from core.centrality.closeness import compute_closeness_centrality
from core.centrality.shortest_paths import MODES, WeightFn
from core.graph.graph_model import IndexedDiGraph

logger = logging.getLogger(__name__)


class CentralityResult:
    """Closeness and betweenness maps plus per-measure wall time."""

    def __init__(
        self,
        closeness: Dict[str, float],
        betweenness: Dict[str, float],
        timings: Dict[str, float],
        mode: str,
    ) -> None:
        self.closeness = closeness
        self.betweenness = betweenness
        self.timings = timings
        self.mode = mode


def _timed(label: str, timings: Dict[str, float], fn, *args, **kwargs):
    start = time.time()
    result = fn(*args, **kwargs)
    timings[label] = round(time.time() - start, 4)
    logger.info("Module [%s] took %.4f seconds", label, timings[label])
    return result


def compute_centrality(
    graph: IndexedDiGraph,
    mode: str = SHORTEST_PATH_MODE,
    workers: int = CENTRALITY_WORKERS,
    weight: WeightFn | None = None,
) -> CentralityResult:
    """
    Compute both centrality maps for ``graph``.

    Raises:
        MalformedGraphError: an edge references an unknown node index.
        NegativeWeightError: weighted mode met a negative edge cost.
        ValueError: ``mode`` is not a known shortest-path mode.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown shortest-path mode {mode!r}; expected one of {MODES}")
    graph.validate()

    logger.info(
        "Computing centrality: %d nodes, %d edges, mode=%s, workers=%d",
        graph.node_count, graph.edge_count, mode, workers,
    )
    timings: Dict[str, float] = {}

    with ThreadPoolExecutor(max_workers=2) as pool:
        closeness_future = pool.submit(
            _timed, "closeness_centrality", timings,
            compute_closeness_centrality, graph, mode, workers, weight,
        )
        betweenness_future = pool.submit(
            _timed, "betweenness_centrality", timings,
            compute_betweenness_centrality, graph, mode, workers, True, weight,
        )
        closeness = closeness_future.result()
        betweenness = betweenness_future.result()

    return CentralityResult(closeness, betweenness, timings, mode)
