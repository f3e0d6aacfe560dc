"""
Processing Pipeline — Full Pipeline Orchestrator.

Coordinates the complete centrality run:
   1. Validate hyperlink records
   2. Build directed multigraph (NetworkX) and freeze its indexed view
   3. Graph summary statistics
   4. Closeness + betweenness centrality (concurrently)
   5. Rank top-N and flag high-centrality nodes
   6. Format JSON output

Either both centrality maps are produced or the run raises before any
output is built.

Memory: O(V + E) for graph + O(V) per centrality map.
"""

import contextlib
import logging
import time
from typing import Any, Dict

import pandas as pd

from app.config import CENTRALITY_PERCENTILE, CENTRALITY_WORKERS, SHORTEST_PATH_MODE, TOP_N
from core.centrality.engine import compute_centrality
from core.graph.graph_builder import build_indexed_graph
from core.graph.graph_metrics import compute_graph_summary
from core.output.json_formatter import format_output
from utils.validators import validate_edge_records

logger = logging.getLogger(__name__)


class InvalidEdgeRecordsError(ValueError):
    """The edge table failed validation."""


@contextlib.contextmanager
def log_timer(label: str):
    start = time.time()
    yield
    elapsed = time.time() - start
    logger.info("Module [%s] took %.4f seconds", label, elapsed)


class ProcessingService:
    """Orchestrates the complete subreddit centrality pipeline."""

    def __init__(
        self,
        mode: str = SHORTEST_PATH_MODE,
        workers: int = CENTRALITY_WORKERS,
        top_n: int = TOP_N,
        percentile: float = CENTRALITY_PERCENTILE,
    ) -> None:
        self.mode = mode
        self.workers = workers
        self.top_n = top_n
        self.percentile = percentile

    def process(self, df: pd.DataFrame) -> Dict[str, Any]:
        """
        Run the full pipeline on hyperlink records.

        Returns:
            JSON-compatible dict with closeness, betweenness and summary.

        Raises:
            InvalidEdgeRecordsError: the records fail validation.
            MalformedGraphError, NegativeWeightError: fatal engine errors.
        """
        t_start = time.time()

        # 1. Validate
        validation_error = validate_edge_records(df)
        if validation_error:
            raise InvalidEdgeRecordsError(validation_error)

        # 2. Build graph
        with log_timer("graph_build"):
            graph = build_indexed_graph(df)

        # 3. Graph summary
        with log_timer("graph_summary"):
            graph_summary = compute_graph_summary(graph)
        logger.info(
            "Graph built: %d nodes, %d edges (%d parallel, %d self-loops)",
            graph_summary["total_nodes"],
            graph_summary["total_edges"],
            graph_summary["parallel_edges"],
            graph_summary["self_loops"],
        )

        # 4. Centrality
        result = compute_centrality(graph, mode=self.mode, workers=self.workers)

        # 5-6. Rank and format
        with log_timer("format_output"):
            output = format_output(
                result,
                graph_summary,
                top_n=self.top_n,
                percentile=self.percentile,
            )

        output["summary"]["processing_time_seconds"] = round(time.time() - t_start, 2)
        return output
