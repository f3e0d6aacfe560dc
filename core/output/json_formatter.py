"""
JSON Output Formatter.

Produces the report structure:
{
    "closeness": {"top": [...], "high_centrality": [...]},
    "betweenness": {"top": [...], "high_centrality": [...]},
    "summary": {...}
}

Time Complexity: O(V log V) for sorting
Memory: O(V)
"""

from typing import Any, Dict, List

from app.config import CENTRALITY_PERCENTILE, SCORE_DECIMALS, TOP_N
from core.centrality.engine import CentralityResult
from core.output.ranking import flag_high_centrality, rank_top_n

ANNOTATIONS = {
    "closeness": "hub-like or generalist",
    "betweenness": "bridge between communities",
}


def _format_measure(
    measure: str,
    scores: Dict[str, float],
    top_n: int,
    percentile: float,
) -> Dict[str, Any]:
    top: List[Dict[str, Any]] = [
        {
            "rank": rank,
            "node": node,
            "score": round(score, SCORE_DECIMALS),
            "annotation": ANNOTATIONS[measure],
        }
        for rank, (node, score) in enumerate(rank_top_n(scores, top_n), start=1)
    ]
    return {
        "top": top,
        "high_centrality": sorted(flag_high_centrality(scores, percentile)),
    }


def format_output(
    result: CentralityResult,
    graph_summary: Dict[str, Any],
    top_n: int = TOP_N,
    percentile: float = CENTRALITY_PERCENTILE,
) -> Dict[str, Any]:
    """Build the final JSON-compatible output dict."""
    summary = {
        **graph_summary,
        "shortest_path_mode": result.mode,
        "timings_seconds": dict(result.timings),
        "processing_time_seconds": 0.0,
    }
    return {
        "closeness": _format_measure("closeness", result.closeness, top_n, percentile),
        "betweenness": _format_measure("betweenness", result.betweenness, top_n, percentile),
        "summary": summary,
    }
