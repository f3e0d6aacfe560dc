"""
Console Report — plain-text rendering of a formatted centrality report.
"""

from typing import Any, Dict, List

HEADINGS = {
    "closeness": "Top-ranked subreddits by Closeness Centrality:",
    "betweenness": "Top-ranked subreddits by Betweenness Centrality:",
}


def render_report(payload: Dict[str, Any]) -> List[str]:
    """Return the report as printable lines."""
    lines: List[str] = []
    timings = payload["summary"].get("timings_seconds", {})

    for measure in ("closeness", "betweenness"):
        label = f"{measure}_centrality"
        if label in timings:
            lines.append(f"Time to compute {measure} centrality: {timings[label]:.4f}s")
        lines.append(HEADINGS[measure])
        for entry in payload[measure]["top"]:
            lines.append(f"{entry['node']}: {entry['score']:.4f} ({entry['annotation']})")

    total = payload["summary"].get("processing_time_seconds")
    if total:
        lines.append(f"Total execution time: {total:.2f}s")
    return lines
