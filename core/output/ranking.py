"""
Ranking — top-N selection and percentile flagging of centrality scores.

Time Complexity: O(V log V) for sorting
Memory: O(V)
"""

from typing import Dict, List, Set, Tuple

import numpy as np


def rank_top_n(scores: Dict[str, float], n: int) -> List[Tuple[str, float]]:
    """Highest scores first; ties ordered by node name."""
    if n <= 0:
        return []
    ranked = sorted(scores.items(), key=lambda item: (-item[1], item[0]))
    return ranked[:n]


def flag_high_centrality(scores: Dict[str, float], percentile: float) -> Set[str]:
    """Nodes scoring above the given percentile (and above zero)."""
    if not scores:
        return set()

    values = list(scores.values())
    threshold = float(np.percentile(values, percentile))

    return {node for node, score in scores.items() if score > threshold and score > 0}
