"""
Graph Metrics — summary statistics for the hyperlink graph.

Time Complexity: O(V + E)
Memory: O(V + E) for the simple-graph copy
"""

from typing import Any, Dict

import networkx as nx

from core.graph.graph_model import IndexedDiGraph


def compute_graph_summary(graph: IndexedDiGraph) -> Dict[str, Any]:
    """Return basic graph-level metrics."""
    simple = nx.DiGraph(graph.to_networkx())
    return {
        "total_nodes": graph.node_count,
        "total_edges": graph.edge_count,
        "unique_edges": simple.number_of_edges(),
        "parallel_edges": graph.parallel_edge_count,
        "self_loops": graph.self_loop_count,
        "density": round(nx.density(simple), 4) if graph.node_count > 1 else 0.0,
        "num_weakly_connected_components": (
            nx.number_weakly_connected_components(simple) if graph.node_count > 0 else 0
        ),
    }
