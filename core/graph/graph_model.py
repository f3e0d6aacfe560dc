"""
Indexed Directed Graph — dense integer view of the hyperlink graph.

Node identities (subreddit names) are mapped to indices 0..N-1 in insertion
order. Edges keep their integer label and parallel edges are never merged.
Once frozen the graph is read-only and can be shared between worker threads.

Time Complexity: O(V + E) to build
Memory: O(V + E)
"""

from collections import Counter
from typing import Dict, Hashable, Iterable, List, Sequence, Tuple

import networkx as nx

Edge = Tuple[int, int]


class MalformedGraphError(ValueError):
    """An edge references a node index that does not exist, or node indices clash."""


class GraphFrozenError(RuntimeError):
    """Mutation attempted after the build phase finished."""


class IndexedDiGraph:
    """Directed multigraph with dense node indices and labelled edges."""

    def __init__(self) -> None:
        self._names: List[str] = []
        self._index: Dict[str, int] = {}
        self._adjacency: List[Sequence[Edge]] = []
        self._edge_count = 0
        self._frozen = False

    # ── Build phase ──────────────────────────────────────────────────

    def add_node(self, name: Hashable) -> int:
        """Return the index of ``name``, assigning the next free one if new."""
        key = str(name)
        if key in self._index:
            return self._index[key]
        self._check_mutable()
        idx = len(self._names)
        self._names.append(key)
        self._index[key] = idx
        self._adjacency.append([])
        return idx

    def add_edge(self, source: Hashable, target: Hashable, weight: int = 1) -> None:
        """Add one edge between two identities; duplicates become parallel edges."""
        self._check_mutable()
        u = self.add_node(source)
        v = self.add_node(target)
        self._adjacency[u].append((v, weight))
        self._edge_count += 1

    def freeze(self) -> "IndexedDiGraph":
        """End the build phase. Validates every edge endpoint."""
        if not self._frozen:
            self._adjacency = [tuple(edges) for edges in self._adjacency]
            self._frozen = True
        self.validate()
        return self

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("graph is read-only after the build phase")

    # ── Constructors ─────────────────────────────────────────────────

    @classmethod
    def from_edges(
        cls, triples: Iterable[Tuple[Hashable, Hashable, int]]
    ) -> "IndexedDiGraph":
        """Build from (source identity, target identity, weight) triples."""
        graph = cls()
        for source, target, weight in triples:
            graph.add_edge(source, target, weight)
        return graph.freeze()

    @classmethod
    def from_index_edges(
        cls,
        names: Sequence[Hashable],
        edges: Iterable[Tuple[int, int, int]],
    ) -> "IndexedDiGraph":
        """
        Build from a pre-indexed node list and (u, v, weight) index edges.

        Raises:
            MalformedGraphError: a name repeats in the node list, or an edge
                endpoint is outside it.
        """
        graph = cls()
        for name in names:
            if str(name) in graph._index:
                raise MalformedGraphError(
                    f"node {name!r} appears twice in the node list"
                )
            graph.add_node(name)
        for u, v, weight in edges:
            if not 0 <= u < len(graph._names):
                raise MalformedGraphError(
                    f"edge ({u}, {v}) references unknown source index {u}"
                )
            graph._adjacency[u].append((v, weight))
            graph._edge_count += 1
        return graph.freeze()

    @classmethod
    def from_multidigraph(
        cls, G: nx.MultiDiGraph, weight: str = "label"
    ) -> "IndexedDiGraph":
        """Convert a NetworkX multigraph, keeping node and edge order."""
        graph = cls()
        for node in G.nodes:
            graph.add_node(node)
        for u, v, data in G.edges(data=True):
            graph.add_edge(u, v, int(float(data.get(weight, 1))))
        return graph.freeze()

    # ── Read-only access ─────────────────────────────────────────────

    @property
    def node_count(self) -> int:
        return len(self._names)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    @property
    def frozen(self) -> bool:
        return self._frozen

    def nodes(self) -> range:
        return range(len(self._names))

    def identity(self, idx: int) -> str:
        return self._names[idx]

    def index_of(self, name: Hashable) -> int:
        return self._index[str(name)]

    def successors(self, idx: int) -> Sequence[Edge]:
        """Outgoing (target index, weight) pairs of ``idx``."""
        return self._adjacency[idx]

    def edges(self) -> Iterable[Tuple[int, int, int]]:
        for u, out in enumerate(self._adjacency):
            for v, weight in out:
                yield u, v, weight

    def has_self_loop(self, idx: int) -> bool:
        return any(v == idx for v, _ in self._adjacency[idx])

    @property
    def self_loop_count(self) -> int:
        return sum(1 for u, v, _ in self.edges() if u == v)

    @property
    def parallel_edge_count(self) -> int:
        """Edges beyond the first for every ordered (source, target) pair."""
        pairs = Counter((u, v) for u, v, _ in self.edges())
        return sum(count - 1 for count in pairs.values())

    def validate(self) -> None:
        """
        Check that every edge endpoint is a known node index.

        Raises:
            MalformedGraphError: on the first dangling endpoint found.
        """
        n = len(self._names)
        if len(self._adjacency) != n:
            raise MalformedGraphError(
                f"adjacency has {len(self._adjacency)} rows for {n} nodes"
            )
        for u, v, _ in self.edges():
            if not 0 <= v < n:
                raise MalformedGraphError(
                    f"edge ({u}, {v}) references unknown target index {v}"
                )

    def to_networkx(self) -> nx.MultiDiGraph:
        """Identity-keyed NetworkX copy, used for summaries and cross-checks."""
        G = nx.MultiDiGraph()
        G.add_nodes_from(self._names)
        G.add_edges_from(
            (self._names[u], self._names[v], {"label": w})
            for u, v, w in self.edges()
        )
        return G
