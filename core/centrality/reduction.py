"""
Per-source fan-out with a single synchronized merge.

Every source node is an independent unit of work. Workers return partial
results and only the merge step touches the shared accumulator, under one
lock, so no reader ever sees a half-merged score.

Time Complexity: O(V) units of work, cost per unit set by the caller
Memory: O(workers × partial result)
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, TypeVar

from core.graph.graph_model import IndexedDiGraph

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_per_source(
    graph: IndexedDiGraph,
    work: Callable[[int], T],
    merge: Callable[[int, T], None],
    workers: int = 1,
    sources: Iterable[int] | None = None,
) -> None:
    """
    Run ``work(source)`` for every source and feed each result to ``merge``.

    ``merge`` is always called while holding the reduction lock. Any
    exception raised by a unit of work propagates to the caller and the
    remaining units are cancelled.
    """
    sources = list(graph.nodes() if sources is None else sources)
    lock = threading.Lock()

    if workers <= 1 or len(sources) <= 1:
        for source in sources:
            partial = work(source)
            with lock:
                merge(source, partial)
        return

    logger.debug("Fanning out %d sources over %d workers", len(sources), workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {pool.submit(work, source): source for source in sources}
        try:
            for future, source in futures.items():
                partial = future.result()
                with lock:
                    merge(source, partial)
        except BaseException:
            for future in futures:
                future.cancel()
            raise
