"""
Rank subreddits by closeness and betweenness centrality.

Usage:
  python scripts/rank_subreddits.py --input soc-redditHyperlinks-body.tsv --top-n 10
"""

import argparse
import logging
import os
import sys
import time

# Resolve project imports no matter where script is run from.
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from app.config import CENTRALITY_WORKERS, LOG_LEVEL, SHORTEST_PATH_MODE, TOP_N  # noqa: E402
from core.centrality.shortest_paths import MODES, NegativeWeightError  # noqa: E402
from core.graph.graph_model import MalformedGraphError  # noqa: E402
from core.output.console_report import render_report  # noqa: E402
from services.processing_pipeline import InvalidEdgeRecordsError, ProcessingService  # noqa: E402
from utils.loader import read_edge_records  # noqa: E402

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Rank subreddits by centrality.")
    parser.add_argument("--input", required=True, help="Path to the hyperlink TSV/CSV file.")
    parser.add_argument("--top-n", type=int, default=TOP_N, help=f"Entries per ranking (default: {TOP_N}).")
    parser.add_argument("--mode", choices=MODES, default=SHORTEST_PATH_MODE, help="Shortest-path mode.")
    parser.add_argument("--workers", type=int, default=CENTRALITY_WORKERS, help="Worker threads per measure.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s: %(message)s")

    if not os.path.exists(args.input):
        print(f"Error: file not found: {args.input}")
        return 1

    start = time.time()
    df = read_edge_records(args.input)
    print(f"Time to read file: {time.time() - start:.2f}s ({len(df)} records)")

    service = ProcessingService(mode=args.mode, workers=args.workers, top_n=args.top_n)
    try:
        result = service.process(df)
    except InvalidEdgeRecordsError as e:
        print(f"Error: {e}")
        return 1
    except (MalformedGraphError, NegativeWeightError) as e:
        logger.error("Centrality run aborted: %s", e)
        return 1

    for line in render_report(result):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
