"""
Runtime configuration for the Subreddit Centrality Engine.

All values can be overridden through environment variables of the same name.
"""

import os

# Number of entries rendered per ranking
TOP_N = int(os.getenv("TOP_N", "10"))

# Scores above this percentile are flagged as high-centrality
CENTRALITY_PERCENTILE = float(os.getenv("CENTRALITY_PERCENTILE", "95"))

# Worker threads per centrality measure (1 = run inline)
CENTRALITY_WORKERS = int(os.getenv("CENTRALITY_WORKERS", "1"))

# "unweighted" (BFS, unit cost) or "weighted" (Dijkstra on edge labels)
SHORTEST_PATH_MODE = os.getenv("SHORTEST_PATH_MODE", "unweighted")

# Truncate ingestion to the first N records (0 = no limit)
MAX_EDGE_RECORDS = int(os.getenv("MAX_EDGE_RECORDS", "0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SCORE_DECIMALS = int(os.getenv("SCORE_DECIMALS", "4"))

# Column names of the hyperlink dump
SOURCE_COLUMN = "SOURCE_SUBREDDIT"
TARGET_COLUMN = "TARGET_SUBREDDIT"
LABEL_COLUMN = "LINK_SENTIMENT"
POST_ID_COLUMN = "POST_ID"
TIMESTAMP_COLUMN = "TIMESTAMP"
