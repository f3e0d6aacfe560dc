"""
FastAPI application for the Subreddit Centrality Engine.

Endpoints:
    POST /upload  — Accept a hyperlink TSV/CSV, return centrality rankings
    GET  /health  — System health check
    GET  /metrics — Processing statistics
"""

import logging

from fastapi import FastAPI

from api.routes import router
from app.config import LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Subreddit Centrality Engine",
    description="Ranks subreddits by closeness and betweenness centrality in the hyperlink network.",
    version="1.0.0",
)

app.include_router(router)
