"""
API Routes — upload, health, and metrics endpoints.
"""

import logging

from fastapi import APIRouter, File, HTTPException, Query, UploadFile
from fastapi.responses import JSONResponse

from app.config import CENTRALITY_WORKERS, SHORTEST_PATH_MODE, TOP_N
from core.centrality.shortest_paths import MODES, NegativeWeightError
from core.graph.graph_model import MalformedGraphError
from services.processing_pipeline import InvalidEdgeRecordsError, ProcessingService
from utils.loader import read_edge_bytes
from utils.metrics import MetricsTracker

logger = logging.getLogger(__name__)

router = APIRouter()
metrics_tracker = MetricsTracker()

ACCEPTED_SUFFIXES = (".tsv", ".csv")


@router.get("/health")
async def health():
    """Return system health status."""
    return {"status": "healthy", "version": "1.0.0"}


@router.get("/metrics")
async def metrics():
    """Return processing statistics from the most recent run."""
    return metrics_tracker.get_metrics()


@router.post("/upload")
async def upload_edges(
    file: UploadFile = File(...),
    top_n: int = Query(TOP_N, ge=1),
    mode: str = Query(SHORTEST_PATH_MODE),
):
    """
    Accept a hyperlink edge file, compute closeness and betweenness
    centrality, and return the top-ranked subreddits for each.
    """
    if not file.filename or not file.filename.lower().endswith(ACCEPTED_SUFFIXES):
        raise HTTPException(status_code=400, detail="Only TSV or CSV files are accepted.")
    if mode not in MODES:
        raise HTTPException(status_code=400, detail=f"mode must be one of {list(MODES)}.")

    contents = await file.read()
    try:
        df = read_edge_bytes(contents, file.filename)
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Failed to parse edge file: {str(e)}")

    service = ProcessingService(mode=mode, workers=CENTRALITY_WORKERS, top_n=top_n)
    try:
        result = service.process(df)
    except InvalidEdgeRecordsError as e:
        metrics_tracker.record_failure(str(e))
        raise HTTPException(status_code=400, detail=str(e))
    except (MalformedGraphError, NegativeWeightError) as e:
        logger.error("Centrality run aborted: %s", e)
        metrics_tracker.record_failure(str(e))
        raise HTTPException(status_code=422, detail=str(e))

    metrics_tracker.record(result["summary"])
    return JSONResponse(content=result)
