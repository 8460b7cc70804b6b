"""
API routes for the Video Summary AI application.
"""

import traceback
from typing import List
from fastapi import APIRouter, HTTPException, Depends, Query, Path
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.api.schems import (
    AnalyzeRequest,
    AnalyzeResponse,
    SaveRequest,
    SaveResponse,
    SavedAnalysis,
)
from app.db.crud import save_analysis, get_analysis, list_analyses
from app.db.database import get_db, DBSession
from app.utils.error_handling import VideoAnalysisError, PersistenceError
from app.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["analysis"])


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_video(request: AnalyzeRequest):
    """
    Analyze a YouTube video by URL.

    - 400 when the URL is missing or has no video ID
    - 404 when the video has no transcript
    - 500 for any other failure
    """
    from app.main import analyze_youtube_video

    try:
        result = await run_in_threadpool(analyze_youtube_video, request.url)
    except VideoAnalysisError as e:
        if e.status_code >= 500:
            logging.error(f"Error analyzing video: {e.message}")
            logging.error(traceback.format_exc())
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logging.error(f"Error analyzing video: {str(e)}")
        logging.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail="Failed to analyze video")

    return AnalyzeResponse(**result)


@router.post("/analysis", response_model=SaveResponse, response_model_exclude_none=True)
async def save_video_analysis(request: SaveRequest, db: DBSession = Depends(get_db)):
    """Save an analysis result."""
    try:
        analysis = await run_in_threadpool(save_analysis, db, request.result)
    except PersistenceError as e:
        return JSONResponse(status_code=500, content={"success": False, "error": e.message})
    except Exception as e:
        logging.error(f"Error saving analysis: {str(e)}")
        logging.error(traceback.format_exc())
        return JSONResponse(status_code=500, content={"success": False, "error": PersistenceError.default_message})

    return SaveResponse(success=True, data=SavedAnalysis.model_validate(analysis))


@router.get("/analysis", response_model=List[SavedAnalysis])
async def get_saved_analyses(
    limit: int = Query(20, ge=1, le=100),
    db: DBSession = Depends(get_db),
):
    """List the most recently saved analyses."""
    return [SavedAnalysis.model_validate(a) for a in list_analyses(db, limit)]


@router.get("/analysis/{analysis_id}", response_model=SavedAnalysis)
async def get_saved_analysis(
    analysis_id: int = Path(..., description="Saved analysis ID"),
    db: DBSession = Depends(get_db),
):
    """Get one saved analysis by ID."""
    analysis = get_analysis(db, analysis_id)
    if not analysis:
        raise HTTPException(status_code=404, detail="Analysis not found")
    return SavedAnalysis.model_validate(analysis)
