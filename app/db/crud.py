"""
CRUD operations for the Video Summary AI database.
"""

import json
from typing import Any, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.models import VideoAnalysis
from app.utils.error_handling import PersistenceError
from app.utils.logger import logging


def serialize_result(result: Any) -> str:
    """Strings are stored as-is, anything else as JSON."""
    if isinstance(result, str):
        return result
    return json.dumps(result, ensure_ascii=False, default=str)


def save_analysis(db: Session, result: Any) -> VideoAnalysis:
    """
    Store an analysis result.

    Args:
        db: Database session
        result: AnalysisResult dict, raw model text, or any JSON-serializable value

    Returns:
        The stored VideoAnalysis row

    Raises:
        PersistenceError: the result could not be serialized or written
    """
    try:
        analysis = VideoAnalysis(result=serialize_result(result))
        db.add(analysis)
        db.commit()
        db.refresh(analysis)
    except (SQLAlchemyError, TypeError, ValueError) as e:
        db.rollback()
        logging.error(f"Error saving video analysis: {str(e)}")
        raise PersistenceError() from e

    logging.info(f"Saved video analysis {analysis.id}")
    return analysis


def get_analysis(db: Session, analysis_id: int) -> Optional[VideoAnalysis]:
    """Get a saved analysis by ID."""
    return db.query(VideoAnalysis).filter(VideoAnalysis.id == analysis_id).first()


def list_analyses(db: Session, limit: int = 20) -> List[VideoAnalysis]:
    """Get the most recently saved analyses."""
    return db.query(VideoAnalysis).order_by(
        VideoAnalysis.created_at.desc(), VideoAnalysis.id.desc()
    ).limit(limit).all()
