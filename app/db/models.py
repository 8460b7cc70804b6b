"""
SQLAlchemy models for the Video Summary AI database.
"""

import datetime
from sqlalchemy import Column, Text, DateTime, Integer

from app.db.database import Base


class VideoAnalysis(Base):
    """Model representing a saved analysis result."""
    __tablename__ = "video_analyses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    result = Column(Text, nullable=False)  # Serialized AnalysisResult or raw model text
    created_at = Column(DateTime, default=datetime.datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<VideoAnalysis(id={self.id}, created_at='{self.created_at}')>"
