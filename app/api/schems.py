import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Any


class AnalyzeRequest(BaseModel):
    """Model for requesting a video analysis."""
    url: Optional[str] = None


class AnalyzeResponse(BaseModel):
    """Model for analysis responses."""
    analysis: str
    video_id: str


class SaveRequest(BaseModel):
    """Model for saving an analysis result."""
    result: Any


class SavedAnalysis(BaseModel):
    """Model for a stored analysis."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    result: str
    created_at: datetime.datetime = Field(serialization_alias="createdAt")


class SaveResponse(BaseModel):
    """Model for save responses."""
    success: bool
    data: Optional[SavedAnalysis] = None
    error: Optional[str] = None
