"""
Data models for the Video Summary AI application.
"""
from enum import Enum
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


class LLMProvider(str, Enum):
    """LLM backends that can analyze a transcript."""
    GEMINI = "gemini"
    OPENROUTER = "openrouter"


class VideoReference(BaseModel):
    """A submitted URL and the video ID found in it, if any."""
    url: str
    video_id: Optional[str] = None


class TranscriptSegment(BaseModel):
    """One caption fragment."""
    text: str
    start: float = 0.0
    duration: float = 0.0


class TranscriptData(BaseModel):
    """Full transcript for a video."""
    video_id: str
    text: str
    segments: List[TranscriptSegment] = []
    language: Optional[str] = None


class SummaryConfig(BaseModel):
    """Configuration for summarization operations."""
    provider: LLMProvider = LLMProvider.GEMINI
    model: str
    api_key: Optional[str] = None
    temperature: float = 0.2
    max_tokens: int = 2048
    timeout: float = 60.0
    site_name: str = ""
    site_url: str = ""

    @field_validator('provider', mode='before')
    def normalize_provider(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class AnalysisResult(BaseModel):
    """Structured analysis of a video transcript."""
    model_config = ConfigDict(populate_by_name=True)

    topic: str
    key_points: List[Any] = Field(alias="keyPoints")
    summary: str

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class ParseFailure(BaseModel):
    """Why a model response could not be turned into an AnalysisResult."""
    error: str
    raw: str = ""
    field: Optional[str] = None
