"""
Module for fetching YouTube caption transcripts.
"""

from typing import List, Optional

from youtube_transcript_api import (
    YouTubeTranscriptApi,
    TranscriptsDisabled,
    NoTranscriptFound,
    VideoUnavailable,
)

from app.models.schemas import TranscriptData, TranscriptSegment
from app.utils.error_handling import TranscriptNotFoundError, TranscriptFetchError
from app.utils.logger import logging
from app.config import config


class TranscriptFetcher:
    """Class to handle transcript retrieval for a video ID."""

    def __init__(self, languages: Optional[List[str]] = None, api: Optional[YouTubeTranscriptApi] = None):
        """
        Initialize the fetcher.

        Args:
            languages: Caption languages to try, in order of preference
            api: Transcript API client (a default one is created if None)
        """
        self.languages = languages or config.get_transcript_languages()
        self.api = api or YouTubeTranscriptApi()

    def fetch(self, video_id: str) -> TranscriptData:
        """
        Fetch the transcript for a video.

        Args:
            video_id: YouTube video ID

        Returns:
            TranscriptData with the concatenated text and the caption fragments

        Raises:
            TranscriptNotFoundError: the video has no usable transcript
            TranscriptFetchError: the transcript service failed
        """
        logging.info(f"Fetching transcript for video {video_id} (languages: {self.languages})")

        try:
            fetched = self.api.fetch(video_id, languages=self.languages)
        except (TranscriptsDisabled, NoTranscriptFound, VideoUnavailable) as e:
            logging.warning(f"No transcript for video {video_id}: {type(e).__name__}")
            raise TranscriptNotFoundError() from e
        except Exception as e:
            logging.error(f"Error fetching transcript for video {video_id}: {str(e)}")
            raise TranscriptFetchError() from e

        segments = [
            TranscriptSegment(
                text=" ".join(snippet.text.split()),
                start=snippet.start,
                duration=snippet.duration,
            )
            for snippet in fetched
        ]
        segments = [segment for segment in segments if segment.text]

        if not segments:
            logging.warning(f"Transcript for video {video_id} is empty")
            raise TranscriptNotFoundError()

        text = " ".join(segment.text for segment in segments)
        logging.info(f"Fetched transcript of {len(segments)} segments ({len(text)} chars) for video {video_id}")

        return TranscriptData(
            video_id=video_id,
            text=text,
            segments=segments,
            language=getattr(fetched, "language_code", None),
        )
