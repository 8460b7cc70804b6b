"""
API client for communicating with the Video Summary AI backend.
"""

import requests
from typing import Dict, List, Any, Optional
from urllib.parse import urljoin
from app.config import config
from app.utils.helpers import extract_video_id


class ApiClient:
    """Client for interacting with the Video Summary AI API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, timeout: float = 300):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Seconds to wait for a response
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/v1/")
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    @staticmethod
    def _error_message(response: requests.Response, fallback: str) -> str:
        """Pull the server's error message out of a failed response."""
        try:
            body = response.json()
        except ValueError:
            return fallback
        if isinstance(body, dict):
            return body.get("detail") or body.get("error") or fallback
        return fallback

    def analyze_video(self, url: str) -> Dict[str, Any]:
        """
        Request an analysis of a video.

        Args:
            url: YouTube video URL

        Returns:
            Dictionary with ``analysis`` and ``video_id``, or ``error`` when the
            server rejected the request
        """
        try:
            response = requests.post(
                self._url("analyze"),
                json={"url": url},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            return {"error": f"Failed to analyze video: {str(e)}"}

        if not response.ok:
            return {
                "error": self._error_message(response, "Failed to analyze video"),
                "status_code": response.status_code,
            }

        return response.json()

    def save_analysis(self, result: Any) -> Dict[str, Any]:
        """
        Save an analysis result.

        Args:
            result: Parsed analysis dictionary or raw analysis text

        Returns:
            Dictionary with ``success`` and either ``data`` or ``error``
        """
        try:
            response = requests.post(
                self._url("analysis"),
                json={"result": result},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            return {"success": False, "error": str(e)}

        if not response.ok:
            return {"success": False, "error": self._error_message(response, "Failed to save analysis")}

        return response.json()

    def list_analyses(self, limit: int = 20) -> List[Dict[str, Any]]:
        """Get the most recently saved analyses."""
        response = requests.get(self._url("analysis"), params={"limit": limit}, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def extract_video_id(self, url: str) -> Optional[str]:
        """
        Extract YouTube video ID from a URL.

        Args:
            url: YouTube URL

        Returns:
            Video ID or None if extraction fails
        """
        return extract_video_id(url)
