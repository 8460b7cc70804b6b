"""
Helper utility functions for the Video Summary AI application.
"""

import math
import re
import time
from typing import Optional
from urllib.parse import urlparse, parse_qs


VIDEO_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{11}$")

# Hosts where the ID is carried in the ``v`` query parameter
QUERY_DOMAINS = {
    "youtube.com",
    "www.youtube.com",
    "m.youtube.com",
    "music.youtube.com",
    "gaming.youtube.com",
}

# Hosts and path prefixes where the ID is a path segment
SHORT_DOMAINS = {"youtu.be", "www.youtu.be"}
PATH_PREFIXES = ("embed", "v", "shorts", "live")


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL.

    Accepts full watch URLs, short ``youtu.be`` links, embed/shorts/live paths
    and a bare 11 character ID. Never raises.

    Args:
        url: Anything the user typed into the URL field

    Returns:
        The 11 character video ID, or None when no ID could be found
    """
    if not isinstance(url, str):
        return None

    candidate = url.strip()
    if not candidate:
        return None

    if VIDEO_ID_PATTERN.match(candidate):
        return candidate

    if "://" not in candidate:
        candidate = "https://" + candidate

    try:
        parsed = urlparse(candidate)
        host = (parsed.hostname or "").lower()
    except ValueError:
        return None

    video_id = None
    segments = [segment for segment in parsed.path.split("/") if segment]

    if host in SHORT_DOMAINS:
        video_id = segments[0] if segments else None
    elif host in QUERY_DOMAINS:
        video_id = parse_qs(parsed.query).get("v", [None])[0]
        if not video_id and len(segments) >= 2 and segments[0] in PATH_PREFIXES:
            video_id = segments[1]
    else:
        return None

    if not video_id:
        return None

    video_id = video_id[:11]
    if not VIDEO_ID_PATTERN.match(video_id):
        return None

    return video_id


def embed_url(video_id: str) -> str:
    """Get the embeddable player URL for a video ID."""
    return f"https://www.youtube.com/embed/{video_id}"


def get_timestamp() -> str:
    """
    Get the current timestamp in a readable format.

    Returns:
        Formatted timestamp string
    """
    return time.strftime("%Y%m%d_%H%M%S")


def estimate_read_minutes(text: str, chars_per_minute: int = 1500) -> int:
    """Rough reading time in minutes, never below one."""
    return max(1, math.ceil(len(text or "") / chars_per_minute))


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix
