# tmdbmatch/videos.py
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional

from .util.text import equals_ignore_case

YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v="

_TRAILER_TYPES = ("trailer", "teaser")


def is_trailer_type(site: Optional[str], video_type: Optional[str]) -> bool:
    return equals_ignore_case(site or "", "youtube") and any(
        equals_ignore_case(video_type or "", t) for t in _TRAILER_TYPES
    )


def trailer_urls(videos: Iterable[Dict[str, Any]]) -> List[str]:
    """YouTube watch URLs for the trailers/teasers in a TMDb `videos.results` list, in the given order."""
    urls: List[str] = []
    for v in videos or []:
        if not isinstance(v, dict):
            continue
        key = (v.get("key") or "").strip()
        if key and is_trailer_type(v.get("site"), v.get("type")):
            urls.append(f"{YOUTUBE_WATCH_URL}{key}")
    return urls
