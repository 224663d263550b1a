"""Ingestion output: a single watched-video record before classification."""

from pydantic import BaseModel


class RawVideo(BaseModel):
    """A watch-history entry as supplied by Takeout parsing or a catalog fetch."""

    model_config = {"frozen": True}

    id: str = ""
    title: str
    channel_id: str = ""
    channel_title: str = ""
    description: str = ""
    tags: list[str] = []
    category_id: str | None = None  # YouTube taxonomy id, e.g. "28"
    published_at: str = ""
    watched_at: str = ""  # ISO-8601
    thumbnail_url: str | None = None
