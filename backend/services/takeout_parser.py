"""Google Takeout watch-history parsing into RawVideo records."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any
from urllib.parse import parse_qs, urlparse

from pydantic import ValidationError

from config import settings
from models.schemas.raw_video import RawVideo

logger = logging.getLogger(__name__)

WATCHED_PREFIX = "Watched "
UNKNOWN_TITLE = "Unknown Title"
UNKNOWN_CHANNEL = "Unknown Channel"

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class TakeoutFormatError(ValueError):
    """The document is not a Takeout watch-history list."""


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO-8601 timestamp (trailing "Z" allowed); None if unparseable."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _video_id(title_url: Any) -> str:
    if not isinstance(title_url, str) or not title_url:
        return ""
    query = parse_qs(urlparse(title_url).query)
    return query.get("v", [""])[0]


def _channel(item: dict[str, Any]) -> tuple[str, str]:
    """(channel_id, channel_title) from the first subtitle entry."""
    subtitles = item.get("subtitles") or []
    if not isinstance(subtitles, list) or not subtitles or not isinstance(subtitles[0], dict):
        return "", UNKNOWN_CHANNEL
    first = subtitles[0]
    url = first.get("url")
    url_path = urlparse(url).path if isinstance(url, str) else ""
    channel_id = url_path.rsplit("/channel/", 1)[1] if "/channel/" in url_path else ""
    name = first.get("name")
    return channel_id, name if isinstance(name, str) and name else UNKNOWN_CHANNEL


def parse_takeout_entries(items: list[Any], limit: int | None = None) -> list[RawVideo]:
    """Convert Takeout entries to RawVideo, newest first, keeping the latest `limit`.

    Entries without a usable title are dropped.
    """
    if not isinstance(items, list):
        raise TakeoutFormatError("watch-history must be a JSON list of entries")
    if limit is None:
        limit = settings.max_history_items

    videos: list[RawVideo] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise TakeoutFormatError(f"Entry {index} is not an object")
        raw_title = item.get("title") or ""
        if not isinstance(raw_title, str):
            raise TakeoutFormatError(f"Entry {index} has a non-text title")
        title = raw_title.replace(WATCHED_PREFIX, "", 1).strip()
        if not title or title == UNKNOWN_TITLE:
            continue
        channel_id, channel_title = _channel(item)
        try:
            videos.append(RawVideo(
                id=_video_id(item.get("titleUrl")),
                title=title,
                channel_id=channel_id,
                channel_title=channel_title,
                watched_at=item.get("time") or "",
            ))
        except ValidationError as e:
            raise TakeoutFormatError(f"Entry {index} is malformed: {e}") from e

    videos.sort(key=lambda v: parse_timestamp(v.watched_at) or _EPOCH, reverse=True)
    if len(videos) > limit:
        logger.info("Sampling %d most recent of %d watch-history entries", limit, len(videos))
        videos = videos[:limit]

    logger.info("Parsed %d videos from %d Takeout entries", len(videos), len(items))
    return videos


def load_takeout_file(path: str | Path, limit: int | None = None) -> list[RawVideo]:
    """Read a watch-history.json export from disk."""
    try:
        with open(path, encoding="utf-8") as fh:
            items = json.load(fh)
    except json.JSONDecodeError as e:
        raise TakeoutFormatError(f"Invalid watch-history JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise TakeoutFormatError(f"watch-history is not UTF-8 text: {e}") from e
    except OSError as e:
        raise TakeoutFormatError(f"Cannot read watch-history file: {e}") from e
    return parse_takeout_entries(items, limit=limit)
