"""Turn fetched video dicts into validated VideoRecord values."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional

from dateutil import parser as dateparser

from outliers.errors import RecordValidationError
from outliers.models import VideoRecord


def parse_published_at(raw_value) -> Optional[datetime]:
    """Parse a publish timestamp into naive UTC; None when missing or unreadable."""
    if isinstance(raw_value, datetime):
        parsed = raw_value
    elif not raw_value:
        return None
    else:
        try:
            parsed = dateparser.parse(str(raw_value))
        except (ValueError, OverflowError):
            return None
    if parsed.tzinfo:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _view_count(video: Dict, video_id: str) -> int:
    stats = video.get("statistics")
    raw = stats.get("viewCount") if isinstance(stats, dict) else video.get("viewCount")
    if raw is None:
        raise RecordValidationError("viewCount is missing", video_id)
    if isinstance(raw, bool):
        raise RecordValidationError(f"viewCount must be an integer, got {raw!r}", video_id)
    try:
        views = int(raw)
    except (TypeError, ValueError) as exc:
        raise RecordValidationError(f"viewCount must be an integer, got {raw!r}", video_id) from exc
    if views < 0:
        raise RecordValidationError(f"viewCount must be non-negative, got {views}", video_id)
    return views


def record_from_video(video: Dict) -> VideoRecord:
    """
    Build a VideoRecord from one fetched video.

    Accepts the fetch step's layout (views under `statistics.viewCount`) and a
    flat layout with a top-level `viewCount`. `isShort` is carried over when
    present so an upstream classification is never recomputed.
    """
    if not isinstance(video, dict):
        raise RecordValidationError(f"video must be an object, got {type(video).__name__}")

    video_id = video.get("id")
    if not video_id or not isinstance(video_id, str):
        raise RecordValidationError("id is missing")

    title = video.get("title")
    if not isinstance(title, str):
        raise RecordValidationError("title must be a string", video_id)

    is_short = video.get("isShort")
    if is_short is not None and not isinstance(is_short, bool):
        raise RecordValidationError(f"isShort must be a boolean, got {is_short!r}", video_id)

    return VideoRecord(
        id=video_id,
        title=title,
        view_count=_view_count(video, video_id),
        duration_raw=str(video.get("duration") or ""),
        published_at=parse_published_at(video.get("publishedAt")),
        is_short_form=is_short,
        description=str(video.get("description") or ""),
    )


def records_from_raw_data(raw_data: Dict) -> List[VideoRecord]:
    """Validate every video in a raw_data.json payload."""
    videos = raw_data.get("videos")
    if videos is None:
        raise RecordValidationError("raw data has no 'videos' list")
    if not isinstance(videos, list):
        raise RecordValidationError("'videos' must be a list")
    return [record_from_video(video) for video in videos]
