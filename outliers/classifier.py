"""
Short-form vs long-form classification.

Tiered rule, first match wins:
- duration <= 60s => Shorts
- duration 61-180s => Shorts only with textual corroboration, checked as
  hashtag, then format indicator, then vertical-format hint
- otherwise => long-form
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Iterable, List, Tuple

from outliers.duration import duration_seconds
from outliers.models import VideoRecord

SHORTS_MAX_DURATION = 60
AMBIGUOUS_MAX_DURATION = 180

TIER_DURATION = "duration"
TIER_HASHTAG = "hashtag"
TIER_FORMAT_INDICATOR = "format-indicator"
TIER_VERTICAL_HINT = "vertical-hint"
TIER_LONG_FORM = "long-form"

SHORTS_HASHTAG_PATTERN = re.compile(
    r"(?<![\w#])#(?:youtubeshorts|shortsvideo|shortform|shorts|short)(?![\w-])",
    re.IGNORECASE,
)

FORMAT_INDICATOR_PATTERNS = (
    re.compile(r"\bvertical\b", re.IGNORECASE),
    re.compile(r"\breels?\b", re.IGNORECASE),
    re.compile(r"\bpov:", re.IGNORECASE),
    re.compile(r"\bwhen you\b", re.IGNORECASE),
    re.compile(r"\bquick tip", re.IGNORECASE),
    re.compile(r"\d+\s*sec", re.IGNORECASE),
    re.compile(r"\bfast tutorial\b", re.IGNORECASE),
    re.compile(r"\bshort version\b", re.IGNORECASE),
)

VERTICAL_HINT_PATTERNS = (
    re.compile(r"\bmobile[\s-]first\b", re.IGNORECASE),
    re.compile(r"(?<!\d)9:16(?!\d)"),
    re.compile(r"\bportrait mode\b", re.IGNORECASE),
)


def _haystack(title, description) -> str:
    return f"{title or ''} {description or ''}"


def classification_tier(duration, title="", description="") -> str:
    """Return the name of the tier that decided the format."""
    if duration <= SHORTS_MAX_DURATION:
        return TIER_DURATION
    if duration > AMBIGUOUS_MAX_DURATION:
        return TIER_LONG_FORM

    text = _haystack(title, description)
    if SHORTS_HASHTAG_PATTERN.search(text):
        return TIER_HASHTAG
    if any(pattern.search(text) for pattern in FORMAT_INDICATOR_PATTERNS):
        return TIER_FORMAT_INDICATOR
    if any(pattern.search(text) for pattern in VERTICAL_HINT_PATTERNS):
        return TIER_VERTICAL_HINT
    return TIER_LONG_FORM


def classify(duration, title="", description="") -> bool:
    """True when the video is short-form."""
    return classification_tier(duration, title, description) != TIER_LONG_FORM


def classify_record(record: VideoRecord) -> VideoRecord:
    """Return the record with its format flag set. An existing flag is kept."""
    if record.is_short_form is not None:
        return record
    is_short = classify(duration_seconds(record.duration_raw), record.title, record.description)
    return replace(record, is_short_form=is_short)


def partition_by_format(records: Iterable[VideoRecord]) -> Tuple[List[VideoRecord], List[VideoRecord]]:
    """Split records into (long-form, shorts), preserving input order."""
    long_form_videos = []
    shorts_videos = []
    for record in records:
        classified = classify_record(record)
        if classified.is_short_form:
            shorts_videos.append(classified)
        else:
            long_form_videos.append(classified)
    return long_form_videos, shorts_videos
