"""Length, upload-day and series-vs-standalone findings for one format."""

from __future__ import annotations

import re
from typing import Dict, List, Sequence

import numpy as np

from outliers.duration import duration_seconds
from outliers.models import (
    ContentSpecs,
    OptimalLength,
    SeriesComparison,
    UploadTiming,
    VideoRecord,
)
from outliers.patterns import extract_patterns

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

SHORTS_DEFAULT_RANGE = "31-45s"
LONGFORM_DEFAULT_RANGE = "7-10 min"

SERIES_TITLE_PATTERN = re.compile(
    r"\b(?:part\s*\d+|episode\s*\d+|chapter\s*\d+|season\s*\d+|series)\b",
    re.IGNORECASE,
)
SERIES_PATTERN_TAGS = frozenset({"series", "multi-part"})
SERIES_ADVANTAGE_RATIO = 1.2


def shorts_length_bucket(seconds: int) -> str:
    if seconds <= 15:
        return "0-15s"
    if seconds <= 30:
        return "16-30s"
    if seconds <= 45:
        return "31-45s"
    if seconds <= 60:
        return "46-60s"
    return "61-180s"


def longform_length_bucket(seconds: int) -> str:
    minutes = seconds // 60
    if minutes <= 3:
        return "1-3 min"
    if minutes <= 6:
        return "4-6 min"
    if minutes <= 10:
        return "7-10 min"
    if minutes <= 15:
        return "11-15 min"
    return "15+ min"


def optimal_length(videos: Sequence[VideoRecord], is_short_form: bool) -> OptimalLength:
    """
    Best duration bucket by average views.

    Shorts buckets need two videos before they count; a single long-form video
    is enough. Ties keep the first bucket seen.
    """
    bucket_for = shorts_length_bucket if is_short_form else longform_length_bucket
    min_videos = 2 if is_short_form else 1

    buckets: Dict[str, List[int]] = {}
    for video in videos:
        buckets.setdefault(bucket_for(duration_seconds(video.duration_raw)), []).append(video.view_count)

    best_range = SHORTS_DEFAULT_RANGE if is_short_form else LONGFORM_DEFAULT_RANGE
    best_views = 0.0
    for name, views in buckets.items():
        if len(views) < min_videos:
            continue
        bucket_views = float(np.mean(views))
        if bucket_views > best_views:
            best_range, best_views = name, bucket_views

    label = "Shorts" if is_short_form else "Videos"
    return OptimalLength(
        range=best_range,
        avg_views=int(round(best_views)),
        description=f"{label} in {best_range} range perform best for this channel",
    )


def upload_timing(videos: Sequence[VideoRecord]) -> UploadTiming:
    """Rank publish weekdays by average views. Undated videos are skipped."""
    views_by_day: Dict[str, List[int]] = {}
    for video in videos:
        if video.published_at is None:
            continue
        views_by_day.setdefault(WEEKDAYS[video.published_at.weekday()], []).append(video.view_count)

    ranked = sorted(
        ((day, float(np.mean(views))) for day, views in views_by_day.items()),
        key=lambda item: item[1],
        reverse=True,
    )

    insight = "Not enough data for timing insights"
    if len(ranked) >= 3:
        best_day, best_views = ranked[0]
        worst_day, worst_views = ranked[-1]
        if worst_views > 0:
            lift = int(round((best_views - worst_views) / worst_views * 100))
            insight = f"{best_day} uploads average {lift}% more views than {worst_day}"

    return UploadTiming(
        best_days=tuple(day for day, _ in ranked[:2]),
        worst_days=tuple(day for day, _ in ranked[-2:]),
        insight=insight,
    )


def is_series_video(video: VideoRecord, pattern_tags=()) -> bool:
    return bool(SERIES_TITLE_PATTERN.search(video.title)) or bool(SERIES_PATTERN_TAGS & set(pattern_tags))


def series_vs_standalone(videos: Sequence[VideoRecord]) -> SeriesComparison:
    series = []
    standalone = []
    for video in videos:
        if is_series_video(video, extract_patterns(video.title)):
            series.append(video.view_count)
        else:
            standalone.append(video.view_count)

    series_views = float(np.mean(series)) if series else 0.0
    standalone_views = float(np.mean(standalone)) if standalone else 0.0

    recommendation = SeriesComparison().recommendation
    if len(series) >= 2 and len(standalone) >= 2:
        if series_views > standalone_views * SERIES_ADVANTAGE_RATIO:
            recommendation = "Series content performs significantly better - consider creating more multi-part content"
        elif standalone_views > series_views * SERIES_ADVANTAGE_RATIO:
            recommendation = "Standalone videos perform better - focus on complete, self-contained content"
        else:
            recommendation = "Series and standalone content perform similarly - maintain current mix"

    return SeriesComparison(
        series_performance=int(round(series_views)),
        standalone_performance=int(round(standalone_views)),
        recommendation=recommendation,
    )


def analyze_content_specs(videos: Sequence[VideoRecord], is_short_form: bool) -> ContentSpecs:
    if not videos:
        return ContentSpecs()
    return ContentSpecs(
        optimal_length=optimal_length(videos, is_short_form),
        upload_timing=upload_timing(videos),
        series_vs_standalone=series_vs_standalone(videos),
    )
