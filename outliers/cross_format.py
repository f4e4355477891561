"""Insights that compare long-form and Shorts performance."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional, Sequence

import numpy as np

from outliers.models import FormatAnalysis
from outliers.recommendations import format_views

FORMAT_ADVANTAGE_RATIO = 1.5
TOPIC_OVERLAP_DEPTH = 3

DAILY_UPLOAD_TARGET = 7
DEFAULT_HISTORY_WEEKS = 12
SHORTS_HEAVY_RATIO = 0.8
LONGFORM_HEAVY_RATIO = 0.3
FORMAT_REPLICATION_RATIO = 3
TOPIC_BREADTH = 5
MOBILE_TITLE_LENGTH = 70
RECENT_OUTLIER_WINDOW = timedelta(days=30)
EVERGREEN_MONTHS = 6


def _shared_topics(longform: FormatAnalysis, shorts: FormatAnalysis) -> List[str]:
    longform_topics = [t.topic for t in longform.best_performing_topics[:TOPIC_OVERLAP_DEPTH]]
    shorts_topics = [t.topic.lower() for t in shorts.best_performing_topics[:TOPIC_OVERLAP_DEPTH]]
    return [
        topic for topic in longform_topics
        if any(other in topic.lower() or topic.lower() in other for other in shorts_topics)
    ]


def cross_insights(
    longform: FormatAnalysis,
    shorts: FormatAnalysis,
    limit: int = 5,
) -> List[str]:
    """Compare the two formats: view ratio, shared topics, then repurposing."""
    insights = []

    if shorts.average_views > 0 and shorts.average_views >= longform.average_views * FORMAT_ADVANTAGE_RATIO:
        insights.append(
            f"Shorts average {format_views(shorts.average_views)} views vs "
            f"{format_views(longform.average_views)} for long-form - focus more on Shorts"
        )
    elif longform.average_views > 0 and longform.average_views >= shorts.average_views * FORMAT_ADVANTAGE_RATIO:
        insights.append(
            f"Long-form videos average {format_views(longform.average_views)} views vs "
            f"{format_views(shorts.average_views)} for Shorts - long-form content resonates better"
        )

    shared = _shared_topics(longform, shorts)
    if shared:
        insights.append(
            f"Topics that work well in both formats: {', '.join(shared[:2])} - create more content around these"
        )

    if longform.outliers and shorts.total_videos < longform.total_videos * 0.5:
        insights.append("Turn your best long-form content into Short clips for wider reach")

    if shorts.outliers and longform.total_videos < shorts.total_videos:
        insights.append("Expand your best Shorts into detailed long-form tutorials")

    return insights[:limit]


def uploads_per_week(total_videos: int, published_times: Sequence[datetime]) -> float:
    """
    Upload rate over the batch's publish span.

    Without at least two timestamps the batch is assumed to cover twelve weeks.
    Spans shorter than a week count as one week.
    """
    if len(published_times) >= 2:
        span_days = (max(published_times) - min(published_times)).total_seconds() / 86400
        weeks = max(span_days / 7, 1.0)
    else:
        weeks = DEFAULT_HISTORY_WEEKS
    return total_videos / weeks


def enhanced_combined_insights(
    longform: FormatAnalysis,
    shorts: FormatAnalysis,
    limit: int = 6,
    published_times: Sequence[datetime] = (),
) -> List[str]:
    """
    Channel-level strategy notes across both formats.

    `published_times` holds every publish timestamp in the batch. Its newest
    entry anchors the recency and age checks so results never depend on the
    wall clock. Without timestamps those two checks are skipped.
    """
    total_videos = longform.total_videos + shorts.total_videos
    if total_videos == 0:
        return []

    insights = []
    outliers = (*longform.outliers, *shorts.outliers)
    anchor: Optional[datetime] = max(published_times) if published_times else None

    weekly = uploads_per_week(total_videos, published_times)
    if weekly < DAILY_UPLOAD_TARGET:
        insights.append(
            f"📊 VOLUME OPPORTUNITY: Currently {weekly:.1f} uploads/week - posting daily (7+/week) "
            "gives more videos the chance to break out"
        )

    shorts_ratio = shorts.total_videos / total_videos
    if shorts_ratio > SHORTS_HEAVY_RATIO:
        insights.append(
            "💰 MONETIZATION OPTIMIZATION: Over 80% of uploads are Shorts - add long-form videos "
            "for higher RPM while Shorts keep building the audience"
        )
    elif shorts_ratio < LONGFORM_HEAVY_RATIO:
        insights.append(
            "🚀 REACH EXPANSION: Uploads lean heavily on long-form - aim for a 70/30 Shorts-to-long-form "
            "mix to reach more viewers"
        )

    if shorts.average_views > longform.average_views * FORMAT_REPLICATION_RATIO:
        insights.append(
            "⚡ FORMAT REPLICATION: Shorts average more than 3x long-form views - carry what works "
            "in your Shorts over to long-form"
        )

    if outliers:
        insights.append(
            "🎯 SYSTEMATIC SCALING: Your outliers point to repeatable patterns - turn their winning "
            "elements into a production checklist"
        )

    if anchor is not None:
        recent = [
            outlier
            for outlier in outliers
            if outlier.published_at is not None and anchor - outlier.published_at <= RECENT_OUTLIER_WINDOW
        ]
        if recent:
            insights.append(
                f"🔥 TREND CAPITALIZATION: {len(recent)} outlier(s) published in the last 30 days - "
                "test the same format again while the momentum lasts"
            )

    topics = {t.topic for t in (*longform.best_performing_topics, *shorts.best_performing_topics)}
    if len(topics) > TOPIC_BREADTH:
        insights.append(
            f"🏰 COMPETITIVE MOAT: {len(topics)} distinct topics perform well - invest in the "
            "harder-to-copy content around them"
        )

    title_lengths = [
        analysis.title_analysis.avg_title_length
        for analysis in (longform, shorts)
        if analysis.total_videos
    ]
    avg_title_length = float(np.mean(title_lengths))
    if avg_title_length > MOBILE_TITLE_LENGTH:
        insights.append(
            f"📱 MOBILE OPTIMIZATION: Average title length is {avg_title_length:.0f} characters - "
            "keep titles under 60 characters so they are not cut off on mobile"
        )

    dated = [outlier.published_at for outlier in outliers if outlier.published_at is not None]
    if anchor is not None and dated:
        months_old = (anchor - min(dated)).days / 30
        if months_old > EVERGREEN_MONTHS:
            insights.append(
                f"♻️ CONTENT RECYCLING: Your oldest outlier is {months_old:.0f} months old - "
                "repackage older hits with modern editing"
            )

    return insights[:limit]
