"""Per-format baselines and outlier detection."""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from outliers.models import OutlierVideo, VideoRecord
from outliers.patterns import extract_patterns

logger = logging.getLogger(__name__)

OUTLIER_THRESHOLD = 2.0


def average_views(records: Sequence[VideoRecord]) -> float:
    """Arithmetic mean of view counts; 0 when there is nothing to average."""
    if not records:
        return 0.0
    return float(np.mean([record.view_count for record in records]))


def performance_multiplier(view_count: int, baseline: float) -> float:
    return round(view_count / baseline, 1)


def find_outliers(
    records: Sequence[VideoRecord],
    baseline: float,
    threshold: float = OUTLIER_THRESHOLD,
) -> List[OutlierVideo]:
    """
    Flag every record whose views reach threshold x baseline.

    Sorted by multiplier, highest first. Equal multipliers keep input order.
    A zero baseline means there is nothing to compare against, so no outliers.
    """
    if baseline <= 0:
        return []

    cutoff = baseline * threshold
    outliers = [
        OutlierVideo(
            record=record,
            multiplier=performance_multiplier(record.view_count, baseline),
            pattern_tags=extract_patterns(record.title),
        )
        for record in records
        if record.view_count >= cutoff
    ]
    outliers.sort(key=lambda outlier: outlier.multiplier, reverse=True)

    logger.debug(
        "%d of %d videos at or above %.1fx baseline (%.0f views)",
        len(outliers), len(records), threshold, baseline,
    )
    return outliers


def top_performers(records: Sequence[VideoRecord], limit: int = 10) -> List[VideoRecord]:
    """Highest-viewed records, ties in input order."""
    return sorted(records, key=lambda record: record.view_count, reverse=True)[:limit]
