"""Group outliers by title pattern and rank the resulting insights."""

from __future__ import annotations

from typing import Dict, List, Sequence

import numpy as np

from outliers.config import MIN_PATTERN_SUPPORT_FLOOR
from outliers.models import OutlierVideo, PatternInsight
from outliers.patterns import describe_pattern


def build_pattern_insight(
    pattern: str,
    supporting: Sequence[OutlierVideo],
    max_examples: int = 3,
) -> PatternInsight:
    """
    Summarize the outliers that share a pattern.

    `supporting` is expected in outlier order (multiplier descending), so the
    first entries double as the strongest examples.
    """
    multipliers = [outlier.multiplier for outlier in supporting]
    views = [outlier.view_count for outlier in supporting]
    return PatternInsight(
        pattern=pattern,
        description=describe_pattern(pattern),
        video_count=len(supporting),
        avg_multiplier=round(float(np.mean(multipliers)), 1) if multipliers else 0.0,
        avg_views=int(round(float(np.mean(views)))) if views else 0,
        examples=tuple(outlier.title for outlier in supporting[:max_examples]),
        top_example_id=supporting[0].id if supporting else "",
    )


def aggregate_patterns(
    outliers: Sequence[OutlierVideo],
    min_support: int = MIN_PATTERN_SUPPORT_FLOOR,
    max_patterns: int = 10,
    max_examples: int = 3,
) -> List[PatternInsight]:
    # dict keeps first-seen order, which makes ranking ties deterministic
    grouped: Dict[str, List[OutlierVideo]] = {}
    for outlier in outliers:
        for tag in outlier.pattern_tags:
            grouped.setdefault(tag, []).append(outlier)

    floor = max(min_support, MIN_PATTERN_SUPPORT_FLOOR)
    insights = [
        build_pattern_insight(pattern, supporting, max_examples)
        for pattern, supporting in grouped.items()
        if len(supporting) >= floor
    ]
    insights.sort(key=lambda insight: insight.avg_multiplier, reverse=True)
    return insights[:max_patterns]
