"""
Rule-based recommendations for one format.

Rules run in a fixed priority order and the first `limit` emitted are kept.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from outliers.models import OutlierVideo, PatternInsight

STRONG_PATTERN_MULTIPLIER = 2.5
HIGH_VIEW_MARK = 100_000

GENERIC_SHORTS_RECOMMENDATION = (
    "🎯 Create more Shorts with strong hooks in the first 3 seconds and trending audio"
)
GENERIC_LONGFORM_RECOMMENDATION = (
    "📚 Focus on tutorial and how-to content for better performance"
)

PATTERN_ADVICE = (
    ("how-to", "🛠️ HOW-TO CONTENT: \"How to\" titles are among your outliers - answer the questions your audience searches for"),
    ("vs", "⚔️ COMPARISON CONTENT: \"X vs Y\" videos outperform your baseline - compare products or methods in your niche"),
)

SHORTS_PATTERN_ADVICE = (
    ("quick", "⚡ QUICK FORMAT: \"Quick\" Shorts break out - promise one fast, concrete payoff per video"),
    ("tutorial", "🎓 MICRO-TUTORIALS: Tutorial Shorts over-perform - cut one technique per Short and link the full video"),
)

LONGFORM_PATTERN_ADVICE = (
    ("complete", "📖 COMPLETE GUIDES: \"Complete\" coverage gets high engagement - build comprehensive 15+ minute videos with chapters"),
    ("minutes", "⏱️ TIME-BOUND PROMISES: \"In X minutes\" titles work for you - state the time commitment up front"),
)


def format_views(views) -> str:
    if views >= 1_000_000:
        return f"{views / 1_000_000:.1f}M"
    if views >= 1000:
        return f"{views / 1000:.0f}K"
    return str(int(views))


def empty_format_recommendation(format_name: str) -> str:
    return f"Create more {format_name.lower()} content to enable analysis"


def recommend(
    patterns: Sequence[PatternInsight],
    outliers: Sequence[OutlierVideo],
    is_short_form: bool,
    limit: int = 5,
) -> List[str]:
    """Build up to `limit` recommendations for one format."""
    if not patterns:
        generic = GENERIC_SHORTS_RECOMMENDATION if is_short_form else GENERIC_LONGFORM_RECOMMENDATION
        return [generic][:limit]

    recommendations = []
    present = {insight.pattern for insight in patterns}

    top_pattern = patterns[0]
    if top_pattern.avg_multiplier > STRONG_PATTERN_MULTIPLIER:
        recommendations.append(
            f"🏆 WINNING FORMULA: {top_pattern.description} average "
            f"{top_pattern.avg_multiplier}x your baseline across {top_pattern.video_count} videos "
            "- create 3-5 more videos using this exact pattern"
        )

    format_advice = SHORTS_PATTERN_ADVICE if is_short_form else LONGFORM_PATTERN_ADVICE
    for pattern_id, advice in PATTERN_ADVICE + format_advice:
        if pattern_id in present:
            recommendations.append(advice)

    if outliers:
        mean_outlier_views = float(np.mean([outlier.view_count for outlier in outliers]))
        if mean_outlier_views > HIGH_VIEW_MARK:
            recommendations.append(
                f"📈 BREAKOUT POTENTIAL: Your {len(outliers)} outliers average "
                f"{format_views(mean_outlier_views)} views - study their hooks and thumbnails before planning the next batch"
            )

    return recommendations[:limit]
