"""
Outlier Pattern Analyzer

Runs the per-format pipeline (baseline, outliers, title patterns,
recommendations, topics, title and content findings) for long-form and
Shorts, then compares the two.

Every call is independent: the analyzer holds only its configuration and
returns a new immutable AnalysisResult.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence

from outliers.aggregator import aggregate_patterns
from outliers.classifier import partition_by_format
from outliers.config import AnalysisConfig
from outliers.content_specs import analyze_content_specs
from outliers.cross_format import cross_insights, enhanced_combined_insights
from outliers.models import AnalysisResult, CombinedInsights, FormatAnalysis, VideoRecord
from outliers.recommendations import empty_format_recommendation, recommend
from outliers.stats import average_views, find_outliers, top_performers
from outliers.titles import analyze_titles
from outliers.topics import best_performing_topics

logger = logging.getLogger(__name__)

LONGFORM = "Long-form"
SHORTS = "Shorts"
# title and content findings look at the highest-viewed videos
TOP_PERFORMER_SAMPLE = 10


def _with_format_flag(videos: Sequence[VideoRecord], is_short: bool) -> List[VideoRecord]:
    """Stamp unflagged records with the format list they were passed in."""
    return [
        video if video.is_short_form is not None else replace(video, is_short_form=is_short)
        for video in videos
    ]


class OutlierPatternAnalyzer:
    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def analyze_format(self, videos: Sequence[VideoRecord], format_name: str) -> FormatAnalysis:
        """Analyze one format's videos in isolation."""
        if not videos:
            logger.info("No %s videos to analyze", format_name.lower())
            return FormatAnalysis(
                total_videos=0,
                average_views=0.0,
                recommendations=(empty_format_recommendation(format_name),),
            )

        config = self.config
        baseline = average_views(videos)
        outliers = find_outliers(videos, baseline, config.outlier_threshold)
        patterns = aggregate_patterns(
            outliers,
            min_support=config.min_pattern_support,
            max_patterns=config.max_patterns,
            max_examples=config.max_pattern_examples,
        )
        recommendations = recommend(
            patterns, outliers, format_name == SHORTS, limit=config.max_recommendations
        )
        topics = best_performing_topics(videos, max_topics=config.max_topics)
        top_videos = top_performers(videos, TOP_PERFORMER_SAMPLE)

        logger.info(
            "%s: %d videos, baseline %.0f views, %d outliers, %d patterns",
            format_name, len(videos), baseline, len(outliers), len(patterns),
        )

        return FormatAnalysis(
            total_videos=len(videos),
            average_views=baseline,
            outliers=tuple(outliers[:config.max_outliers]),
            patterns=tuple(patterns),
            recommendations=tuple(recommendations),
            best_performing_topics=tuple(topics),
            outlier_count=len(outliers),
            title_analysis=analyze_titles(top_videos),
            content_specs=analyze_content_specs(top_videos, format_name == SHORTS),
        )

    def analyze(
        self,
        longform_videos: Sequence[VideoRecord],
        shorts_videos: Sequence[VideoRecord],
    ) -> AnalysisResult:
        longform_videos = _with_format_flag(longform_videos, False)
        shorts_videos = _with_format_flag(shorts_videos, True)
        longform = self.analyze_format(longform_videos, LONGFORM)
        shorts = self.analyze_format(shorts_videos, SHORTS)

        published = [
            video.published_at
            for video in (*longform_videos, *shorts_videos)
            if video.published_at is not None
        ]
        insights = cross_insights(longform, shorts, limit=self.config.max_cross_format_insights)
        enhanced = enhanced_combined_insights(
            longform,
            shorts,
            limit=self.config.max_enhanced_insights,
            published_times=published,
        )

        return AnalysisResult(
            longform=longform,
            shorts=shorts,
            combined=CombinedInsights(
                total_videos=len(longform_videos) + len(shorts_videos),
                cross_format_insights=tuple(insights),
                enhanced_insights=tuple(enhanced),
            ),
        )

    def analyze_videos(self, records: Iterable[VideoRecord]) -> AnalysisResult:
        """Classify unpartitioned records, then analyze both formats."""
        longform_videos, shorts_videos = partition_by_format(records)
        logger.info(
            "Classified %d long-form and %d Shorts videos",
            len(longform_videos), len(shorts_videos),
        )
        return self.analyze(longform_videos, shorts_videos)


def analyze(
    longform_videos: Sequence[VideoRecord],
    shorts_videos: Sequence[VideoRecord],
    config: Optional[AnalysisConfig] = None,
) -> AnalysisResult:
    return OutlierPatternAnalyzer(config).analyze(longform_videos, shorts_videos)
