"""Serializer helpers for analysis output."""

from __future__ import annotations

from outliers.models import (
    AnalysisResult,
    ContentSpecs,
    FormatAnalysis,
    OutlierVideo,
    PatternInsight,
    TitleAnalysis,
    TopicInsight,
)



def outlier_to_dict(outlier: OutlierVideo) -> dict:
    record = outlier.record
    return {
        "id": record.id,
        "title": record.title,
        "viewCount": record.view_count,
        "duration": record.duration_raw,
        "isShort": bool(record.is_short_form),
        "publishedAt": record.published_at.isoformat() if record.published_at else None,
        "videoUrl": record.video_url,
        "multiplier": outlier.multiplier,
        "patternTags": list(outlier.pattern_tags),
    }


def pattern_to_dict(insight: PatternInsight) -> dict:
    return {
        "pattern": insight.pattern,
        "description": insight.description,
        "videoCount": insight.video_count,
        "avgMultiplier": insight.avg_multiplier,
        "avgViews": insight.avg_views,
        "examples": list(insight.examples),
        "topPerformingExampleId": insight.top_example_id,
    }


def topic_to_dict(insight: TopicInsight) -> dict:
    return {
        "topic": insight.topic,
        "avgViews": insight.avg_views,
        "count": insight.count,
        "examples": list(insight.examples),
    }


def title_analysis_to_dict(analysis: TitleAnalysis) -> dict:
    return {
        "avgTitleLength": analysis.avg_title_length,
        "mostCommonWords": [
            {"word": stat.word, "count": stat.count, "avgViews": stat.avg_views}
            for stat in analysis.most_common_words
        ],
        "titleFormats": [
            {
                "format": stat.format,
                "count": stat.count,
                "avgViews": stat.avg_views,
                "examples": list(stat.examples),
            }
            for stat in analysis.title_formats
        ],
    }


def content_specs_to_dict(specs: ContentSpecs) -> dict:
    length = specs.optimal_length
    timing = specs.upload_timing
    series = specs.series_vs_standalone
    return {
        "optimalLength": {
            "range": length.range,
            "avgViews": length.avg_views,
            "description": length.description,
        },
        "uploadTiming": {
            "bestDays": list(timing.best_days),
            "worstDays": list(timing.worst_days),
            "insight": timing.insight,
        },
        "seriesVsStandalone": {
            "seriesPerformance": series.series_performance,
            "standalonePerformance": series.standalone_performance,
            "recommendation": series.recommendation,
        },
    }


def format_analysis_to_dict(analysis: FormatAnalysis) -> dict:
    return {
        "totalVideos": analysis.total_videos,
        "averageViews": round(analysis.average_views, 1),
        "outlierCount": analysis.outlier_count,
        "outliers": [outlier_to_dict(outlier) for outlier in analysis.outliers],
        "patterns": [pattern_to_dict(insight) for insight in analysis.patterns],
        "recommendations": list(analysis.recommendations),
        "bestPerformingTopics": [topic_to_dict(topic) for topic in analysis.best_performing_topics],
        "titleAnalysis": title_analysis_to_dict(analysis.title_analysis),
        "contentSpecs": content_specs_to_dict(analysis.content_specs),
    }


def analysis_to_dict(result: AnalysisResult) -> dict:
    return {
        "longform": format_analysis_to_dict(result.longform),
        "shorts": format_analysis_to_dict(result.shorts),
        "combined": {
            "totalVideos": result.combined.total_videos,
            "crossFormatInsights": list(result.combined.cross_format_insights),
            "enhancedCombinedInsights": list(result.combined.enhanced_insights),
        },
    }
