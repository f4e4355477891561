"""Immutable data model for one analysis run."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple

from outliers.config import MIN_PATTERN_SUPPORT_FLOOR
from outliers.errors import InsufficientSupportError


@dataclass(frozen=True)
class VideoRecord:
    id: str
    title: str
    view_count: int
    duration_raw: str
    published_at: Optional[datetime] = None
    is_short_form: Optional[bool] = None
    description: str = ""

    def __post_init__(self) -> None:
        published_at = self.published_at
        if published_at is not None and published_at.tzinfo is not None:
            # naive UTC so timestamps compare across the batch
            object.__setattr__(
                self, "published_at", published_at.astimezone(timezone.utc).replace(tzinfo=None)
            )

    @property
    def video_url(self) -> str:
        return f"https://youtube.com/watch?v={self.id}"


@dataclass(frozen=True)
class OutlierVideo:
    """A video at or above the outlier threshold for its format."""

    record: VideoRecord
    multiplier: float
    pattern_tags: Tuple[str, ...] = ()

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def title(self) -> str:
        return self.record.title

    @property
    def view_count(self) -> int:
        return self.record.view_count

    @property
    def published_at(self) -> Optional[datetime]:
        return self.record.published_at


@dataclass(frozen=True)
class PatternInsight:
    """
    Aggregate over the outliers sharing one title pattern.

    Construction enforces the confidence floor: an insight backed by fewer
    than two videos cannot exist.
    """

    pattern: str
    description: str
    video_count: int
    avg_multiplier: float
    avg_views: int
    examples: Tuple[str, ...]
    top_example_id: str

    def __post_init__(self) -> None:
        if self.video_count < MIN_PATTERN_SUPPORT_FLOOR:
            raise InsufficientSupportError(
                f"pattern {self.pattern!r} has {self.video_count} supporting video(s); "
                f"at least {MIN_PATTERN_SUPPORT_FLOOR} required"
            )


@dataclass(frozen=True)
class TopicInsight:
    topic: str
    avg_views: int
    count: int
    examples: Tuple[str, ...]


@dataclass(frozen=True)
class WordStat:
    word: str
    count: int
    avg_views: int


@dataclass(frozen=True)
class TitleFormatStat:
    format: str
    count: int
    avg_views: int
    examples: Tuple[str, ...]


@dataclass(frozen=True)
class TitleAnalysis:
    avg_title_length: int = 0
    most_common_words: Tuple[WordStat, ...] = ()
    title_formats: Tuple[TitleFormatStat, ...] = ()


@dataclass(frozen=True)
class OptimalLength:
    range: str = "Insufficient data"
    avg_views: int = 0
    description: str = "Need more videos for analysis"


@dataclass(frozen=True)
class UploadTiming:
    best_days: Tuple[str, ...] = ()
    worst_days: Tuple[str, ...] = ()
    insight: str = "Not enough data to determine optimal upload timing"


@dataclass(frozen=True)
class SeriesComparison:
    series_performance: int = 0
    standalone_performance: int = 0
    recommendation: str = "Insufficient data for series analysis"


@dataclass(frozen=True)
class ContentSpecs:
    """Length, upload-day and series findings. Defaults describe an empty format."""

    optimal_length: OptimalLength = field(default_factory=OptimalLength)
    upload_timing: UploadTiming = field(default_factory=UploadTiming)
    series_vs_standalone: SeriesComparison = field(default_factory=SeriesComparison)


@dataclass(frozen=True)
class FormatAnalysis:
    total_videos: int
    average_views: float
    outliers: Tuple[OutlierVideo, ...] = ()
    patterns: Tuple[PatternInsight, ...] = ()
    recommendations: Tuple[str, ...] = ()
    best_performing_topics: Tuple[TopicInsight, ...] = ()
    outlier_count: int = 0
    title_analysis: TitleAnalysis = field(default_factory=TitleAnalysis)
    content_specs: ContentSpecs = field(default_factory=ContentSpecs)


@dataclass(frozen=True)
class CombinedInsights:
    total_videos: int
    cross_format_insights: Tuple[str, ...] = field(default_factory=tuple)
    enhanced_insights: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AnalysisResult:
    longform: FormatAnalysis
    shorts: FormatAnalysis
    combined: CombinedInsights
