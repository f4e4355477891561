"""Tunables for the outlier and pattern analysis pipeline."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from outliers.errors import ConfigError

load_dotenv()

# A single video is not a pattern.
MIN_PATTERN_SUPPORT_FLOOR = 2



def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc


@dataclass(frozen=True)
class AnalysisConfig:
    outlier_threshold: float = 2.0
    min_pattern_support: int = MIN_PATTERN_SUPPORT_FLOOR
    max_patterns: int = 10
    max_outliers: int = 10
    max_recommendations: int = 5
    max_cross_format_insights: int = 5
    max_enhanced_insights: int = 6
    max_pattern_examples: int = 3
    max_topics: int = 5

    output_folder: str = ".tmp/youtube_audits"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.outlier_threshold <= 0:
            raise ConfigError("outlier_threshold must be greater than 0")
        if self.min_pattern_support < MIN_PATTERN_SUPPORT_FLOOR:
            raise ConfigError(
                f"min_pattern_support must be at least {MIN_PATTERN_SUPPORT_FLOOR}"
            )
        for name in (
            "max_patterns",
            "max_outliers",
            "max_recommendations",
            "max_cross_format_insights",
            "max_enhanced_insights",
            "max_pattern_examples",
            "max_topics",
        ):
            if getattr(self, name) < 1:
                raise ConfigError(f"{name} must be a positive integer")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(f"log_level must be a logging level name, got {self.log_level!r}")

    @staticmethod
    def from_env() -> "AnalysisConfig":
        return AnalysisConfig(
            outlier_threshold=_env_float("OUTLIER_THRESHOLD", 2.0),
            min_pattern_support=_env_int("MIN_PATTERN_SUPPORT", MIN_PATTERN_SUPPORT_FLOOR),
            max_patterns=_env_int("MAX_PATTERNS", 10),
            max_outliers=_env_int("MAX_OUTLIERS", 10),
            max_recommendations=_env_int("MAX_RECOMMENDATIONS", 5),
            max_cross_format_insights=_env_int("MAX_CROSS_FORMAT_INSIGHTS", 5),
            max_enhanced_insights=_env_int("MAX_ENHANCED_INSIGHTS", 6),
            max_pattern_examples=_env_int("MAX_PATTERN_EXAMPLES", 3),
            max_topics=_env_int("MAX_TOPICS", 5),
            output_folder=os.getenv("OUTPUT_FOLDER", ".tmp/youtube_audits"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def to_dict(self) -> dict:
        return {
            "OUTLIER_THRESHOLD": self.outlier_threshold,
            "MIN_PATTERN_SUPPORT": self.min_pattern_support,
            "MAX_PATTERNS": self.max_patterns,
            "MAX_OUTLIERS": self.max_outliers,
            "MAX_RECOMMENDATIONS": self.max_recommendations,
            "MAX_CROSS_FORMAT_INSIGHTS": self.max_cross_format_insights,
            "MAX_ENHANCED_INSIGHTS": self.max_enhanced_insights,
            "MAX_PATTERN_EXAMPLES": self.max_pattern_examples,
            "MAX_TOPICS": self.max_topics,
            "OUTPUT_FOLDER": self.output_folder,
            "LOG_LEVEL": self.log_level,
        }
