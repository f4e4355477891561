"""Exception hierarchy for the outlier analysis package."""

from __future__ import annotations


class AnalysisError(Exception):
    """Base exception for all analysis errors."""


class DurationParseError(AnalysisError, ValueError):
    """Duration string is not in a recognized timecode format."""

    def __init__(self, message: str, raw: object = None):
        self.raw = raw
        super().__init__(message)


class RecordValidationError(AnalysisError, ValueError):
    """Raw video record is missing a required field or has a bad value."""

    def __init__(self, message: str, video_id: str | None = None):
        self.video_id = video_id
        super().__init__(message)


class InsufficientSupportError(AnalysisError):
    """A pattern insight was built from fewer videos than the confidence floor."""


class ConfigError(AnalysisError):
    """Invalid configuration value."""
