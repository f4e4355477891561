"""
Title analysis for a format's top videos.

Reports average title length, the words that recur across top titles and
which title formats (separator, leading number, question...) carry the most
views.
"""

from __future__ import annotations

import re
from typing import Dict, List, Sequence

import numpy as np

from outliers.models import TitleAnalysis, TitleFormatStat, VideoRecord, WordStat

TITLE_STOP_WORDS = frozenset({
    "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by", "a", "an",
})

MIN_TITLE_SUPPORT = 2
MAX_COMMON_WORDS = 10
MAX_TITLE_FORMATS = 8

FORMAT_OTHER = "other"


def title_format(title: str) -> str:
    """First matching title format, checked in a fixed order."""
    if "|" in title or " - " in title:
        return "Title with separator (| or -)"
    if re.match(r"\d+", title):
        return "Starts with number"
    if "?" in title:
        return "Question format"
    if "!" in title:
        return "Exclamation format"
    if title.upper() == title and any(char.isalpha() for char in title):
        return "ALL CAPS"
    if re.search(r"\b(?:how[\s-]+to|tutorial|guide)\b", title, re.IGNORECASE):
        return "How-to/Tutorial format"
    if re.search(r"\b(?:vs|versus)\b", title, re.IGNORECASE):
        return "Comparison format"
    if re.search(r"\b(?:review|unboxing)\b", title, re.IGNORECASE):
        return "Review/Unboxing format"
    return FORMAT_OTHER


def _common_words(videos: Sequence[VideoRecord]) -> List[WordStat]:
    views_by_word: Dict[str, List[int]] = {}
    for video in videos:
        for word in re.findall(r"\b\w+\b", video.title.lower()):
            if len(word) > 2 and word not in TITLE_STOP_WORDS:
                views_by_word.setdefault(word, []).append(video.view_count)

    words = [
        WordStat(word=word, count=len(views), avg_views=int(round(float(np.mean(views)))))
        for word, views in views_by_word.items()
        if len(views) >= MIN_TITLE_SUPPORT
    ]
    words.sort(key=lambda stat: stat.count, reverse=True)
    return words[:MAX_COMMON_WORDS]


def _title_formats(videos: Sequence[VideoRecord]) -> List[TitleFormatStat]:
    grouped: Dict[str, List[VideoRecord]] = {}
    for video in videos:
        grouped.setdefault(title_format(video.title), []).append(video)

    formats = [
        TitleFormatStat(
            format=name,
            count=len(members),
            avg_views=int(round(float(np.mean([video.view_count for video in members])))),
            examples=tuple(video.title for video in members[:3]),
        )
        for name, members in grouped.items()
        if len(members) >= MIN_TITLE_SUPPORT
    ]
    formats.sort(key=lambda stat: stat.avg_views, reverse=True)
    return formats[:MAX_TITLE_FORMATS]


def analyze_titles(videos: Sequence[VideoRecord]) -> TitleAnalysis:
    if not videos:
        return TitleAnalysis()

    return TitleAnalysis(
        avg_title_length=int(round(float(np.mean([len(video.title) for video in videos])))),
        most_common_words=tuple(_common_words(videos)),
        title_formats=tuple(_title_formats(videos)),
    )
