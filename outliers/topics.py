"""
Best-performing topic extraction.

Topics come from two sources: named categories detected through keyword
matching, and significant individual title words.
"""

from __future__ import annotations

import re
from typing import Dict, List, Sequence, Tuple

import numpy as np

from outliers.models import TopicInsight, VideoRecord
from outliers.stats import top_performers

TOPIC_CATEGORIES = (
    ("iPhone", re.compile(r"\biphone\b")),
    ("Android", re.compile(r"\b(?:android|galaxy|pixel|oneplus|samsung)\b")),
    ("Gaming", re.compile(r"\b(?:gaming|gamer|game|games|playstation|xbox|nintendo)\b")),
    ("AI & Tech", re.compile(r"\b(?:ai|chatgpt|machine learning|tech|technology)\b")),
    ("Cryptocurrency", re.compile(r"\b(?:crypto|bitcoin|ethereum|blockchain|nft)\b")),
    ("Software", re.compile(r"\b(?:app|apps|software|code|coding|programming)\b")),
    ("Hardware", re.compile(r"\b(?:laptop|computer|pc|mac|gpu|cpu|hardware)\b")),
    ("Fitness & Health", re.compile(r"\b(?:workout|fitness|health|diet|nutrition|exercise|gym)\b")),
    ("Beauty & Fashion", re.compile(r"\b(?:makeup|beauty|skincare|fashion|outfit|hair)\b")),
    ("Food & Cooking", re.compile(r"\b(?:recipe|recipes|cooking|food|kitchen|meal|baking)\b")),
    ("Travel", re.compile(r"\b(?:travel|trip|vacation|destination|flight|hotel)\b")),
    ("Home & DIY", re.compile(r"\b(?:home|diy|furniture|cleaning|interior)\b")),
    ("Investing", re.compile(r"\b(?:invest|investing|stock|stocks|trading|portfolio|money)\b")),
    ("Entrepreneurship", re.compile(r"\b(?:business|startup|entrepreneur|marketing|sales)\b")),
    ("Career", re.compile(r"\b(?:career|job|resume|interview|salary)\b")),
    ("Movies & TV", re.compile(r"\b(?:movie|movies|film|netflix|marvel|trailer)\b")),
    ("Music", re.compile(r"\b(?:music|song|album|concert|guitar|piano)\b")),
    ("Sports", re.compile(r"\b(?:football|basketball|soccer|baseball|sports|athlete)\b")),
    ("Science", re.compile(r"\b(?:science|physics|chemistry|biology|space|nasa)\b")),
    ("History", re.compile(r"\b(?:history|historical|ancient|war|civilization)\b")),
    ("Product Reviews", re.compile(r"\b(?:review|unboxing|vs|worth it)\b")),
    ("Cars & Automotive", re.compile(r"\b(?:car|cars|vehicle|driving|tesla)\b")),
)

STOP_WORDS = frozenset({
    "the", "and", "for", "with", "this", "that", "from", "they", "have", "been",
    "will", "more", "when", "what", "where", "why", "how", "all", "any", "can",
    "could", "should", "would", "also", "just", "only", "even", "much", "most",
    "very", "still", "way", "well", "may", "might", "said", "make", "take",
    "come", "know", "see", "get", "use", "find", "give", "tell", "ask", "seem",
    "feel", "try", "leave", "call", "your", "you", "about", "into", "than", "then",
})

GENERIC_WORDS = frozenset({
    "video", "videos", "youtube", "channel", "subscribe", "like", "comment",
    "watch", "viewer", "content", "episode", "part", "series", "show",
    "best", "top", "good", "great", "amazing", "awesome", "perfect", "ultimate",
    "complete", "full", "new", "latest", "update", "first", "last", "final",
    "shorts", "short",
})


def _is_significant_word(word: str) -> bool:
    if len(word) < 4:
        return False
    if word in STOP_WORDS or word in GENERIC_WORDS:
        return False
    if word.isdigit():
        return False
    return bool(re.search(r"[a-z]", word))


def extract_topics(title) -> Tuple[str, ...]:
    """Return the topics a title touches, categories first, without duplicates."""
    if not title:
        return ()
    clean_title = re.sub(r"\s+", " ", re.sub(r"[^\w\s]", " ", title.lower())).strip()

    topics = [name for name, pattern in TOPIC_CATEGORIES if pattern.search(clean_title)]
    for word in clean_title.split(" "):
        if _is_significant_word(word):
            topics.append(word.capitalize())

    return tuple(dict.fromkeys(topics))


def best_performing_topics(
    records: Sequence[VideoRecord],
    max_topics: int = 5,
    sample_size: int = 10,
    min_count: int = 2,
) -> List[TopicInsight]:
    """Rank topics shared by at least `min_count` of the format's top videos."""
    grouped: Dict[str, List[VideoRecord]] = {}
    for record in top_performers(records, sample_size):
        for topic in extract_topics(record.title):
            grouped.setdefault(topic, []).append(record)

    insights = [
        TopicInsight(
            topic=topic,
            avg_views=int(round(float(np.mean([video.view_count for video in videos])))),
            count=len(videos),
            examples=tuple(video.title for video in videos[:3]),
        )
        for topic, videos in grouped.items()
        if len(videos) >= min_count
    ]
    insights.sort(key=lambda insight: insight.avg_views, reverse=True)
    return insights[:max_topics]
