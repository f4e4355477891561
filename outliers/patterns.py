"""
Title pattern catalog.

Every entry is tested independently against the same title, so a title can
match any number of patterns. Results follow catalog order, not the position
of the match in the title.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Pattern, Tuple


@dataclass(frozen=True)
class TitlePattern:
    id: str
    regex: Pattern
    description: str

    def matches(self, title: str) -> bool:
        return bool(self.regex.search(title))


def _pattern(pattern_id, expression, description):
    return TitlePattern(
        id=pattern_id,
        regex=re.compile(expression, re.IGNORECASE),
        description=description,
    )


PATTERN_CATALOG: Tuple[TitlePattern, ...] = (
    _pattern("how-to", r"\bhow[\s-]+to\b", "How-to titles"),
    _pattern("tutorial", r"\btutorials?\b", "Tutorial content"),
    _pattern("guide", r"\bguides?\b", "Guide format"),
    _pattern("tips", r"\btips?\b", "Tips content"),
    _pattern("tricks", r"\btricks?\b", "Tricks content"),
    _pattern("vs", r"\bvs\b|\bversus\b", "Direct comparison videos (X vs Y)"),
    _pattern("review", r"\breview(?:s|ed)?\b", "Review content"),
    _pattern("best", r"\bbest\b", "\"Best\" claims"),
    _pattern("top", r"\btop\b", "Top-N lists"),
    _pattern("complete", r"\bcomplete\b", "Complete/comprehensive coverage"),
    _pattern("ultimate", r"\bultimate\b", "Ultimate guide format"),
    _pattern("beginner", r"\bbeginners?\b", "Beginner-focused content"),
    _pattern("advanced", r"\badvanced\b", "Advanced-level content"),
    _pattern("secret", r"\bsecrets?\b", "Secret/insider angle"),
    _pattern("revealed", r"\brevealed\b", "Reveal titles"),
    _pattern("minutes", r"\d+\s*minutes?\b", "Time-bound promises (X minutes)"),
    _pattern("quick", r"\bquick(?:ly)?\b", "Quick format promises"),
    _pattern("easy", r"\beas(?:y|ily)\b", "Easy solution promises"),
    _pattern("step-by-step", r"\bstep[\s-]*by[\s-]*step\b", "Step-by-step walkthroughs"),
    _pattern("reaction", r"\breact(?:ion|ions|s|ing)?\b", "Reaction videos"),
    _pattern("first-time", r"\bfirst\s+time\b", "First-time experiences"),
    _pattern("challenge", r"\bchallenges?\b", "Challenge content"),
    _pattern("part", r"\bpart\s*\d+", "Numbered parts"),
    _pattern("series", r"\bseries\b", "Series content"),
    _pattern("episode", r"\bepisodes?\b|\bep\.?\s*\d+", "Episodic content"),
    _pattern("live", r"\blive\b", "Live content"),
    _pattern("update", r"\bupdates?\b|\bupdated\b", "Update and news content"),
    _pattern("new", r"\bnew\b", "\"New\" announcements"),
    _pattern("question", r"\?", "Question titles"),
    _pattern("exclamation", r"!", "Exclamation titles"),
    _pattern("numbers", r"\d", "Titles with numbers"),
    _pattern("year", r"\b20\d{2}\b", "Year-stamped titles"),
    _pattern("wait-for-it", r"\bwait\s+for\s+it\b", "Suspense and reveal content"),
    _pattern(
        "multi-part",
        r"\b(?:pt\.?|part)\s*\d+\s*(?:/|of)\s*\d+|\(\s*\d+\s*/\s*\d+\s*\)",
        "Multi-part Shorts (1/3, part 2 of 3)",
    ),
    _pattern("pov", r"\bpov\b", "POV (point of view) content"),
    _pattern("when-scenario", r"\bwhen\b", "When/scenario-based content"),
)

_DESCRIPTIONS = MappingProxyType({pattern.id: pattern.description for pattern in PATTERN_CATALOG})


def extract_patterns(title) -> Tuple[str, ...]:
    """Return the ids of every catalog pattern found in the title."""
    if not title:
        return ()
    return tuple(pattern.id for pattern in PATTERN_CATALOG if pattern.matches(title))


def describe_pattern(pattern_id: str) -> str:
    return _DESCRIPTIONS.get(pattern_id, f'"{pattern_id}" pattern content')
