"""
Keyword rule engine shared by the style, material and gender classifiers.

A classifier is an ordered list of ``KeywordGroup`` entries. Groups are
tried in order and the first group with any keyword found in any detected
term (by substring, or as a whole word for groups that ask for it) wins;
later groups that also match are reported as alternatives but never
override the winner.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from product_vision.models import ClassificationResult, VisionSignals, VisionTerm

# Confidence given to a match whose source term carries no score
DEFAULT_TERM_SCORE = 0.5


@dataclass(frozen=True)
class KeywordGroup:
    """Keywords that all map to one canonical value.

    With ``whole_word`` a keyword only matches at word boundaries
    ("men" matches "men's shoes" but not "garment").
    """

    keywords: tuple[str, ...]
    value: str
    whole_word: bool = False

    def _contains(self, keyword: str, text: str) -> bool:
        if self.whole_word:
            return re.search(rf"\b{re.escape(keyword)}\b", text) is not None
        return keyword in text

    def match(self, terms: Sequence[VisionTerm]) -> Optional[VisionTerm]:
        """First term containing any of the keywords, scanning keyword by keyword."""
        for keyword in self.keywords:
            for term in terms:
                if self._contains(keyword, term.term.lower()):
                    return term
        return None


def build_groups(table: Iterable[tuple[tuple[str, ...], str]]) -> tuple[KeywordGroup, ...]:
    """Turn a ``(keywords, value)`` vocabulary table into keyword groups."""
    return tuple(KeywordGroup(tuple(keywords), value) for keywords, value in table)


def signal_terms(signals: VisionSignals) -> list[VisionTerm]:
    """Labels followed by objects, the term order every classifier scans."""
    return list(signals.labels) + list(signals.objects)


def classify_first_match(
    terms: Sequence[VisionTerm],
    groups: Sequence[KeywordGroup],
) -> ClassificationResult[str]:
    """
    Run the ordered keyword groups against the detected terms.

    Returns:
        The first matching group's value with the matched term's score as
        confidence, or an empty result when nothing matches.
    """
    winner: Optional[str] = None
    confidence = 0.0
    alternatives: list[str] = []

    for group in groups:
        term = group.match(terms)
        if term is None:
            continue
        if winner is None:
            winner = group.value
            confidence = term.score or DEFAULT_TERM_SCORE
        elif group.value != winner and group.value not in alternatives:
            alternatives.append(group.value)

    if winner is None:
        return ClassificationResult[str].none()

    return ClassificationResult[str](
        value=winner,
        confidence=confidence,
        alternatives=alternatives,
    )
