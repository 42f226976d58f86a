"""
Category Matcher

Scores the store's categories against the detected vision terms.

Scoring per category:
    For every detected term and every category keyword that relate by
    substring (either way): +1.0 when equal, +0.7 otherwise.
    For every term that relates to the category's display name: +0.5.
    Each hit also counts one match; score = min(total / matches, 1.0).

Keywords for a category come from the category itself when the catalog
supplies them, else from the static table keyed by slug. A category with
neither only matches on its display name and is reported back as unmapped.
"""

from typing import Optional, Sequence

from rich.console import Console

from product_vision.classifiers.vocabulary import CATEGORY_SLUG_KEYWORDS
from product_vision.models import CategoryCandidate, CategoryMatch, VisionSignals

console = Console()

DEFAULT_THRESHOLD = 0.3
MAX_ALTERNATIVES = 3

EXACT_MATCH_WEIGHT = 1.0
PARTIAL_MATCH_WEIGHT = 0.7
NAME_MATCH_WEIGHT = 0.5


def _related(a: str, b: str) -> bool:
    return a in b or b in a


def keywords_for(category: CategoryCandidate) -> Optional[list[str]]:
    """Keyword list for a category, or None when it has no keyword source."""
    if category.keywords:
        return [k.strip().lower() for k in category.keywords if k and k.strip()]
    static = CATEGORY_SLUG_KEYWORDS.get(category.slug)
    if static is not None:
        return list(static)
    return None


def score_category(terms: set[str], category: CategoryCandidate) -> float:
    """Normalized score in [0, 1] for one category."""
    keywords = keywords_for(category) or []
    display_name = category.name.strip().lower()

    total = 0.0
    matches = 0
    for term in terms:
        for keyword in keywords:
            if _related(term, keyword):
                total += EXACT_MATCH_WEIGHT if term == keyword else PARTIAL_MATCH_WEIGHT
                matches += 1
        if display_name and _related(term, display_name):
            total += NAME_MATCH_WEIGHT
            matches += 1

    if matches == 0:
        return 0.0
    return min(total / matches, 1.0)


def match_category(
    signals: VisionSignals,
    categories: Sequence[CategoryCandidate],
    threshold: float = DEFAULT_THRESHOLD,
) -> CategoryMatch:
    """
    Rank categories against the detected terms.

    Categories scoring zero are left out entirely. When the best score is
    below ``threshold`` no category is suggested, but the best few are still
    returned as alternatives.
    """
    terms = {term for term in signals.all_terms() if term}

    unmapped = [c.slug for c in categories if keywords_for(c) is None]
    if unmapped:
        console.print(
            f"[yellow]No keywords for categories: {', '.join(unmapped)} "
            f"(only display-name matches possible)[/yellow]"
        )

    scored = []
    for category in categories:
        score = score_category(terms, category)
        if score > 0:
            scored.append((category, score))

    # sorted() is stable, so equal scores keep catalog order
    ranked = sorted(scored, key=lambda pair: pair[1], reverse=True)
    scores = {category.id: score for category, score in ranked}

    if not ranked or ranked[0][1] < threshold:
        return CategoryMatch(
            category=None,
            confidence=0.0,
            alternatives=[c for c, _ in ranked[:MAX_ALTERNATIVES]],
            scores=scores,
            unmapped_slugs=unmapped,
        )

    winner, top_score = ranked[0]
    return CategoryMatch(
        category=winner,
        confidence=top_score,
        alternatives=[c for c, _ in ranked[1 : MAX_ALTERNATIVES + 1]],
        scores=scores,
        unmapped_slugs=unmapped,
    )
