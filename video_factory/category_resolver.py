from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable

from lib.text_utils import normalize_text
from styles.category_heuristics import (
    CATEGORIES,
    GENERAL_CATEGORY_ID,
    CategoryProfile,
    get_category,
)


TOPIC_MATCH_WEIGHT = 2
KEYWORD_MATCH_WEIGHT = 1


@lru_cache(maxsize=None)
def _trigger_pattern(term: str) -> re.Pattern[str]:
    # Word-boundary match with an optional plural "s" ("recipe" matches "recipes").
    return re.compile(rf"\b{re.escape(normalize_text(term))}s?\b")


def _count_matches(text: str, triggers: Iterable[str]) -> int:
    normalized = normalize_text(text)
    if not normalized:
        return 0
    return sum(1 for term in triggers if _trigger_pattern(term).search(normalized))


def score_category(category: CategoryProfile, topic: str, keywords: Iterable[str]) -> int:
    triggers = category["triggers"]
    score = TOPIC_MATCH_WEIGHT * _count_matches(topic, triggers)
    for kw in keywords:
        score += KEYWORD_MATCH_WEIGHT * _count_matches(kw, triggers)
    return score


def resolve_category(topic: str, keywords: Iterable[str]) -> CategoryProfile:
    """Pick the best-fit category for a topic + keyword list.

    Highest score wins; ties go to the category declared first. No match falls back to 'general'.
    """
    kws = list(keywords)
    best: CategoryProfile | None = None
    best_score = 0

    for category in CATEGORIES:
        if category["id"] == GENERAL_CATEGORY_ID:
            continue
        score = score_category(category, topic, kws)
        if score > best_score:
            best, best_score = category, score

    return best if best is not None else get_category(GENERAL_CATEGORY_ID)
