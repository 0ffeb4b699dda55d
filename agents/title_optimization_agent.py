"""Title optimization agent.

This agent is intentionally deterministic: given the same input it will always
produce the same ordered candidate list and selections.

It generates a pool of click-through title candidates from a fixed set of
archetypes, filters out overused prefixes and titles that repeat an existing
one, scores candidates 0–100, and returns the top-N.

Scoring (0–100):
- Keyword presence: primary keyword weighted highest; secondary keywords add lift.
- Clarity: penalizes titles longer than 70 characters (mobile truncation point).
- Uniqueness: penalizes similarity vs existing titles using simple token overlap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from agents.base import BaseAgent
from lib.text_utils import collapse_spaces, dedupe_preserve_order, headline_case, normalize_text, tokenize, truncate_title_max_chars
from schemas.title import (
    TitleCandidate,
    TitleOptimizationInput,
    TitleOptimizationOutput,
)


CLARITY_MAX_CHARS = 70


def token_overlap_similarity(a: str, b: str) -> float:
    """Compute simple token-overlap similarity between two strings.

    Uses Jaccard similarity on token sets: |A ∩ B| / |A ∪ B|.
    Returns 0.0 for empty unions.
    """
    a_tokens = set(tokenize(a))
    b_tokens = set(tokenize(b))
    union = a_tokens | b_tokens
    if not union:
        return 0.0
    return len(a_tokens & b_tokens) / len(union)


def _starts_with_any_prefix(title: str, prefixes: Iterable[str]) -> bool:
    """Case-insensitive startswith check against a list of prefixes."""
    t = normalize_text(title)
    for prefix in prefixes:
        p = normalize_text(prefix)
        if p and t.startswith(p):
            return True
    return False


@dataclass(frozen=True)
class _Archetype:
    name: str
    build: Callable[[TitleOptimizationInput], list[str]]


_TONE_TITLES: dict[str, list[str]] = {
    "Authoritative": [
        "The {pk} Playbook I'd Use Starting Today",
        "{pk}: Do This, Not That",
    ],
    "Educational": [
        "{pk} Explained in {minutes} Minutes",
        "Learn {pk} Step by Step",
    ],
    "Inspirational": [
        "How {pk} Changed the Way I Work",
        "Start {pk} Today, Thank Yourself Next Year",
    ],
    "Entertaining": [
        "I Tried {pk} So You Don't Have To",
        "{pk} Went Wrong (Then Very Right)",
    ],
    "Analytical": [
        "{pk} by the Numbers: What Actually Works",
        "I Measured {pk} So You Can Skip the Guesswork",
    ],
}


def _archetypes() -> list[_Archetype]:
    """Return the ordered list of title archetypes.

    Keep this deterministic and stable: ordering affects candidate order.
    """

    def _pk(inp: TitleOptimizationInput) -> str:
        return headline_case(inp.primary_keyword)

    def how_to(inp: TitleOptimizationInput) -> list[str]:
        pk = _pk(inp)
        return [
            f"How to Get Real Results With {pk}",
            f"How to Master {pk} in {inp.minutes} Minutes",
            f"How {headline_case(inp.audience)} Should Approach {pk}",
        ]

    def mistakes(inp: TitleOptimizationInput) -> list[str]:
        pk = _pk(inp)
        return [
            f"Stop Making These {pk} Mistakes",
            f"{pk} Mistakes Everyone Makes (and the Fix)",
        ]

    def curiosity(inp: TitleOptimizationInput) -> list[str]:
        pk = _pk(inp)
        return [
            f"What Nobody Tells You About {pk}",
            f"The {pk} Secret Hiding in Plain Sight",
        ]

    def fast_result(inp: TitleOptimizationInput) -> list[str]:
        pk = _pk(inp)
        return [
            f"{pk} in {inp.minutes} Minutes: The Fast Track",
            f"Fix Your {pk} Today",
        ]

    def tone_flavoured(inp: TitleOptimizationInput) -> list[str]:
        templates = _TONE_TITLES.get(inp.tone, _TONE_TITLES["Authoritative"])
        return [t.format(pk=_pk(inp), minutes=inp.minutes) for t in templates]

    def topic_first(inp: TitleOptimizationInput) -> list[str]:
        topic = headline_case(inp.topic)
        return [
            f"{topic} Made Simple",
            f"{topic}, Without the Fluff",
        ]

    return [
        _Archetype("how-to", how_to),
        _Archetype("mistakes", mistakes),
        _Archetype("curiosity", curiosity),
        _Archetype("fast-result", fast_result),
        _Archetype("tone", tone_flavoured),
        _Archetype("topic-first", topic_first),
    ]


def _generate_titles(inp: TitleOptimizationInput, *, target_count: int) -> list[tuple[str, str]]:
    """Generate (title, archetype) pairs deterministically."""
    pairs: list[tuple[str, str]] = []

    archetype_lists: list[tuple[str, list[str]]] = [
        (a.name, [truncate_title_max_chars(t, inp.max_chars) for t in a.build(inp)])
        for a in _archetypes()
    ]

    max_len = max((len(titles) for _, titles in archetype_lists), default=0)
    for i in range(max_len):
        for archetype_name, titles in archetype_lists:
            if i < len(titles):
                pairs.append((titles[i], archetype_name))

    secondaries = [collapse_spaces(s) for s in inp.secondary_keywords if s and s.strip()]
    pk = headline_case(inp.primary_keyword)
    for sk in secondaries:
        sk_title = headline_case(sk)
        pairs.append((truncate_title_max_chars(f"{pk} + {sk_title}: The Winning Combo", inp.max_chars), "secondary-combo"))

    existing = {normalize_text(t) for t in inp.existing_titles}

    deduped: list[tuple[str, str]] = []
    seen: set[str] = set()
    for title, archetype_name in pairs:
        key = normalize_text(title)
        if not key or key in seen or key in existing:
            continue
        seen.add(key)
        deduped.append((title, archetype_name))

    return deduped[: max(target_count, 0)]


def _score_title(inp: TitleOptimizationInput, title: str) -> tuple[float, list[str]]:
    """Score a title 0–100 and return (score, reasons)."""
    reasons: list[str] = []

    title_norm = normalize_text(title)
    pk_norm = normalize_text(inp.primary_keyword)

    keyword_score = 0.0
    if pk_norm and pk_norm in title_norm:
        keyword_score += 35.0
        reasons.append("Primary keyword present")
    else:
        pk_tokens = set(tokenize(inp.primary_keyword))
        title_tokens = set(tokenize(title))
        if pk_tokens:
            overlap = len(pk_tokens & title_tokens) / len(pk_tokens)
            if overlap >= 0.8:
                keyword_score += 28.0
                reasons.append("Primary keyword mostly present")
            elif overlap >= 0.5:
                keyword_score += 18.0
                reasons.append("Primary keyword partially present")

    secondary_lift = 0.0
    for sk in inp.secondary_keywords:
        sk_norm = normalize_text(sk)
        if sk_norm and sk_norm in title_norm:
            secondary_lift += 2.5
    secondary_lift = min(10.0, secondary_lift)
    if secondary_lift > 0:
        reasons.append("Includes secondary keywords")

    keyword_component = min(45.0, keyword_score + secondary_lift)

    clarity_component = 20.0
    if len(title) > CLARITY_MAX_CHARS:
        over = len(title) - CLARITY_MAX_CHARS
        penalty = min(20.0, (over / 30.0) * 20.0)
        clarity_component = max(0.0, 20.0 - penalty)
        reasons.append("Too long for mobile; clarity penalty")

    if inp.existing_titles:
        similarities = [token_overlap_similarity(title, t) for t in inp.existing_titles]
        max_sim = max(similarities) if similarities else 0.0
    else:
        max_sim = 0.0

    uniqueness_component = 35.0 * (1.0 - max_sim)
    if max_sim >= 0.6:
        reasons.append("Very similar to an existing title")
    elif max_sim >= 0.35:
        reasons.append("Somewhat similar to an existing title")
    else:
        reasons.append("Distinct from existing titles")

    total = keyword_component + clarity_component + uniqueness_component
    total = max(0.0, min(100.0, total))

    return total, reasons


def select_titles(inp: TitleOptimizationInput) -> TitleOptimizationOutput:
    raw_pairs = _generate_titles(inp, target_count=inp.num_candidates * 3)

    filtered_pairs = [
        (t, a) for (t, a) in raw_pairs if not _starts_with_any_prefix(t, inp.banned_starts)
    ][: inp.num_candidates]

    scored: list[TitleCandidate] = []
    for title, archetype_name in filtered_pairs:
        score, reasons = _score_title(inp, title)
        scored.append(
            TitleCandidate(
                title=title,
                archetype=archetype_name,
                score=float(round(score, 2)),
                reasons=dedupe_preserve_order(reasons),
            )
        )

    scored_sorted = sorted(
        scored,
        key=lambda c: (-c.score, normalize_text(c.title), normalize_text(c.archetype)),
    )

    selected: list[TitleCandidate] = []
    seen_archetypes: set[str] = set()
    for c in scored_sorted:
        if c.archetype not in seen_archetypes or len(selected) < 2:
            selected.append(c)
            seen_archetypes.add(c.archetype)
        if len(selected) == inp.return_top_n:
            break

    return TitleOptimizationOutput(
        selected=selected,
        candidates=scored_sorted,
    )


class TitleOptimizationAgent(BaseAgent):
    """Generate, filter, and score click-through video titles."""

    name = "title-optimization"

    def run(
        self, input: TitleOptimizationInput | dict
    ) -> dict[str, Any]:
        inp = input if isinstance(input, TitleOptimizationInput) else TitleOptimizationInput(**input)
        return select_titles(inp).to_dict()
