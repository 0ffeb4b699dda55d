"""Outline allocator.

Splits the requested runtime across section archetypes so that the whole-minute
durations always add up to exactly the requested runtime.

Allocation rules:
  - every section gets the 1-minute floor first
  - the surplus (minutes - floor * sections) is split by largest remainder
    (Hamilton apportionment) using integer arithmetic only
  - remainder ties go to the heavier archetype, then the earlier one
  - when there are more archetypes than minutes, the lightest archetypes are
    dropped (later ones first on equal weight) before allocating
"""

from __future__ import annotations

from typing import Sequence

from lib.text_utils import dedupe_preserve_order, normalize_text
from schemas.blueprint import OutlineSection
from schemas.brief import Brief
from styles.category_heuristics import SECTION_ARCHETYPES, CategoryProfile, SectionArchetype
from video_factory.context import PhraseContext


MIN_SECTION_MINUTES = 1


def apportion_minutes(total: int, weights: Sequence[int], floor: int = MIN_SECTION_MINUTES) -> list[int]:
    """Split `total` into len(weights) integers >= floor that sum to `total` exactly."""
    n = len(weights)
    if n == 0:
        raise ValueError("apportion_minutes requires at least one weight")
    if any(w < 0 for w in weights):
        raise ValueError(f"weights must be non-negative: {list(weights)}")
    if total < floor * n:
        raise ValueError(f"total={total} cannot give {n} sections a floor of {floor}")

    surplus = total - floor * n
    weight_sum = sum(weights)
    if weight_sum == 0:
        weights = [1] * n
        weight_sum = n

    shares: list[int] = []
    remainders: list[int] = []
    for w in weights:
        q, r = divmod(surplus * w, weight_sum)
        shares.append(q)
        remainders.append(r)

    leftover = surplus - sum(shares)
    order = sorted(range(n), key=lambda i: (-remainders[i], -weights[i], i))
    for i in order[:leftover]:
        shares[i] += 1

    return [floor + s for s in shares]


def select_archetypes(
    minutes: int,
    archetypes: Sequence[SectionArchetype] = SECTION_ARCHETYPES,
    floor: int = MIN_SECTION_MINUTES,
) -> list[SectionArchetype]:
    """Drop the lightest archetypes until every survivor can receive the floor."""
    max_sections = max(1, minutes // floor)
    kept = list(archetypes)
    while len(kept) > max_sections:
        # Lightest weight goes first; among equals, the later one.
        victim = min(range(len(kept)), key=lambda i: (kept[i]["weight"], -i))
        kept.pop(victim)
    return kept


def _section_title(ctx: PhraseContext, archetype: SectionArchetype) -> str:
    template = ctx.category["title_overrides"].get(archetype["id"], archetype["title"])
    return ctx.fill(template)


def _unique_titles(titles: list[str]) -> list[str]:
    seen: dict[str, int] = {}
    out: list[str] = []
    for t in titles:
        key = normalize_text(t)
        seen[key] = seen.get(key, 0) + 1
        out.append(t if seen[key] == 1 else f"{t} (Part {seen[key]})")
    return out


def build_outline(brief: Brief, category: CategoryProfile) -> tuple[OutlineSection, ...]:
    ctx = PhraseContext(brief, category)

    archetypes = select_archetypes(brief.minutes)
    durations = apportion_minutes(brief.minutes, [a["weight"] for a in archetypes])
    titles = _unique_titles([_section_title(ctx, a) for a in archetypes])

    sections: list[OutlineSection] = []
    for archetype, title, minutes in zip(archetypes, titles, durations):
        sections.append(
            OutlineSection(
                title=title,
                purpose=ctx.fill(archetype["purpose"]),
                talking_points=tuple(dedupe_preserve_order(ctx.fill(p) for p in archetype["talking_points"])),
                estimated_duration=minutes,
            )
        )
    return tuple(sections)
