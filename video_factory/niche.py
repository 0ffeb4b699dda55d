from __future__ import annotations

import hashlib

from lib.text_utils import normalize_text
from schemas.blueprint import NicheAnalysis, TrendSignal
from schemas.brief import Brief
from styles.category_heuristics import CategoryProfile
from video_factory.context import PhraseContext


TREND_SIGNAL_COUNT = 3
AUDIENCE_QUESTION_COUNT = 4
COMPETITOR_WATCH_COUNT = 3


def _pool_offset(seed: str, pool_size: int) -> int:
    # Deterministic: derived from the normalized topic only.
    digest = hashlib.sha256(seed.encode("utf-8")).hexdigest()
    return int(digest[:8], 16) % pool_size


def select_competitors(topic: str, pool: list[str], count: int = COMPETITOR_WATCH_COUNT) -> list[str]:
    """Take `count` consecutive names from the pool (wrapping), starting at a topic-derived offset."""
    if not pool:
        return []
    start = _pool_offset(normalize_text(topic), len(pool))
    n = min(count, len(pool))
    return [pool[(start + i) % len(pool)] for i in range(n)]


def narrative_angle(brief: Brief, category: CategoryProfile) -> str:
    ctx = PhraseContext(brief, category)
    return f"{ctx.tone['angle_lead']} {ctx.fill(category['angle_focus'])}"


def analyze_niche(brief: Brief, category: CategoryProfile) -> NicheAnalysis:
    ctx = PhraseContext(brief, category)

    positioning = f"{ctx.fill(category['positioning'])} {ctx.tone['stance']}"

    trend_signals = tuple(
        TrendSignal(headline=ctx.fill(t["headline"]), rationale=ctx.fill(t["rationale"]))
        for t in category["trend_templates"][:TREND_SIGNAL_COUNT]
    )

    questions = tuple(ctx.fill(q) for q in category["question_stems"][:AUDIENCE_QUESTION_COUNT])

    competitors = tuple(select_competitors(brief.topic, category["competitors"]))

    return NicheAnalysis(
        positioning_statement=positioning,
        trend_signals=trend_signals,
        audience_questions=questions,
        competitor_watch=competitors,
    )
