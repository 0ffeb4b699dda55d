from __future__ import annotations

from schemas.blueprint import NicheAnalysis, PublishingPlan
from schemas.brief import Brief
from styles.category_heuristics import CategoryProfile
from video_factory.context import PhraseContext


# Audience-local time; no analytics are consulted.
BEST_PUBLISH_WINDOWS: tuple[str, ...] = (
    "Tuesday 2:00-4:00 PM (audience local time)",
    "Thursday 12:00-3:00 PM (audience local time)",
    "Saturday 9:00-11:00 AM (audience local time)",
)

COMMUNITY_PROMPT_COUNT = 3
CROSS_PROMOTION_COUNT = 3


def plan_publishing(brief: Brief, category: CategoryProfile, niche: NicheAnalysis) -> PublishingPlan:
    ctx = PhraseContext(brief, category)

    prompts = [ctx.fill(s) for s in category["community_stems"][:COMMUNITY_PROMPT_COUNT - 1]]
    # Close the loop on the top open question from the niche analysis.
    if niche.audience_questions:
        prompts.append(f"Answer in the comments: {niche.audience_questions[0]}")
    else:
        prompts.append(ctx.fill(category["community_stems"][COMMUNITY_PROMPT_COUNT - 1]))

    cross = tuple(ctx.fill(s) for s in category["cross_promo"][:CROSS_PROMOTION_COUNT])

    return PublishingPlan(
        best_publish_windows=BEST_PUBLISH_WINDOWS,
        community_prompts=tuple(prompts),
        cross_promotion=cross,
    )
