from __future__ import annotations

from dataclasses import dataclass

from schemas.blueprint import AssetRequest, ChecklistTask, OutlineSection, ProductionPlan, TimelineDays
from schemas.brief import Brief
from schemas.common import ProductionPhase
from styles.category_heuristics import CategoryProfile
from video_factory.context import PhraseContext


HOURS_PER_DAY = 24

# (max minutes inclusive, pre-production, production, post-production)
TIMELINE_STEPS: list[tuple[int, int, int, int]] = [
    (8, 1, 1, 1),
    (12, 1, 2, 2),
    (18, 2, 2, 3),
]
TIMELINE_LONG_FORM = (2, 3, 4)


@dataclass(frozen=True)
class _TaskTemplate:
    title: str
    owner: str
    description: str


_PHASE_ID_PREFIX = {
    ProductionPhase.pre_production: "pre",
    ProductionPhase.production: "prod",
    ProductionPhase.post_production: "post",
}

_TASKS: dict[ProductionPhase, list[_TaskTemplate]] = {
    ProductionPhase.pre_production: [
        _TaskTemplate(
            "Research brief",
            "Strategist",
            "Validate the angle for {topic} against the competitor watchlist and lock the lead keyword '{keyword}'.",
        ),
        _TaskTemplate(
            "Script lock",
            "Scriptwriter",
            "Finalize the {sections}-section voiceover for the {minutes}-minute cut and sign off the call to action.",
        ),
        _TaskTemplate(
            "Shot list & storyboard",
            "Director",
            "Map every section to A-roll and B-roll shots featuring {visual_motif}.",
        ),
    ],
    ProductionPhase.production: [
        _TaskTemplate(
            "Set & gear prep",
            "Producer",
            "Prepare the set, lighting and audio chain; run a 30-second test recording.",
        ),
        _TaskTemplate(
            "A-roll capture",
            "Host",
            "Record the voiceover and on-camera segments for all {sections} sections, two takes each.",
        ),
        _TaskTemplate(
            "B-roll capture",
            "Camera Operator",
            "Capture cutaways for the {proof_device} and the visual prompts in the script.",
        ),
    ],
    ProductionPhase.post_production: [
        _TaskTemplate(
            "Rough cut",
            "Editor",
            "Assemble sections in outline order and trim to {minutes} minutes.",
        ),
        _TaskTemplate(
            "Motion graphics",
            "Motion Designer",
            "Build chapter cards, lower thirds and overlays for {sections} chapters.",
        ),
        _TaskTemplate(
            "Thumbnail design",
            "Designer",
            "Design two thumbnail variants from the thumbnail concept for A/B testing.",
        ),
        _TaskTemplate(
            "Metadata entry",
            "Channel Manager",
            "Enter title, description, tags and chapter markers; attach end screen and playlists.",
        ),
        _TaskTemplate(
            "QA & scheduling",
            "Producer",
            "Final watch-through for audio, captions and claims; schedule into the best publish window.",
        ),
    ],
}


def timeline_for_minutes(minutes: int) -> TimelineDays:
    for limit, pre, prod, post in TIMELINE_STEPS:
        if minutes <= limit:
            return TimelineDays(pre_production=pre, production=prod, post_production=post)
    pre, prod, post = TIMELINE_LONG_FORM
    return TimelineDays(pre_production=pre, production=prod, post_production=post)


def phase_windows(timeline: TimelineDays) -> dict[ProductionPhase, tuple[int, int]]:
    """(start_hour, end_hour) for each phase, laid end to end from kickoff."""
    pre_end = timeline.pre_production * HOURS_PER_DAY
    prod_end = pre_end + timeline.production * HOURS_PER_DAY
    post_end = prod_end + timeline.post_production * HOURS_PER_DAY
    return {
        ProductionPhase.pre_production: (0, pre_end),
        ProductionPhase.production: (pre_end, prod_end),
        ProductionPhase.post_production: (prod_end, post_end),
    }


def build_checklist(ctx: PhraseContext, timeline: TimelineDays, section_count: int) -> tuple[ChecklistTask, ...]:
    windows = phase_windows(timeline)
    tasks: list[ChecklistTask] = []

    for phase, templates in _TASKS.items():
        start, end = windows[phase]
        span = end - start
        n = len(templates)
        for i, tpl in enumerate(templates, start=1):
            tasks.append(
                ChecklistTask(
                    id=f"{_PHASE_ID_PREFIX[phase]}-{i:02d}",
                    title=tpl.title,
                    description=ctx.fill(tpl.description, sections=section_count),
                    phase=phase,
                    owner=tpl.owner,
                    # Even share of the phase window: strictly increasing, last task lands on the phase end.
                    due_after_hours=start + (span * i) // n,
                )
            )
    return tuple(tasks)


def build_asset_requests(ctx: PhraseContext) -> tuple[AssetRequest, ...]:
    c = ctx.category
    return (
        AssetRequest(
            label="B-roll",
            notes=f"{c['visual_motif'].capitalize()} covering {ctx.brief.topic}; prioritize shots for the {c['proof_device']}.",
        ),
        AssetRequest(
            label="Motion graphics",
            notes=f"Chapter cards, keyword callouts for '{ctx.lead_keyword}' and a {c['thumbnail_palette']} lower-third pack.",
        ),
        AssetRequest(
            label="Music bed",
            notes=f"Royalty-free track with a {ctx.tone['music_mood']} feel, ducked under the voiceover.",
        ),
        AssetRequest(
            label="Thumbnail photography",
            notes=f"{ctx.tone['thumbnail_emotion']} host portraits against a clean background for compositing.",
        ),
    )


def plan_production(
    brief: Brief,
    category: CategoryProfile,
    outline: tuple[OutlineSection, ...],
) -> ProductionPlan:
    ctx = PhraseContext(brief, category)
    timeline = timeline_for_minutes(brief.minutes)
    return ProductionPlan(
        timeline_days=timeline,
        checklist=build_checklist(ctx, timeline, len(outline)),
        asset_requests=build_asset_requests(ctx),
    )
