from __future__ import annotations

import re

from lib.text_utils import lower_first
from schemas.blueprint import OutlineSection, ScriptSection
from schemas.brief import Brief
from styles.category_heuristics import CategoryProfile
from video_factory.context import PhraseContext


VISUAL_PROMPT_COUNT = 3

_STEP_PREFIX_RE = re.compile(r"^step\s+\d+\s*:\s*", re.IGNORECASE)

_CONNECTORS = ["First,", "Then,", "Finally,"]

_MID_OPENERS = [
    "Next up: {section}, and what it means for anyone serious about {topic}.",
    "Here's where {topic} starts to pay off, so let's get into {section}.",
    "If you remember one part of this video on {topic}, make it this: {section}.",
]

_FINAL_OPENER = "Let's bring everything about {topic} together."

_MID_HOOK_ALT = "Quick poll: which idea from \"{section}\" will you try first? Tell us below."


def _sentence(text: str) -> str:
    s = text.strip()
    if s.endswith((".", "!", "?")):
        return s
    return f"{s}."


def _talking_points_as_prose(points: tuple[str, ...]) -> list[str]:
    sentences: list[str] = []
    for i, point in enumerate(points):
        connector = _CONNECTORS[i] if i < len(_CONNECTORS) else "Also,"
        body = lower_first(_STEP_PREFIX_RE.sub("", point))
        sentences.append(_sentence(f"{connector} {body}"))
    return sentences


def _opening_sentence(ctx: PhraseContext, section: OutlineSection, index: int, total: int) -> str:
    if index == 0:
        return ctx.fill(ctx.tone["hook_opener"])
    if index == total - 1:
        return ctx.fill(_FINAL_OPENER)
    template = _MID_OPENERS[(index - 1) % len(_MID_OPENERS)]
    return ctx.fill(template, section=section.title)


def _closing_sentence(ctx: PhraseContext, index: int, total: int) -> str:
    if index == total - 1:
        return _sentence(ctx.fill(ctx.tone["final_transition"]))
    return ctx.tone["transition"]


def _visual_prompts(ctx: PhraseContext, section: OutlineSection) -> tuple[str, ...]:
    motif = ctx.category["visual_motif"]
    lead_point = section.talking_points[0] if section.talking_points else section.title
    prompts = (
        f"Establishing shot for \"{section.title}\": {motif}.",
        f"On-screen text overlay stating the goal: {section.purpose}",
        f"Cutaway illustrating \"{lead_point}\" with {ctx.brief.topic} in frame.",
    )
    return prompts[:VISUAL_PROMPT_COUNT]


def _engagement_hook(ctx: PhraseContext, section: OutlineSection, index: int, total: int) -> str:
    # The last section always steers to the call to action.
    if index == total - 1:
        return f"{ctx.tone['cta_lead']} {ctx.brief.call_to_action}"
    if index == 0:
        return ctx.fill(ctx.tone["opening_hook"])
    if index % 2 == 1:
        return ctx.fill(ctx.tone["mid_hook"])
    return ctx.fill(_MID_HOOK_ALT, section=section.title)


def compose_script(
    brief: Brief,
    category: CategoryProfile,
    outline: tuple[OutlineSection, ...],
) -> tuple[ScriptSection, ...]:
    ctx = PhraseContext(brief, category)
    total = len(outline)

    sections: list[ScriptSection] = []
    for index, section in enumerate(outline):
        voiceover = " ".join(
            [
                _opening_sentence(ctx, section, index, total),
                *_talking_points_as_prose(section.talking_points),
                _closing_sentence(ctx, index, total),
            ]
        )
        sections.append(
            ScriptSection(
                title=section.title,
                voiceover=voiceover,
                visual_prompts=_visual_prompts(ctx, section),
                engagement_hook=_engagement_hook(ctx, section, index, total),
            )
        )
    return tuple(sections)
