from __future__ import annotations

from typing import Any, Iterable

from agents.title_optimization_agent import TitleOptimizationAgent
from lib.text_utils import dedupe_preserve_order, headline_case, normalize_text
from schemas.blueprint import NicheAnalysis, SeoPackage, UploadPackage
from schemas.brief import Brief
from schemas.title import TitleOptimizationInput
from styles.category_heuristics import CategoryProfile
from video_factory.context import PhraseContext
from video_factory.contracts import BlueprintContractError
from video_factory.niche import narrative_angle


MAX_UPLOAD_TAGS = 12
MAX_UPLOAD_TAG_CHARS = 500
LONG_TAIL_KEYWORDS = 3
END_SCREEN_IDEA_COUNT = 3
PLAYLIST_TARGET_COUNT = 3
THUMBNAIL_TEXT_WORDS = 3


def tags_char_count(tags: Iterable[str]) -> int:
    """Characters as the upload form counts them: tags joined by commas."""
    return len(",".join(tags))


def build_upload_tags(
    ctx: PhraseContext,
    cap: int = MAX_UPLOAD_TAGS,
    char_budget: int = MAX_UPLOAD_TAG_CHARS,
) -> list[str]:
    brief = ctx.brief
    suffix = ctx.tone["tag_suffix"]

    candidates: list[str] = [brief.topic.lower()]
    for kw in brief.keywords[:LONG_TAIL_KEYWORDS]:
        candidates.extend([kw, f"{kw} {suffix}", f"{kw} for beginners"])
    candidates.extend(brief.keywords[LONG_TAIL_KEYWORDS:])
    candidates.extend(ctx.category["tags"])

    tags: list[str] = []
    for tag in dedupe_preserve_order(candidates):
        if len(tags) == cap:
            break
        if tags_char_count([*tags, tag]) > char_budget:
            continue
        tags.append(tag)
    return tags


def pick_distinct_title(selected: Iterable[dict[str, Any]], seo_title: str) -> str:
    for candidate in selected:
        title = candidate["title"]
        if normalize_text(title) != normalize_text(seo_title):
            return title
    raise BlueprintContractError(f"No upload title candidate differs from the SEO title: {seo_title!r}")


def choose_upload_title(ctx: PhraseContext, seo_title: str) -> str:
    brief = ctx.brief
    title_agent = TitleOptimizationAgent()
    out = title_agent.run(
        TitleOptimizationInput(
            topic=brief.topic,
            primary_keyword=ctx.lead_keyword,
            secondary_keywords=list(brief.keywords[1:]),
            audience=brief.target_audience,
            minutes=brief.minutes,
            tone=brief.tone.value,
            existing_titles=[seo_title],
        )
    )
    return pick_distinct_title(out["selected"], seo_title)


def _build_description(ctx: PhraseContext, angle: str, seo: SeoPackage) -> str:
    brief = ctx.brief
    chapters = "\n".join(f"{m.timestamp} {m.label}" for m in seo.chapter_markers)
    paragraphs = [
        ctx.fill(ctx.tone["hook_opener"]),
        brief.call_to_action,
        f"{angle}. Built for {brief.target_audience} in {brief.minutes} minutes.",
        f"Chapters:\n{chapters}",
        " ".join(seo.hashtags),
    ]
    return "\n\n".join(p for p in paragraphs if p)


def _thumbnail_concept(ctx: PhraseContext) -> str:
    words = headline_case(ctx.lead_keyword).split(" ")[:THUMBNAIL_TEXT_WORDS]
    overlay = " ".join(words).upper()
    c = ctx.category
    return (
        f"{ctx.tone['thumbnail_emotion']} host on one side, bold text \"{overlay}\" on the other, "
        f"{c['visual_motif']} in the background, {c['thumbnail_palette']} palette."
    )


def _end_screen_ideas(ctx: PhraseContext, niche: NicheAnalysis, playlists: list[str]) -> tuple[str, ...]:
    next_question = niche.audience_questions[0] if niche.audience_questions else ctx.brief.topic
    ideas = (
        f"Best-for-viewer video card pointing to the \"{playlists[0]}\" playlist.",
        f"Follow-up video teaser answering: {next_question}",
        f"Subscribe element timed to the final line: {ctx.brief.call_to_action}",
    )
    return ideas[:END_SCREEN_IDEA_COUNT]


def package_upload(
    brief: Brief,
    category: CategoryProfile,
    niche: NicheAnalysis,
    seo: SeoPackage,
) -> UploadPackage:
    ctx = PhraseContext(brief, category)

    playlists = dedupe_preserve_order(ctx.fill(p) for p in category["playlist_themes"])[:PLAYLIST_TARGET_COUNT]

    return UploadPackage(
        optimized_title=choose_upload_title(ctx, seo.video_title),
        optimized_description=_build_description(ctx, narrative_angle(brief, category), seo),
        upload_tags=tuple(build_upload_tags(ctx)),
        thumbnail_concept=_thumbnail_concept(ctx),
        end_screen_ideas=_end_screen_ideas(ctx, niche, playlists),
        playlist_targets=tuple(playlists),
    )
