from __future__ import annotations

from typing import Iterable

from lib.text_utils import dedupe_preserve_order, hashtag_token, headline_case, truncate_title_max_chars
from schemas.blueprint import ChapterMarker, NicheAnalysis, OutlineSection, SeoPackage
from schemas.brief import Brief
from styles.category_heuristics import CategoryProfile
from video_factory.context import PhraseContext
from video_factory.niche import narrative_angle


MAX_TITLE_CHARS = 100
MAX_KEYWORD_TAGS = 15
HASHTAG_COUNT = 3
DESCRIPTION_KEYWORD_COUNT = 3
DESCRIPTION_QUESTION_COUNT = 2


def format_timestamp(total_minutes: int, seconds: int = 0) -> str:
    """m:ss under an hour (0:00, 7:00, 12:00), h:mm:ss beyond."""
    total_seconds = total_minutes * 60 + seconds
    hours, rem = divmod(total_seconds, 3600)
    minutes, secs = divmod(rem, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def build_chapter_markers(outline: Iterable[OutlineSection]) -> tuple[ChapterMarker, ...]:
    markers: list[ChapterMarker] = []
    elapsed = 0
    for section in outline:
        markers.append(ChapterMarker(timestamp=format_timestamp(elapsed), label=section.title))
        elapsed += section.estimated_duration
    return tuple(markers)


def build_keyword_tags(keywords: Iterable[str], category_terms: Iterable[str], cap: int = MAX_KEYWORD_TAGS) -> list[str]:
    """Brief keywords first (original order), then category terms; case-insensitive dedupe; capped."""
    return dedupe_preserve_order([*keywords, *category_terms])[:cap]


def build_hashtags(phrases: Iterable[str], count: int = HASHTAG_COUNT) -> list[str]:
    tags: list[str] = []
    seen: set[str] = set()
    for phrase in phrases:
        token = hashtag_token(phrase)
        if not token or token.lower() in seen:
            continue
        seen.add(token.lower())
        tags.append(token)
        if len(tags) == count:
            break
    return tags


def _join_naturally(items: list[str]) -> str:
    if len(items) <= 1:
        return "".join(items)
    return f"{', '.join(items[:-1])} and {items[-1]}"


def build_video_title(ctx: PhraseContext) -> str:
    benefit = ctx.fill(ctx.tone["benefit_clause"], audience=headline_case(ctx.brief.target_audience))
    return truncate_title_max_chars(f"{headline_case(ctx.brief.topic)}: {benefit}", MAX_TITLE_CHARS)


def _build_description(
    ctx: PhraseContext,
    angle: str,
    niche: NicheAnalysis,
    markers: tuple[ChapterMarker, ...],
    keyword_tags: list[str],
) -> str:
    brief = ctx.brief
    covered = _join_naturally(list(brief.keywords[:DESCRIPTION_KEYWORD_COUNT]))

    paragraphs = [
        f"{angle}, made for {brief.target_audience}.",
        (
            f"In this {brief.minutes}-minute video we cover {covered}, and you leave with a "
            f"{ctx.category['core_unit']} you can reuse right away."
        ),
        "Questions we answer:\n" + "\n".join(f"- {q}" for q in niche.audience_questions[:DESCRIPTION_QUESTION_COUNT]),
        brief.call_to_action,
        "Chapters:\n" + "\n".join(f"{m.timestamp} {m.label}" for m in markers),
        f"Keywords: {', '.join(keyword_tags)}",
    ]
    return "\n\n".join(paragraphs)


def compose_seo(
    brief: Brief,
    category: CategoryProfile,
    niche: NicheAnalysis,
    outline: tuple[OutlineSection, ...],
) -> SeoPackage:
    ctx = PhraseContext(brief, category)

    markers = build_chapter_markers(outline)
    keyword_tags = build_keyword_tags(brief.keywords, category["tags"])
    hashtags = build_hashtags(keyword_tags)

    return SeoPackage(
        video_title=build_video_title(ctx),
        description=_build_description(ctx, narrative_angle(brief, category), niche, markers, keyword_tags),
        keyword_tags=tuple(keyword_tags),
        hashtags=tuple(hashtags),
        chapter_markers=markers,
    )
