from __future__ import annotations

from schemas.blueprint import ScriptSection, VideoBlueprint


def _script_block(index: int, section: ScriptSection) -> str:
    prompts = "\n- ".join(section.visual_prompts)
    return (
        f"Section {index}: {section.title}\n"
        f"{section.voiceover}\n\nVisual Prompts:\n- {prompts}\n"
        f"Engagement: {section.engagement_hook}\n"
    )


def format_blueprint_text(blueprint: VideoBlueprint) -> str:
    """Plain-text export of a blueprint, suitable for pasting into a doc or ticket."""
    bp = blueprint
    script = "\n".join(_script_block(i, s) for i, s in enumerate(bp.script, start=1))

    lines = [
        f"YouTube Blueprint — {bp.topic}",
        "",
        f"Audience: {bp.target_audience}",
        f"Tone: {bp.tone.value}",
        f"Length: {bp.video_length_minutes} minutes",
        f"Narrative Angle: {bp.narrative_angle}",
        "",
        "Niche Positioning:",
        bp.niche_analysis.positioning_statement,
        "",
        "Trend Signals:",
        *[f"- {t.headline}: {t.rationale}" for t in bp.niche_analysis.trend_signals],
        "",
        "Outline:",
        *[f"- {s.title} ({s.estimated_duration} min): {s.purpose}" for s in bp.outline],
        "",
        "Script:",
        script,
        "",
        "SEO Title:",
        bp.seo.video_title,
        "",
        "SEO Description:",
        bp.seo.description,
        "",
        "Tags:",
        ", ".join(bp.seo.keyword_tags),
        "",
        "Production Checklist:",
        *[f"- [ ] {t.title} ({t.phase.value}, owner {t.owner})" for t in bp.production.checklist],
        "",
        "Upload Package:",
        f"Title: {bp.upload.optimized_title}",
        f"Thumbnail Concept: {bp.upload.thumbnail_concept}",
        f"Call To Action: {bp.call_to_action}",
        "",
        "Publishing Plan:",
        *[f"- {w}" for w in bp.publishing.best_publish_windows],
        "",
        "Community Prompts:",
        *[f"- {p}" for p in bp.publishing.community_prompts],
        "",
        "Cross Promotion:",
        *[f"- {c}" for c in bp.publishing.cross_promotion],
    ]
    return "\n".join(lines)
