"""Blueprint assembler: the single entry point of the engine.

synthesize() is pure. The optional run logger only observes stage boundaries;
the returned blueprint is the same with or without it.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, TypeVar

from app_logging.run_logger import RunLogger
from schemas.blueprint import VideoBlueprint
from video_factory.category_resolver import resolve_category
from video_factory.contracts import BlueprintContractError, check_blueprint
from video_factory.niche import analyze_niche, narrative_angle
from video_factory.normalizer import BriefInput, normalize_brief
from video_factory.outline import build_outline
from video_factory.production import plan_production
from video_factory.publishing import plan_publishing
from video_factory.script import compose_script
from video_factory.seo import compose_seo
from video_factory.upload import package_upload


T = TypeVar("T")


def _stage(
    run_logger: Optional[RunLogger],
    name: str,
    input: Any,
    fn: Callable[[], T],
    *,
    summarize: Callable[[T], Any],
) -> T:
    if run_logger is None:
        return fn()
    run_logger.start(name, input)
    try:
        result = fn()
    except Exception as e:
        run_logger.error(name, input, e)
        raise
    run_logger.end(name, summarize(result))
    return result


def _loggable(brief: BriefInput) -> Any:
    if brief is None:
        return None
    if isinstance(brief, Mapping):
        return {str(k): v if isinstance(v, (str, int, float, bool, list)) else str(v) for k, v in brief.items()}
    return brief.to_dict()


def synthesize(brief: BriefInput, *, run_logger: Optional[RunLogger] = None) -> VideoBlueprint:
    b = _stage(run_logger, "normalize", _loggable(brief), lambda: normalize_brief(brief),
               summarize=lambda r: r.to_dict())
    brief_dict = b.to_dict()

    category = _stage(run_logger, "category", brief_dict, lambda: resolve_category(b.topic, b.keywords),
                      summarize=lambda c: {"category": c["id"]})
    niche = _stage(run_logger, "niche", brief_dict, lambda: analyze_niche(b, category),
                   summarize=lambda n: n.to_dict())
    outline = _stage(run_logger, "outline", brief_dict, lambda: build_outline(b, category),
                     summarize=lambda o: [{"title": s.title, "minutes": s.estimated_duration} for s in o])
    script = _stage(run_logger, "script", brief_dict, lambda: compose_script(b, category, outline),
                    summarize=lambda s: {"sections": len(s)})
    seo = _stage(run_logger, "seo", brief_dict, lambda: compose_seo(b, category, niche, outline),
                 summarize=lambda p: {"video_title": p.video_title, "tags": len(p.keyword_tags)})
    production = _stage(run_logger, "production", brief_dict, lambda: plan_production(b, category, outline),
                        summarize=lambda p: {"tasks": len(p.checklist), "timeline_days": p.timeline_days.to_dict()})
    upload = _stage(run_logger, "upload", brief_dict, lambda: package_upload(b, category, niche, seo),
                    summarize=lambda u: {"optimized_title": u.optimized_title, "tags": len(u.upload_tags)})
    publishing = _stage(run_logger, "publishing", brief_dict, lambda: plan_publishing(b, category, niche),
                        summarize=lambda p: p.to_dict())

    blueprint = VideoBlueprint(
        topic=b.topic,
        video_length_minutes=b.minutes,
        target_audience=b.target_audience,
        tone=b.tone,
        narrative_angle=narrative_angle(b, category),
        primary_keywords=b.keywords,
        call_to_action=b.call_to_action,
        niche_analysis=niche,
        outline=outline,
        script=script,
        seo=seo,
        production=production,
        upload=upload,
        publishing=publishing,
    )

    _stage(run_logger, "contracts", {"topic": b.topic}, lambda: check_blueprint(blueprint),
           summarize=lambda _: {"ok": True})
    return blueprint


__all__ = ["BlueprintContractError", "synthesize"]
