"""Post-assembly checks on a VideoBlueprint.

Every check here guards an internal invariant. A failure means a generator is
broken, not that the caller sent a bad brief, so nothing in this module is
ever raised for user input.
"""

from __future__ import annotations

from lib.text_utils import normalize_text
from schemas.blueprint import VideoBlueprint
from schemas.common import ProductionPhase
from video_factory.production import phase_windows


class BlueprintContractError(ValueError):
    pass


def _timestamp_seconds(ts: str) -> int:
    parts = [int(p) for p in ts.split(":")]
    seconds = 0
    for p in parts:
        seconds = seconds * 60 + p
    return seconds


def check_outline(bp: VideoBlueprint) -> None:
    if not bp.outline:
        raise BlueprintContractError("Outline is empty")
    total = sum(s.estimated_duration for s in bp.outline)
    if total != bp.video_length_minutes:
        raise BlueprintContractError(
            f"Outline durations sum to {total}, expected {bp.video_length_minutes}"
        )


def check_script_alignment(bp: VideoBlueprint) -> None:
    if len(bp.script) != len(bp.outline):
        raise BlueprintContractError(
            f"Script has {len(bp.script)} sections, outline has {len(bp.outline)}"
        )
    for i, (script, section) in enumerate(zip(bp.script, bp.outline)):
        if script.title != section.title:
            raise BlueprintContractError(
                f"Script section {i} title {script.title!r} != outline title {section.title!r}"
            )


def check_chapter_markers(bp: VideoBlueprint) -> None:
    markers = bp.seo.chapter_markers
    if len(markers) != len(bp.outline):
        raise BlueprintContractError("Chapter markers do not match outline sections")
    if markers[0].timestamp != "0:00":
        raise BlueprintContractError(f"First chapter marker must be 0:00, got {markers[0].timestamp}")

    previous = -1
    for marker in markers:
        seconds = _timestamp_seconds(marker.timestamp)
        if seconds <= previous:
            raise BlueprintContractError(f"Chapter markers not strictly increasing at {marker.timestamp}")
        previous = seconds


def check_production(bp: VideoBlueprint) -> None:
    timeline = bp.production.timeline_days
    days = [timeline.pre_production, timeline.production, timeline.post_production]
    if min(days) < 1:
        raise BlueprintContractError(f"Timeline phases must be at least one day: {days}")

    ids = [t.id for t in bp.production.checklist]
    if len(ids) != len(set(ids)):
        raise BlueprintContractError(f"Duplicate checklist ids: {ids}")

    bounds = phase_windows(timeline)

    last_due: dict[ProductionPhase, int] = {}
    for task in bp.production.checklist:
        lo, hi = bounds[task.phase]
        if not lo <= task.due_after_hours <= hi:
            raise BlueprintContractError(
                f"Task {task.id} due at {task.due_after_hours}h, outside {task.phase.value} window {lo}-{hi}h"
            )
        if task.phase in last_due and task.due_after_hours <= last_due[task.phase]:
            raise BlueprintContractError(f"Task {task.id} due hours not increasing within {task.phase.value}")
        last_due[task.phase] = task.due_after_hours


def check_upload(bp: VideoBlueprint) -> None:
    if normalize_text(bp.upload.optimized_title) == normalize_text(bp.seo.video_title):
        raise BlueprintContractError("Upload title repeats the SEO title")


def check_blueprint(bp: VideoBlueprint) -> None:
    check_outline(bp)
    check_script_alignment(bp)
    check_chapter_markers(bp)
    check_production(bp)
    check_upload(bp)
