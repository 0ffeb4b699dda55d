from __future__ import annotations

import argparse
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from app_logging.run_logger import RunLogger
from lib.blueprint_output import BlueprintOutputPaths, write_blueprint
from lib.brief_loader import load_brief
from lib.text_utils import slugify
from video_factory.assembler import synthesize
from video_factory.contracts import BlueprintContractError


RUN_LOG_DIR = Path("output/run_logs")


def _run_id() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def _collect_brief(args: argparse.Namespace) -> dict[str, Any]:
    """Brief file first, then any field flags on top of it."""
    brief: dict[str, Any] = {}
    if args.brief:
        brief.update(load_brief(Path(args.brief)).model_dump(exclude_none=True))

    overrides = {
        "topic": args.topic,
        "minutes": args.minutes,
        "target_audience": args.audience,
        "tone": args.tone,
        "keywords": args.keywords,
        "call_to_action": args.cta,
    }
    brief.update({k: v for k, v in overrides.items() if v is not None})
    return brief


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Generate a YouTube video blueprint from a campaign brief")
    ap.add_argument("--brief", help="Path to a brief YAML file (see briefs/example_brief.yaml)")
    ap.add_argument("--topic", help="Video topic")
    ap.add_argument("--minutes", type=float, help="Target runtime in minutes (clamped to 5-25)")
    ap.add_argument("--audience", help="Target audience")
    ap.add_argument("--tone", help="Authoritative, Educational, Inspirational, Entertaining or Analytical")
    ap.add_argument("--keywords", help="Comma or newline separated keywords")
    ap.add_argument("--cta", help="Call to action")
    ap.add_argument("--out-dir", default=str(BlueprintOutputPaths().dir), help="Where to write <slug>.json and <slug>.txt")
    ap.add_argument("--no-log", action="store_true", help="Skip the JSONL run log")
    args = ap.parse_args(argv)

    try:
        brief = _collect_brief(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Brief error: {e}")
        return 2

    run_logger: Optional[RunLogger] = None
    if not args.no_log:
        run_id = _run_id()
        slug = slugify(str(brief.get("topic") or "")) or "blueprint"
        run_logger = RunLogger(
            run_id=run_id,
            blueprint_slug=slug,
            log_path=RUN_LOG_DIR / f"{run_id}-{slug}.jsonl",
        )

    print("Synthesizing blueprint...")
    try:
        blueprint = synthesize(brief, run_logger=run_logger)
    except BlueprintContractError as e:
        print(f"Blueprint failed its own checks: {e}")
        return 1

    json_path, text_path = write_blueprint(
        blueprint=blueprint,
        output_paths=BlueprintOutputPaths(dir=Path(args.out_dir)),
    )

    print(f"Topic: {blueprint.topic} ({blueprint.video_length_minutes} min, {blueprint.tone.value})")
    print(f"SEO title: {blueprint.seo.video_title}")
    print(f"Upload title: {blueprint.upload.optimized_title}")
    print(f"Wrote JSON: {json_path}")
    print(f"Wrote text: {text_path}")
    if run_logger is not None:
        print(f"Run log: {run_logger.log_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
