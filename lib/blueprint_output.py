from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from lib.text_utils import slugify
from schemas.blueprint import VideoBlueprint
from video_factory.export import format_blueprint_text


@dataclass(frozen=True)
class BlueprintOutputPaths:
    dir: Path = Path("output/blueprints")

    def for_slug(self, blueprint_slug: str) -> tuple[Path, Path]:
        safe = blueprint_slug.strip().replace("/", "-")
        return self.dir / f"{safe}.json", self.dir / f"{safe}.txt"


def blueprint_slug(blueprint: VideoBlueprint) -> str:
    return slugify(blueprint.topic) or "blueprint"


def write_blueprint(
    *,
    blueprint: VideoBlueprint,
    output_paths: BlueprintOutputPaths | None = None,
) -> tuple[Path, Path]:
    """Write <slug>.json (camelCase) and <slug>.txt next to each other; returns both paths."""
    op = output_paths or BlueprintOutputPaths()
    op.dir.mkdir(parents=True, exist_ok=True)

    json_path, text_path = op.for_slug(blueprint_slug(blueprint))
    json_path.write_text(json.dumps(blueprint.to_dict(), indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    text_path.write_text(format_blueprint_text(blueprint) + "\n", encoding="utf-8")
    return json_path, text_path
