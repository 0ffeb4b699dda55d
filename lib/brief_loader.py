from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from schemas.brief import RawBrief


DEFAULT_BRIEF_PATH = Path("briefs/example_brief.yaml")

# Accept the snake_case spellings people tend to type in YAML as well as camelCase.
_KEY_ALIASES = {
    "audience": "target_audience",
    "targetaudience": "target_audience",
    "cta": "call_to_action",
    "calltoaction": "call_to_action",
    "videolengthminutes": "minutes",
    "length": "minutes",
}


def _canonical_keys(raw: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in raw.items():
        k = str(key).strip()
        out[_KEY_ALIASES.get(k.lower().replace("_", ""), k)] = value
    return out


def load_brief(path: Optional[Path] = None) -> RawBrief:
    """
    Loads a campaign brief YAML file.

    Field values are left loose; normalization happens in the engine.
    """
    p = path or DEFAULT_BRIEF_PATH
    if not p.exists():
        raise FileNotFoundError(f"Brief file not found: {p}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Brief file is not valid YAML: {p}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"Brief file must contain a mapping at the top level: {p}")

    try:
        return RawBrief.model_validate(_canonical_keys(raw))
    except ValidationError as e:
        raise ValueError(f"Brief file has invalid fields: {p}: {e}") from e
