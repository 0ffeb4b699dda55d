"""Input normalizer: turns whatever the caller sends into a usable Brief.

Fail-soft by contract. Missing or malformed fields are defaulted, never rejected.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping, Optional, Union

from lib.text_utils import collapse_spaces, dedupe_preserve_order
from schemas.brief import MAX_MINUTES, MIN_MINUTES, Brief, RawBrief
from schemas.common import Tone
from styles.category_heuristics import DEFAULT_TONE


DEFAULT_MINUTES = 9
DEFAULT_TOPIC = "Video strategy fundamentals"
DEFAULT_AUDIENCE = "curious viewers who want practical takeaways"
DEFAULT_CALL_TO_ACTION = "Subscribe for the next breakdown in this series."

_KEYWORD_SPLIT_RE = re.compile(r"[,\n]")

BriefInput = Union[Brief, RawBrief, Mapping[str, Any], None]


def clamp_minutes(value: Optional[float]) -> int:
    if value is None:
        return DEFAULT_MINUTES
    return max(MIN_MINUTES, min(MAX_MINUTES, int(round(value))))


def split_keywords(raw: Union[str, Iterable[str], None]) -> list[str]:
    """Split on comma/newline, trim, drop empties, dedupe case-insensitively (first spelling wins)."""
    if raw is None:
        return []
    chunks = [raw] if isinstance(raw, str) else list(raw)

    parts: list[str] = []
    for chunk in chunks:
        for piece in _KEYWORD_SPLIT_RE.split(chunk or ""):
            cleaned = collapse_spaces(piece)
            if cleaned:
                parts.append(cleaned)
    return dedupe_preserve_order(parts)


def resolve_tone(raw: Optional[str]) -> Tone:
    key = collapse_spaces(raw or "").lower()
    for tone in Tone:
        if tone.value.lower() == key:
            return tone
    return Tone(DEFAULT_TONE)


def _text_or_default(raw: Optional[str], default: str) -> str:
    cleaned = collapse_spaces(raw or "")
    return cleaned or default


def _coerce_raw(raw: BriefInput) -> RawBrief:
    if raw is None:
        return RawBrief()
    if isinstance(raw, RawBrief):
        return raw
    return RawBrief.model_validate(dict(raw))


def normalize_brief(raw: BriefInput) -> Brief:
    if isinstance(raw, Brief):
        return raw

    rb = _coerce_raw(raw)

    topic = _text_or_default(rb.topic, DEFAULT_TOPIC)
    keywords = split_keywords(rb.keywords) or [topic.lower()]

    return Brief(
        topic=topic,
        minutes=clamp_minutes(rb.minutes),
        target_audience=_text_or_default(rb.target_audience, DEFAULT_AUDIENCE),
        tone=resolve_tone(rb.tone),
        keywords=tuple(keywords),
        call_to_action=_text_or_default(rb.call_to_action, DEFAULT_CALL_TO_ACTION),
    )
