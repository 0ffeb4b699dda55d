from __future__ import annotations

import math
from typing import Any, Optional, Union

from pydantic import ConfigDict, Field, field_validator

from .base import SchemaBase
from .common import Tone


MIN_MINUTES = 5
MAX_MINUTES = 25


class RawBrief(SchemaBase):
    """
    Campaign brief exactly as a caller hands it over (form fields, YAML file, API payload).

    Every field is optional and loosely typed; the normalizer turns it into a Brief.
    Unknown keys are ignored rather than rejected.
    """

    model_config = ConfigDict(extra="ignore")

    topic: Optional[str] = Field(None, description="Video topic or focus keyword")
    minutes: Optional[float] = Field(None, description="Requested runtime in minutes")
    target_audience: Optional[str] = Field(None, description="Who the video speaks to")
    tone: Optional[str] = Field(None, description="One of the Tone values (case-insensitive)")
    keywords: Union[str, list[str], None] = Field(
        None,
        description="Comma/newline separated string or list of keyword phrases",
    )
    call_to_action: Optional[str] = Field(None, description="Primary call to action")

    @field_validator("topic", "target_audience", "tone", "call_to_action", mode="before")
    @classmethod
    def stringify_text(cls, v: Any) -> Optional[str]:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("minutes", mode="before")
    @classmethod
    def coerce_minutes(cls, v: Any) -> Optional[float]:
        """Unparsable runtimes become None so the normalizer can default them."""
        if v is None or isinstance(v, bool):
            return None
        try:
            value = float(v) if isinstance(v, (int, float)) else float(str(v).strip())
        except (ValueError, OverflowError):
            return None
        return value if math.isfinite(value) else None

    @field_validator("keywords", mode="before")
    @classmethod
    def coerce_keywords(cls, v: Any) -> Union[str, list[str], None]:
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (set, frozenset)):
            return sorted(str(x) for x in v if x is not None)
        if isinstance(v, (list, tuple)):
            return [str(x) for x in v if x is not None]
        return str(v)


class Brief(SchemaBase):
    """Normalized, immutable brief consumed by every blueprint component."""

    topic: str = Field(..., min_length=1)
    minutes: int = Field(..., ge=MIN_MINUTES, le=MAX_MINUTES)
    target_audience: str = Field(..., min_length=1)
    tone: Tone
    keywords: tuple[str, ...] = Field(..., min_length=1)
    call_to_action: str = Field(..., min_length=1)
