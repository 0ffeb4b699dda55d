from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lib.text_utils import headline_case
from schemas.brief import Brief
from styles.category_heuristics import CategoryProfile, ToneProfile, get_tone_profile


def _sentence_case(text: str) -> str:
    s = (text or "").strip()
    return s[:1].upper() + s[1:]


@dataclass(frozen=True)
class PhraseContext:
    """Template values shared by every generator for one brief + category pair."""

    brief: Brief
    category: CategoryProfile
    tone: ToneProfile = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tone", get_tone_profile(self.brief.tone.value))

    @property
    def lead_keyword(self) -> str:
        return self.brief.keywords[0]

    @property
    def second_keyword(self) -> str:
        return self.brief.keywords[1] if len(self.brief.keywords) > 1 else self.brief.keywords[0]

    def values(self) -> dict[str, Any]:
        b = self.brief
        c = self.category
        return {
            "topic": b.topic,
            "topic_title": headline_case(b.topic),
            "audience": b.target_audience,
            "audience_cap": _sentence_case(b.target_audience),
            "keyword": self.lead_keyword,
            "keyword_title": headline_case(self.lead_keyword),
            "keyword2": self.second_keyword,
            "minutes": b.minutes,
            "cta": b.call_to_action,
            "pain_point": c["pain_point"],
            "core_unit": c["core_unit"],
            "core_unit_title": headline_case(c["core_unit"]),
            "proof_device": c["proof_device"],
            "success_metric": c["success_metric"],
            "visual_motif": c["visual_motif"],
        }

    def fill(self, template: str, **overrides: Any) -> str:
        values = self.values()
        values.update(overrides)
        return template.format(**values)
