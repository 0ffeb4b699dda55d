from pydantic import Field
from schemas.base import SchemaBase


class TitleOptimizationInput(SchemaBase):
    """
    Input for TitleOptimizationAgent.

    Notes:
    - existing_titles is used to penalize similarity, so the upload title reads differently from the SEO title.
    - banned_starts helps prevent tired openers like "Ultimate ..." or "You Won't Believe ...".
    """
    topic: str = Field(..., description="Video topic")
    primary_keyword: str = Field(..., description="Lead keyword the title should carry")
    secondary_keywords: list[str] = Field(default_factory=list, description="Secondary/related keywords")
    audience: str = Field(..., description="Who the video is for")
    minutes: int = Field(..., ge=1, description="Runtime in minutes")
    tone: str = Field("Authoritative", description="Tone label, selects the tone-flavoured archetype")

    existing_titles: list[str] = Field(default_factory=list, description="Titles the candidate must not repeat")

    # Tuning knobs
    num_candidates: int = Field(24, ge=4, le=100, description="How many title candidates to keep")
    return_top_n: int = Field(3, ge=1, le=10, description="How many top titles to return")
    max_chars: int = Field(100, ge=20, le=100, description="Hard character cap for any title")

    banned_starts: list[str] = Field(
        default_factory=lambda: ["Ultimate", "The Ultimate", "You Won't Believe", "Top 10"],
        description="Title prefixes that are overused or undesirable"
    )


class TitleCandidate(SchemaBase):
    title: str = Field(..., description="The proposed title")
    archetype: str = Field(..., description="Which template/archetype produced this title")
    score: float = Field(..., ge=0, le=100, description="Overall score (0-100)")
    reasons: list[str] = Field(default_factory=list, description="Short reasons explaining the score")


class TitleOptimizationOutput(SchemaBase):
    selected: list[TitleCandidate] = Field(..., description="Top-N titles selected")
    candidates: list[TitleCandidate] = Field(..., description="All generated title candidates (scored)")
