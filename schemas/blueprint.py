from pydantic import Field

from .base import SchemaBase
from .common import ProductionPhase, Tone


class TrendSignal(SchemaBase):
    headline: str
    rationale: str


class NicheAnalysis(SchemaBase):
    positioning_statement: str
    trend_signals: tuple[TrendSignal, ...]
    audience_questions: tuple[str, ...]
    competitor_watch: tuple[str, ...]


class OutlineSection(SchemaBase):
    title: str
    purpose: str
    talking_points: tuple[str, ...]
    estimated_duration: int = Field(..., ge=1, description="Whole minutes allotted to this section")


class ScriptSection(SchemaBase):
    title: str = Field(..., description="Matches the outline section it expands")
    voiceover: str
    visual_prompts: tuple[str, ...]
    engagement_hook: str


class ChapterMarker(SchemaBase):
    timestamp: str = Field(..., description="m:ss offset from the start of the video")
    label: str


class SeoPackage(SchemaBase):
    video_title: str = Field(..., max_length=100)
    description: str
    keyword_tags: tuple[str, ...]
    hashtags: tuple[str, ...]
    chapter_markers: tuple[ChapterMarker, ...]


class TimelineDays(SchemaBase):
    pre_production: int = Field(..., ge=1)
    production: int = Field(..., ge=1)
    post_production: int = Field(..., ge=1)


class ChecklistTask(SchemaBase):
    id: str
    title: str
    description: str
    phase: ProductionPhase
    owner: str = Field(..., description="Role label responsible for the task")
    due_after_hours: int = Field(..., ge=0, description="Hours after kickoff the task is due")


class AssetRequest(SchemaBase):
    label: str
    notes: str


class ProductionPlan(SchemaBase):
    timeline_days: TimelineDays
    checklist: tuple[ChecklistTask, ...]
    asset_requests: tuple[AssetRequest, ...]


class UploadPackage(SchemaBase):
    optimized_title: str = Field(..., max_length=100)
    optimized_description: str
    upload_tags: tuple[str, ...]
    thumbnail_concept: str
    end_screen_ideas: tuple[str, ...]
    playlist_targets: tuple[str, ...]


class PublishingPlan(SchemaBase):
    best_publish_windows: tuple[str, ...]
    community_prompts: tuple[str, ...]
    cross_promotion: tuple[str, ...]


class VideoBlueprint(SchemaBase):
    """Root aggregate returned by the engine. Built once, never mutated."""

    topic: str
    video_length_minutes: int
    target_audience: str
    tone: Tone
    narrative_angle: str
    primary_keywords: tuple[str, ...]
    call_to_action: str
    niche_analysis: NicheAnalysis
    outline: tuple[OutlineSection, ...]
    script: tuple[ScriptSection, ...]
    seo: SeoPackage
    production: ProductionPlan
    upload: UploadPackage
    publishing: PublishingPlan
