"""Enrichment stage output: categorized, skill-tagged videos and batch counts."""

from enum import Enum

from pydantic import BaseModel

from models.schemas.raw_video import RawVideo


class LearningLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class EnrichedVideo(RawVideo):
    """RawVideo plus classification.

    List fields are duplicate-free and kept in taxonomy order.
    """

    categories: list[str] = []  # always a single entry today
    skill_keywords: list[str] = []
    topic_clusters: list[str] = []
    is_educational: bool = False
    learning_level: LearningLevel = LearningLevel.INTERMEDIATE


class EnrichmentResult(BaseModel):
    """Aggregate over one enriched batch.

    category_distribution and skill_frequency are raw counts, one increment
    per category/skill per video.
    """

    model_config = {"frozen": True}

    enriched_videos: list[EnrichedVideo] = []
    category_distribution: dict[str, int] = {}
    skill_frequency: dict[str, int] = {}
    topic_clusters: list[str] = []  # union across the batch, first-seen order
    learning_ratio: float = 0.0  # 0-100, share of educational videos
