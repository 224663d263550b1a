"""Stage 1: Enrichment - classify raw watch-history entries.

Each video is classified independently (category, skills, topic clusters,
educational flag, learning level); the batch is then reduced into counts.
Per-video classification holds no shared state, so the map step can be
fanned out freely as long as results are merged back in input order.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from typing import Any

from models.schemas.enrichment_result import EnrichedVideo, EnrichmentResult, LearningLevel
from models.schemas.raw_video import RawVideo
from services import taxonomy
from services.pipeline.base import BaseStageService

logger = logging.getLogger(__name__)


class EnrichmentService(BaseStageService):
    stage_name = "enrichment"

    def load(self) -> None:
        known_skills = set(taxonomy.SKILL_KEYWORDS)
        for cluster, triggers in taxonomy.TOPIC_CLUSTER_RULES:
            unknown = triggers - known_skills
            if unknown:
                raise ValueError(f"Cluster {cluster!r} references unknown skills: {sorted(unknown)}")
        logger.info(
            "Enrichment taxonomy ready: %d categories, %d skills",
            len(taxonomy.YOUTUBE_CATEGORIES),
            len(taxonomy.SKILL_KEYWORDS),
        )

    def predict(self, **kwargs: Any) -> EnrichmentResult:
        self.ensure_loaded()
        videos: Sequence[RawVideo] = kwargs["videos"]

        # dict records are validated here; malformed ones raise ValidationError
        raw = [v if isinstance(v, RawVideo) else RawVideo.model_validate(v) for v in videos]
        enriched = [enrich_video(v) for v in raw]
        result = aggregate(enriched)

        unknown = result.category_distribution.get(taxonomy.UNKNOWN_CATEGORY, 0)
        if unknown:
            logger.warning("%d of %d videos have no known category", unknown, len(enriched))
        logger.info(
            "Enriched %d videos: %d skills, learning ratio %.1f%%",
            len(enriched),
            len(result.skill_frequency),
            result.learning_ratio,
        )
        return result

    def enrich_video(self, video: RawVideo) -> EnrichedVideo:
        self.ensure_loaded()
        return enrich_video(video)


# ---------------------------------------------------------------------------
# Per-video classifiers
# ---------------------------------------------------------------------------

def _metadata_text(video: RawVideo, include_tags: bool = False) -> str:
    parts = [video.title, video.description]
    if include_tags:
        parts.append(" ".join(video.tags))
    return " ".join(parts).lower()


def is_educational(video: RawVideo, category: str) -> bool:
    """Educational category, or a teaching keyword in title/description."""
    if category in taxonomy.EDUCATIONAL_CATEGORIES:
        return True
    text = _metadata_text(video)
    return any(kw in text for kw in taxonomy.EDUCATIONAL_KEYWORDS)


def assess_learning_level(video: RawVideo) -> LearningLevel:
    text = _metadata_text(video)
    if any(kw in text for kw in taxonomy.BEGINNER_KEYWORDS):
        return LearningLevel.BEGINNER
    if any(kw in text for kw in taxonomy.ADVANCED_KEYWORDS):
        return LearningLevel.ADVANCED
    return LearningLevel.INTERMEDIATE


def enrich_video(video: RawVideo) -> EnrichedVideo:
    """Classify a single video. Pure: depends only on the video itself."""
    category = taxonomy.category_name(video.category_id)
    skills = taxonomy.match_skills(_metadata_text(video, include_tags=True))

    return EnrichedVideo(
        **video.model_dump(include=set(RawVideo.model_fields)),
        categories=[category],
        skill_keywords=skills,
        topic_clusters=taxonomy.clusters_for_skills(skills),
        is_educational=is_educational(video, category),
        learning_level=assess_learning_level(video),
    )


# ---------------------------------------------------------------------------
# Batch reduction
# ---------------------------------------------------------------------------

def aggregate(enriched: list[EnrichedVideo]) -> EnrichmentResult:
    """Reduce enriched videos into batch counts. Empty input gives empty aggregates."""
    category_counts: Counter[str] = Counter()
    skill_counts: Counter[str] = Counter()
    clusters: dict[str, None] = {}

    for video in enriched:
        category_counts.update(video.categories)
        skill_counts.update(video.skill_keywords)
        for cluster in video.topic_clusters:
            clusters.setdefault(cluster, None)

    educational = sum(1 for v in enriched if v.is_educational)
    learning_ratio = 100.0 * educational / len(enriched) if enriched else 0.0

    return EnrichmentResult(
        enriched_videos=enriched,
        category_distribution=dict(category_counts),
        skill_frequency=dict(skill_counts),
        topic_clusters=list(clusters),
        learning_ratio=learning_ratio,
    )
