"""Stage 2: Feature Engineering - turn enrichment counts into a numeric profile.

Produces percentage features plus the fixed 28-slot feature vector whose
layout is documented on UserFeatures. The layout is a storage contract:
do not reorder or resize it.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from typing import Any

from models.schemas.enrichment_result import EnrichmentResult, LearningLevel
from models.schemas.user_features import FEATURE_VECTOR_LENGTH, UserFeatures
from services import similarity
from services.pipeline.base import BaseStageService
from services.taxonomy import VECTOR_CLUSTERS

logger = logging.getLogger(__name__)

TOP_CATEGORY_SLOTS = 10
TOP_SKILL_SLOTS = 10
WATCH_WINDOW_WEEKS = 4


class FeatureEngineeringService(BaseStageService):
    stage_name = "feature_engineering"

    def load(self) -> None:
        expected = TOP_CATEGORY_SLOTS + TOP_SKILL_SLOTS + len(VECTOR_CLUSTERS) + 5
        if expected != FEATURE_VECTOR_LENGTH:
            raise ValueError(f"Feature layout has {expected} slots, expected {FEATURE_VECTOR_LENGTH}")
        logger.info("Feature engineering ready (%d-slot vector)", FEATURE_VECTOR_LENGTH)

    def predict(self, **kwargs: Any) -> UserFeatures:
        self.ensure_loaded()
        enrichment: EnrichmentResult = kwargs["enrichment"]
        return generate_features(enrichment)

    def cosine_similarity(self, vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
        return similarity.cosine_similarity(vec_a, vec_b)


def _percent(count: float, total: int) -> float:
    return 100.0 * count / total


def generate_features(enrichment: EnrichmentResult) -> UserFeatures:
    """Normalize an EnrichmentResult into UserFeatures.

    An empty batch yields the all-zero profile instead of dividing by zero.
    """
    videos = enrichment.enriched_videos
    total = len(videos)
    if total == 0:
        logger.warning("No videos to profile, returning all-zero features")
        return UserFeatures()

    category_percentages = {
        category: _percent(count, total)
        for category, count in enrichment.category_distribution.items()
    }

    max_skill_count = max([*enrichment.skill_frequency.values(), 1])
    skill_scores = {
        skill: 100.0 * count / max_skill_count
        for skill, count in enrichment.skill_frequency.items()
    }

    cluster_counts: Counter[str] = Counter()
    for video in videos:
        cluster_counts.update(video.topic_clusters)
    topic_cluster_distribution = {
        cluster: _percent(count, total) for cluster, count in cluster_counts.items()
    }

    level_counts = Counter(v.learning_level for v in videos)
    beginner_ratio = _percent(level_counts[LearningLevel.BEGINNER], total)
    intermediate_ratio = _percent(level_counts[LearningLevel.INTERMEDIATE], total)
    advanced_ratio = _percent(level_counts[LearningLevel.ADVANCED], total)

    learning_ratio = enrichment.learning_ratio
    entertainment_ratio = 100.0 - learning_ratio

    feature_vector = build_feature_vector(
        category_percentages=category_percentages,
        skill_scores=skill_scores,
        topic_cluster_distribution=topic_cluster_distribution,
        learning_ratio=learning_ratio,
        entertainment_ratio=entertainment_ratio,
        level_ratios=(beginner_ratio, intermediate_ratio, advanced_ratio),
    )

    logger.debug("Feature vector: %s", feature_vector)
    return UserFeatures(
        category_percentages=category_percentages,
        skill_scores=skill_scores,
        topic_cluster_distribution=topic_cluster_distribution,
        learning_ratio=learning_ratio,
        entertainment_ratio=entertainment_ratio,
        beginner_ratio=beginner_ratio,
        intermediate_ratio=intermediate_ratio,
        advanced_ratio=advanced_ratio,
        total_videos=total,
        watch_frequency_per_week=total / WATCH_WINDOW_WEEKS,
        feature_vector=feature_vector,
    )


def _top_values(values: dict[str, float], slots: int) -> list[float]:
    """Highest values first, truncated or zero-padded to exactly `slots`."""
    top = sorted(values.values(), reverse=True)[:slots]
    return top + [0.0] * (slots - len(top))


def build_feature_vector(
    category_percentages: dict[str, float],
    skill_scores: dict[str, float],
    topic_cluster_distribution: dict[str, float],
    learning_ratio: float,
    entertainment_ratio: float,
    level_ratios: tuple[float, float, float],
) -> list[float]:
    vector: list[float] = []
    vector.extend(_top_values(category_percentages, TOP_CATEGORY_SLOTS))
    vector.extend(_top_values(skill_scores, TOP_SKILL_SLOTS))
    vector.extend(topic_cluster_distribution.get(c, 0.0) for c in VECTOR_CLUSTERS)
    vector.append(learning_ratio)
    vector.append(entertainment_ratio)
    vector.extend(level_ratios)
    return vector
