"""Feature engineering output: normalized numeric profile of a watch history."""

from pydantic import BaseModel

FEATURE_VECTOR_LENGTH = 28


class UserFeatures(BaseModel):
    """Percentages are on a 0-100 scale.

    feature_vector layout (fixed, 28 slots):
        0-9    top 10 category percentages, descending, zero-filled
        10-19  top 10 skill scores, descending, zero-filled
        20-22  Technology / Creative / Business cluster percentages
        23     learning_ratio
        24     entertainment_ratio
        25-27  beginner / intermediate / advanced ratios
    """

    model_config = {"frozen": True}

    category_percentages: dict[str, float] = {}
    skill_scores: dict[str, float] = {}  # relative to the most frequent skill
    topic_cluster_distribution: dict[str, float] = {}
    learning_ratio: float = 0.0
    entertainment_ratio: float = 0.0
    beginner_ratio: float = 0.0
    intermediate_ratio: float = 0.0
    advanced_ratio: float = 0.0
    total_videos: int = 0
    watch_frequency_per_week: float = 0.0  # rough estimate over a 4-week window
    feature_vector: list[float] = [0.0] * FEATURE_VECTOR_LENGTH
