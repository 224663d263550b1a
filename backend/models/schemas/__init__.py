"""Inter-stage pydantic contracts for the watch-history pipeline."""

from models.schemas.raw_video import RawVideo
from models.schemas.enrichment_result import EnrichedVideo, EnrichmentResult, LearningLevel
from models.schemas.user_features import FEATURE_VECTOR_LENGTH, UserFeatures
from models.schemas.career import CareerDefinition, CareerRecommendation, CareerSkill, Confidence

__all__ = [
    "RawVideo",
    "EnrichedVideo",
    "EnrichmentResult",
    "LearningLevel",
    "FEATURE_VECTOR_LENGTH",
    "UserFeatures",
    "CareerDefinition",
    "CareerRecommendation",
    "CareerSkill",
    "Confidence",
]
