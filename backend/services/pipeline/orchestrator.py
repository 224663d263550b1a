"""Pipeline orchestrator: wires the three stages together.

Flow:
    raw videos
      └─ enrichment.predict(videos)              → EnrichmentResult
            └─ feature_engineering.predict(...)  → UserFeatures
                  └─ career_recommender.predict  → list[CareerRecommendation]
                          ↓
         _to_analysis_response()  → AnalysisResponse
"""

import logging
from collections.abc import Sequence

from models.responses import AnalysisMetadata, AnalysisResponse, DomainShare, SkillShare
from models.schemas.career import CareerRecommendation
from models.schemas.enrichment_result import EnrichedVideo, EnrichmentResult
from models.schemas.raw_video import RawVideo
from models.schemas.user_features import UserFeatures
from services.pipeline.stage_registry import get_stage
from services.takeout_parser import parse_timestamp

logger = logging.getLogger(__name__)

TOP_SKILLS_SHOWN = 8


def analyze_watch_history(
    videos: Sequence[RawVideo | dict],
    top_n: int | None = None,
) -> AnalysisResponse:
    """Run the full pipeline over a watch-history batch."""
    enrichment: EnrichmentResult = get_stage("enrichment").predict(videos=videos)
    features: UserFeatures = get_stage("feature_engineering").predict(enrichment=enrichment)
    recommendations: list[CareerRecommendation] = get_stage("career_recommender").predict(
        features=features,
        top_n=top_n,
    )

    return _to_analysis_response(enrichment, features, recommendations)


def _date_range(videos: Sequence[EnrichedVideo]) -> str:
    stamps = [t for t in (parse_timestamp(v.watched_at) for v in videos) if t is not None]
    if not stamps:
        return "Recent"
    start, end = min(stamps).date(), max(stamps).date()
    return start.isoformat() if start == end else f"{start.isoformat()} to {end.isoformat()}"


def _to_analysis_response(
    enrichment: EnrichmentResult,
    features: UserFeatures,
    recommendations: list[CareerRecommendation],
) -> AnalysisResponse:
    """Map stage outputs to the presentation-layer report."""
    domains = sorted(
        (DomainShare(name=name, percentage=pct) for name, pct in features.category_percentages.items()),
        key=lambda d: d.percentage,
        reverse=True,
    )
    skills = sorted(
        (SkillShare(name=name, value=round(score)) for name, score in features.skill_scores.items()),
        key=lambda s: s.value,
        reverse=True,
    )[:TOP_SKILLS_SHOWN]

    clusters = ", ".join(enrichment.topic_clusters) or "no clear"
    summary = (
        f"Your watch history shows {clusters} interests with "
        f"{round(features.learning_ratio)}% educational content."
    )

    return AnalysisResponse(
        metadata=AnalysisMetadata(
            total_videos=len(enrichment.enriched_videos),
            date_range=_date_range(enrichment.enriched_videos),
            learning_ratio=features.learning_ratio,
        ),
        domains=domains,
        skills=skills,
        topic_clusters=enrichment.topic_clusters,
        summary=summary,
        recommendations=recommendations,
        features=features,
    )
