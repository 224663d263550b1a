"""Stage 3: Career Recommender - score careers and explain the top matches.

Scoring is a weighted average of the user's skill scores and category
percentages against each career's weights. Explanations (reason text,
contributing factors, roadmap) are template-based and deterministic.
"""

import logging
import math
from typing import Any

from config import settings
from models.schemas.career import CareerDefinition, CareerRecommendation, Confidence
from models.schemas.user_features import UserFeatures
from services.knowledge_base import CAREER_KNOWLEDGE_BASE
from services.pipeline.base import BaseStageService

logger = logging.getLogger(__name__)

SKILL_STRENGTH_THRESHOLD = 30  # skill score must exceed this to count as inferred
CATEGORY_FACTOR_THRESHOLD = 10  # category percentage must exceed this to be cited
HIGH_LEARNING_RATIO = 60
MAX_FACTORS = 5
MAX_ROADMAP_STEPS = 5


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class CareerRecommenderService(BaseStageService):
    stage_name = "career_recommender"

    def __init__(self, careers: tuple[CareerDefinition, ...] = CAREER_KNOWLEDGE_BASE) -> None:
        self._careers = careers

    def load(self) -> None:
        for career in self._careers:
            if career.total_weight <= 0:
                logger.warning("Career %r has zero total weight and will always score 0", career.title)
        logger.info("Career knowledge base ready: %d careers", len(self._careers))

    def predict(self, **kwargs: Any) -> list[CareerRecommendation]:
        self.ensure_loaded()
        features: UserFeatures = kwargs["features"]
        top_n: int | None = kwargs.get("top_n")
        if top_n is None:
            top_n = settings.default_top_n
        if top_n < 0:
            raise ValueError(f"top_n must be non-negative, got {top_n}")

        scored = [(career, self.score_career(features, career)) for career in self._careers]
        # sorted() is stable: equal scores keep knowledge-base order
        ranked = sorted(scored, key=lambda item: item[1], reverse=True)

        recommendations = [
            build_recommendation(features, career, score) for career, score in ranked[:top_n]
        ]
        logger.info(
            "Recommended %s",
            ", ".join(f"{r.title} ({r.match_score})" for r in recommendations) or "nothing",
        )
        return recommendations

    def score_career(self, features: UserFeatures, career: CareerDefinition) -> int:
        """Weighted match score in [0, 100]. A zero-weight career scores 0."""
        total_score = 0.0
        total_weight = 0.0

        for skill in career.required_skills:
            total_score += features.skill_scores.get(skill.name, 0.0) * skill.weight
            total_weight += skill.weight

        for category, weight in career.category_weights.items():
            total_score += features.category_percentages.get(category, 0.0) * weight
            total_weight += weight

        if total_weight <= 0:
            return 0

        normalized = total_score / total_weight
        return _round_half_up(min(100.0, max(0.0, normalized)))


# ---------------------------------------------------------------------------
# Explanation builders
# ---------------------------------------------------------------------------

def confidence_for(match_score: int) -> Confidence:
    if match_score >= 70:
        return Confidence.HIGH
    if match_score >= 50:
        return Confidence.MEDIUM
    return Confidence.LOW


def build_recommendation(
    features: UserFeatures,
    career: CareerDefinition,
    match_score: int,
) -> CareerRecommendation:
    skills_inferred: list[str] = []
    missing_skills: list[str] = []
    factors: list[str] = []

    for skill in career.required_skills:
        user_score = features.skill_scores.get(skill.name, 0.0)
        if user_score > SKILL_STRENGTH_THRESHOLD:
            skills_inferred.append(skill.name)
            factors.append(
                f"Strong interest in {skill.name} ({_round_half_up(user_score)}% match)"
            )
        else:
            missing_skills.append(skill.name)

    for category in career.category_weights:
        percentage = features.category_percentages.get(category, 0.0)
        if percentage > CATEGORY_FACTOR_THRESHOLD:
            factors.append(f"{percentage:.1f}% of watch history in {category}")

    return CareerRecommendation(
        title=career.title,
        match_score=match_score,
        reason=_build_reason(features, career, skills_inferred, factors),
        contributing_factors=factors[:MAX_FACTORS],
        skills_inferred=skills_inferred,
        missing_skills=missing_skills,
        skills_needed=[s.name for s in career.required_skills],
        roadmap_steps=_build_roadmap(career, skills_inferred, missing_skills),
        confidence=confidence_for(match_score),
    )


def _build_reason(
    features: UserFeatures,
    career: CareerDefinition,
    skills_inferred: list[str],
    factors: list[str],
) -> str:
    parts = [f"Your watch history shows strong alignment with {career.title}."]

    if skills_inferred:
        parts.append(
            f"You consistently watch content related to {', '.join(skills_inferred[:3])}."
        )

    if features.learning_ratio > HIGH_LEARNING_RATIO:
        parts.append(
            f"Your high learning-focused viewing pattern ({_round_half_up(features.learning_ratio)}%) "
            "indicates serious interest in skill development."
        )

    if factors:
        parts.append(f"Key indicators include: {'; '.join(factors[:2])}.")

    return " ".join(parts)


def _build_roadmap(
    career: CareerDefinition,
    skills_inferred: list[str],
    missing_skills: list[str],
) -> list[str]:
    steps: list[str] = []
    if skills_inferred:
        steps.append(f"Deepen expertise in {skills_inferred[0]} through advanced courses")
    if missing_skills:
        steps.append(f"Learn fundamentals of {missing_skills[0]}")
    steps.append(f"Build a portfolio project demonstrating {career.title} skills")
    steps.append(f"Join {career.title} communities and networks")
    steps.append(f"Seek mentorship from experienced {career.title} professionals")
    return steps[:MAX_ROADMAP_STEPS]
