"""Career knowledge-base entries and the recommendations built from them."""

from enum import Enum

from pydantic import BaseModel, Field


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class CareerSkill(BaseModel):
    model_config = {"frozen": True}

    name: str
    weight: float = Field(ge=0.0, le=1.0)


class CareerDefinition(BaseModel):
    """Static reference record: a career's skill and category affinities."""

    model_config = {"frozen": True}

    title: str
    required_skills: tuple[CareerSkill, ...] = ()
    category_weights: dict[str, float] = {}
    description: str = ""
    typical_paths: tuple[str, ...] = ()

    @property
    def total_weight(self) -> float:
        return sum(s.weight for s in self.required_skills) + sum(self.category_weights.values())


class CareerRecommendation(BaseModel):
    """One scored, explained career match."""

    model_config = {"frozen": True}

    title: str
    match_score: int = Field(default=0, ge=0, le=100)
    reason: str = ""
    contributing_factors: list[str] = []  # at most 5
    skills_inferred: list[str] = []
    missing_skills: list[str] = []
    skills_needed: list[str] = []
    roadmap_steps: list[str] = []  # at most 5, fixed order
    confidence: Confidence = Confidence.LOW
