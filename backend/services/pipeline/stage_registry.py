"""Lazy-loading registry for the pipeline stages: created and loaded on first use."""

import logging

from services.pipeline.base import BaseStageService

logger = logging.getLogger(__name__)

STAGE_NAMES = ("enrichment", "feature_engineering", "career_recommender")

_registry: dict[str, BaseStageService] = {}


def _create_stage(name: str) -> BaseStageService:
    """Factory: create a stage service by name with deferred imports."""
    if name == "enrichment":
        from services.pipeline.enrichment import EnrichmentService
        return EnrichmentService()
    elif name == "feature_engineering":
        from services.pipeline.feature_engineering import FeatureEngineeringService
        return FeatureEngineeringService()
    elif name == "career_recommender":
        from services.pipeline.career_recommender import CareerRecommenderService
        return CareerRecommenderService()
    else:
        raise ValueError(f"Unknown stage: {name}")


def get_stage(name: str) -> BaseStageService:
    """Get a stage service by name, creating and loading it on first access."""
    if name not in _registry:
        _registry[name] = _create_stage(name)
    svc = _registry[name]
    svc.ensure_loaded()
    return svc


def preload(*names: str) -> None:
    """Pre-load stages (all of them when no names are given)."""
    for name in names or STAGE_NAMES:
        get_stage(name)


def clear() -> None:
    """Drop all stage instances. Useful for testing."""
    _registry.clear()
