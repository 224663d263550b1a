"""Shared lifecycle for the watch-history pipeline stages.

Stages carry no model weights. ``load()`` only checks the static reference
tables a stage reads (taxonomy, career knowledge base) and fails fast if they
are inconsistent. After that every ``predict`` call is pure and synchronous.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)


class StageLoadError(RuntimeError):
    """A stage's reference tables failed validation."""


class BaseStageService(ABC):
    """Base class for enrichment, feature_engineering and career_recommender.

    Subclasses set ``stage_name`` (the stage_registry key) and implement
    ``load`` and ``predict``. ``predict`` should call ``ensure_loaded`` first.
    """

    stage_name: str = ""
    _loaded: bool = False
    load_ms: float | None = None

    @abstractmethod
    def load(self) -> None:
        """Validate reference tables. Raise on inconsistency."""

    @abstractmethod
    def predict(self, **kwargs: Any) -> Any:
        """Run the stage and return its typed schema."""

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self) -> None:
        """Validate once; a failed load leaves the stage unloaded and is retried next call."""
        if self._loaded:
            return
        start = time.perf_counter()
        try:
            self.load()
        except Exception as e:
            logger.error("Stage %s failed to load: %s", self.stage_name, e)
            raise StageLoadError(f"Stage {self.stage_name!r} reference data is invalid: {e}") from e
        self.load_ms = (time.perf_counter() - start) * 1000
        self._loaded = True
        logger.info("Stage %s ready in %.1f ms", self.stage_name, self.load_ms)
