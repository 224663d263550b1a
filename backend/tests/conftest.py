"""Shared test configuration, pytest markers and watch-history fixtures."""

import pytest

from models.schemas.raw_video import RawVideo
from services.demo_history import DEMO_WATCH_HISTORY
from services.pipeline.stage_registry import clear as clear_registry


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: runs the full three-stage pipeline"
    )


@pytest.fixture(autouse=True)
def _reset_registry():
    """Start every test with fresh stage instances."""
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def demo_videos() -> list[RawVideo]:
    return list(DEMO_WATCH_HISTORY)


@pytest.fixture
def tech_videos() -> list[RawVideo]:
    """Ten programming / data-science titles, seven of them educational."""
    titles = [
        ("Python for Data Science Tutorial", None),
        ("JavaScript Crash Course", None),
        ("Machine Learning Explained", None),
        ("Learn React in 1 Hour", None),
        ("Pandas Tutorial for Beginners", None),
        ("TypeScript Advanced Types", None),
        ("Deep Learning Specialization", "27"),
        ("Node.js API Design Patterns", None),
        ("NumPy Array Programming Guide", None),
        ("Statistics for Data Analysis", None),
    ]
    return [
        RawVideo(id=f"v{i}", title=title, category_id=category_id, channel_title="Channel")
        for i, (title, category_id) in enumerate(titles)
    ]
