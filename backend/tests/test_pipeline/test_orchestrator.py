"""Tests for the pipeline orchestrator."""

import pytest

from models.responses import AnalysisResponse
from models.schemas.raw_video import RawVideo
from models.schemas.user_features import FEATURE_VECTOR_LENGTH
from services.pipeline.orchestrator import analyze_watch_history


@pytest.mark.integration
class TestAnalyzeWatchHistory:
    def test_demo_history(self, demo_videos):
        result = analyze_watch_history(demo_videos)

        assert isinstance(result, AnalysisResponse)
        assert result.metadata.total_videos == 10
        assert result.metadata.date_range == "2023-10-01 to 2023-10-10"
        assert result.metadata.learning_ratio == pytest.approx(40.0)
        assert [r.title for r in result.recommendations] == [
            "Data Scientist", "ML Engineer", "UX/UI Designer",
        ]
        assert result.summary == (
            "Your watch history shows Technology, Creative, General, Business "
            "interests with 40% educational content."
        )

    def test_domains_and_skills(self, demo_videos):
        result = analyze_watch_history(demo_videos)
        assert [(d.name, d.percentage) for d in result.domains] == [("Unknown", pytest.approx(100.0))]
        assert [(s.name, s.value) for s in result.skills] == [
            ("Data Science", 100),
            ("Design", 100),
            ("Programming", 67),
            ("Business", 67),
            ("Marketing", 33),
        ]

    def test_top_n(self, tech_videos):
        result = analyze_watch_history(tech_videos, top_n=5)
        assert len(result.recommendations) == 5
        scores = [r.match_score for r in result.recommendations]
        assert scores == sorted(scores, reverse=True)

    def test_skills_capped_at_eight(self):
        # each title hits exactly one of the six skills
        titles = ["python", "pandas", "figma", "seo", "finance", "docker"]
        result = analyze_watch_history([RawVideo(title=t) for t in titles])
        assert len(result.skills) == 6
        assert len(result.skills) <= 8

    def test_empty_history(self):
        result = analyze_watch_history([])
        assert result.metadata.total_videos == 0
        assert result.metadata.date_range == "Recent"
        assert result.features.feature_vector == [0.0] * FEATURE_VECTOR_LENGTH
        assert len(result.recommendations) == 3
        assert all(r.match_score == 0 for r in result.recommendations)

    def test_single_day_range(self):
        videos = [
            RawVideo(title="a", watched_at="2024-05-01T08:00:00Z"),
            RawVideo(title="b", watched_at="2024-05-01T20:00:00Z"),
        ]
        assert analyze_watch_history(videos).metadata.date_range == "2024-05-01"

    def test_serializes_to_json(self, demo_videos):
        payload = analyze_watch_history(demo_videos).model_dump(mode="json")
        assert payload["recommendations"][0]["confidence"] == "low"
        assert len(payload["features"]["feature_vector"]) == FEATURE_VECTOR_LENGTH

    def test_plain_dict_records(self):
        result = analyze_watch_history([
            {"title": "Learn Python", "category_id": "27", "watched_at": "2024-03-01T10:00:00Z"},
            {"title": "Figma basics", "watched_at": "2024-03-04T09:00:00Z"},
        ])
        assert result.metadata.total_videos == 2
        assert result.metadata.date_range == "2024-03-01 to 2024-03-04"
        assert {s.name for s in result.skills} == {"Programming", "Design"}
