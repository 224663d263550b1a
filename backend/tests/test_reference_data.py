"""Tests for the static taxonomy and career knowledge base."""

import pytest

from services import taxonomy
from services.knowledge_base import CAREER_KNOWLEDGE_BASE, get_career


class TestTaxonomy:
    def test_category_lookup(self):
        assert taxonomy.category_name("27") == "Education"
        assert taxonomy.category_name("0") == "Unknown"
        assert taxonomy.category_name(None) == "Unknown"
        assert taxonomy.category_name("") == "Unknown"

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            taxonomy.YOUTUBE_CATEGORIES["99"] = "Custom"
        with pytest.raises(TypeError):
            taxonomy.SKILL_KEYWORDS["Cooking"] = ("recipe",)

    def test_sizes(self):
        assert len(taxonomy.YOUTUBE_CATEGORIES) == 15
        assert len(taxonomy.SKILL_KEYWORDS) == 6
        assert len(taxonomy.EDUCATIONAL_KEYWORDS) == 7

    def test_match_skills_case_insensitive(self):
        assert taxonomy.match_skills("KUBERNETES on AWS") == ["DevOps"]

    def test_clusters_for_skills(self):
        assert taxonomy.clusters_for_skills(["Data Science"]) == ["Technology"]
        assert taxonomy.clusters_for_skills(["Marketing", "Design"]) == ["Creative", "Business"]
        assert taxonomy.clusters_for_skills(["DevOps"]) == ["General"]
        assert taxonomy.clusters_for_skills([]) == ["General"]


class TestKnowledgeBase:
    def test_titles_in_order(self):
        assert [c.title for c in CAREER_KNOWLEDGE_BASE] == [
            "Data Scientist",
            "Software Engineer",
            "UX/UI Designer",
            "Product Manager",
            "ML Engineer",
            "Digital Marketer",
        ]

    def test_weights_in_range(self):
        for career in CAREER_KNOWLEDGE_BASE:
            assert career.total_weight > 0
            assert all(0 <= s.weight <= 1 for s in career.required_skills)

    def test_definitions_are_frozen(self):
        with pytest.raises(Exception):
            CAREER_KNOWLEDGE_BASE[0].title = "Changed"

    def test_get_career(self):
        assert get_career("ML Engineer").typical_paths == ("Deep Learning", "MLOps", "Model Deployment")
        with pytest.raises(KeyError):
            get_career("Astronaut")
