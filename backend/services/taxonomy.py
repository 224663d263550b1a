"""Static category and skill taxonomy used by the enrichment stage.

All tables are read-only views built once at import time.
"""

from types import MappingProxyType

UNKNOWN_CATEGORY = "Unknown"
GENERAL_CLUSTER = "General"

# YouTube Data API v3 video category ids
YOUTUBE_CATEGORIES: MappingProxyType[str, str] = MappingProxyType({
    "1": "Film & Animation",
    "2": "Autos & Vehicles",
    "10": "Music",
    "15": "Pets & Animals",
    "17": "Sports",
    "19": "Travel & Events",
    "20": "Gaming",
    "22": "People & Blogs",
    "23": "Comedy",
    "24": "Entertainment",
    "25": "News & Politics",
    "26": "Howto & Style",
    "27": "Education",
    "28": "Science & Technology",
    "29": "Nonprofits & Activism",
})

# Skill -> substring keywords. Matching is plain substring search on
# lower-cased text, so "ai" also hits "train" and "ui" hits "build".
SKILL_KEYWORDS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "Programming": (
        "python", "javascript", "java", "react", "node", "programming", "coding",
        "development", "api", "framework", "typescript", "vue", "angular",
    ),
    "Data Science": (
        "machine learning", "ml", "ai", "data science", "pandas", "numpy",
        "tensorflow", "pytorch", "statistics", "analysis", "visualization",
    ),
    "Design": (
        "design", "figma", "ui", "ux", "photoshop", "illustrator", "sketch",
        "prototyping", "wireframe",
    ),
    "Marketing": (
        "marketing", "seo", "advertising", "social media", "content", "branding",
        "strategy",
    ),
    "Business": (
        "business", "entrepreneurship", "startup", "finance", "management",
        "leadership",
    ),
    "DevOps": (
        "docker", "kubernetes", "aws", "cloud", "ci/cd", "devops", "infrastructure",
    ),
})

# Cluster -> skills that place a video in it. Checked independently, in order.
TOPIC_CLUSTER_RULES: tuple[tuple[str, frozenset[str]], ...] = (
    ("Technology", frozenset({"Programming", "Data Science"})),
    ("Creative", frozenset({"Design"})),
    ("Business", frozenset({"Marketing", "Business"})),
)

# Clusters that get a dedicated feature-vector slot, in slot order
VECTOR_CLUSTERS: tuple[str, ...] = ("Technology", "Creative", "Business")

EDUCATIONAL_CATEGORIES = frozenset({"Education", "Science & Technology", "Howto & Style"})

EDUCATIONAL_KEYWORDS: tuple[str, ...] = (
    "tutorial", "learn", "course", "lesson", "how to", "guide", "explained",
)

# Evaluated in this order; beginner wins when both sets match
BEGINNER_KEYWORDS: tuple[str, ...] = ("beginner", "introduction", "basics")
ADVANCED_KEYWORDS: tuple[str, ...] = ("advanced", "expert", "deep dive")


def category_name(category_id: str | None) -> str:
    """Map a YouTube category id to its name, or "Unknown"."""
    if not category_id:
        return UNKNOWN_CATEGORY
    return YOUTUBE_CATEGORIES.get(category_id, UNKNOWN_CATEGORY)


def match_skills(text: str) -> list[str]:
    """Return skills whose keywords occur as substrings of text, in taxonomy order."""
    text_lower = text.lower()
    return [
        skill
        for skill, keywords in SKILL_KEYWORDS.items()
        if any(kw in text_lower for kw in keywords)
    ]


def clusters_for_skills(skills: list[str]) -> list[str]:
    """Derive topic clusters from assigned skills; "General" when none apply."""
    skill_set = set(skills)
    clusters = [name for name, triggers in TOPIC_CLUSTER_RULES if skill_set & triggers]
    return clusters or [GENERAL_CLUSTER]
