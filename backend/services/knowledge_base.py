"""Career knowledge base: static career definitions scored by the recommender.

Definition order is the tie-break when two careers score the same.
"""

from models.schemas.career import CareerDefinition, CareerSkill


def _career(title, skills, category_weights, description, typical_paths) -> CareerDefinition:
    return CareerDefinition(
        title=title,
        required_skills=tuple(CareerSkill(name=n, weight=w) for n, w in skills),
        category_weights=category_weights,
        description=description,
        typical_paths=tuple(typical_paths),
    )


CAREER_KNOWLEDGE_BASE: tuple[CareerDefinition, ...] = (
    _career(
        "Data Scientist",
        [("Data Science", 0.4), ("Programming", 0.3), ("Statistics", 0.2), ("Visualization", 0.1)],
        {"Science & Technology": 0.5, "Education": 0.3},
        "Analyze complex data to extract insights and build predictive models",
        ["Python", "Statistics", "Machine Learning", "Data Visualization"],
    ),
    _career(
        "Software Engineer",
        [("Programming", 0.5), ("DevOps", 0.2), ("Problem Solving", 0.3)],
        {"Science & Technology": 0.6, "Education": 0.4},
        "Design, develop, and maintain software applications",
        ["Computer Science", "Software Development", "System Design"],
    ),
    _career(
        "UX/UI Designer",
        [("Design", 0.5), ("User Research", 0.3), ("Prototyping", 0.2)],
        {"Howto & Style": 0.4, "Education": 0.3},
        "Create intuitive and visually appealing user interfaces",
        ["Design Principles", "User Research", "Prototyping Tools"],
    ),
    _career(
        "Product Manager",
        [("Business", 0.4), ("Marketing", 0.3), ("Strategic Planning", 0.3)],
        {"Business": 0.5, "Education": 0.2},
        "Guide product strategy and coordinate cross-functional teams",
        ["Business Strategy", "Product Design", "Market Research"],
    ),
    _career(
        "ML Engineer",
        [("Data Science", 0.4), ("Programming", 0.4), ("DevOps", 0.2)],
        {"Science & Technology": 0.7, "Education": 0.3},
        "Build and deploy machine learning systems at scale",
        ["Deep Learning", "MLOps", "Model Deployment"],
    ),
    _career(
        "Digital Marketer",
        [("Marketing", 0.5), ("Content Creation", 0.3), ("Analytics", 0.2)],
        {"People & Blogs": 0.4, "Entertainment": 0.3},
        "Promote brands and products through digital channels",
        ["SEO", "Social Media", "Content Marketing", "Analytics"],
    ),
)


def get_career(title: str) -> CareerDefinition:
    """Look up a career definition by exact title."""
    for career in CAREER_KNOWLEDGE_BASE:
        if career.title == title:
            return career
    raise KeyError(f"Unknown career: {title}")
