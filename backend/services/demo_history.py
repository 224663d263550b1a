"""Built-in demo watch history for trying the pipeline without an export."""

from models.schemas.raw_video import RawVideo

DEMO_WATCH_HISTORY: tuple[RawVideo, ...] = tuple(
    RawVideo(title=title, channel_title=channel, watched_at=time)
    for title, channel, time in [
        ("Building a React App with Tailwind", "CodeWithMe", "2023-10-01T10:00:00Z"),
        ("Deep Learning Specialization - Andrew Ng", "DeepLearningAI", "2023-10-02T15:30:00Z"),
        ("How to design beautiful dashboards", "DesignCourse", "2023-10-03T09:00:00Z"),
        ("Product Management 101: The Basics", "PMDaily", "2023-10-04T12:00:00Z"),
        ("Python for Data Science Tutorial", "DataCamp", "2023-10-05T18:45:00Z"),
        ("Figma UI Design for Beginners", "Flux Academy", "2023-10-06T14:20:00Z"),
        ("Large Language Models Explained", "3Blue1Brown", "2023-10-07T11:10:00Z"),
        ("Advanced SQL Queries for Data Engineering", "SqlNinja", "2023-10-08T16:00:00Z"),
        ("Becoming a Senior Software Engineer", "ThePrimeagen", "2023-10-09T20:00:00Z"),
        ("Entrepreneurship and Startup Strategy", "Y Combinator", "2023-10-10T13:00:00Z"),
    ]
)
