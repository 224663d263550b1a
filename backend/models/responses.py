from pydantic import BaseModel

from models.schemas.career import CareerRecommendation
from models.schemas.user_features import UserFeatures


class AnalysisMetadata(BaseModel):
    total_videos: int = 0
    date_range: str = "Recent"
    learning_ratio: float = 0.0


class DomainShare(BaseModel):
    name: str
    percentage: float = 0.0


class SkillShare(BaseModel):
    name: str
    value: int = 0


class AnalysisResponse(BaseModel):
    metadata: AnalysisMetadata = AnalysisMetadata()
    domains: list[DomainShare] = []
    skills: list[SkillShare] = []  # top 8 by score
    topic_clusters: list[str] = []
    summary: str = ""
    recommendations: list[CareerRecommendation] = []
    features: UserFeatures = UserFeatures()
