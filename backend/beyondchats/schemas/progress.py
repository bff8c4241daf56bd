"""
Progress dashboard response.
"""
from datetime import datetime

from beyondchats.schemas.common import CamelModel


class ActivityItem(CamelModel):
    id: str
    type: str
    title: str
    score: int
    timestamp: datetime


class ProgressResponse(CamelModel):
    total_quizzes: int
    completed_quizzes: int
    average_score: float
    total_study_time: int  # minutes
    strengths: list[str]
    weaknesses: list[str]
    recent_activity: list[ActivityItem]
