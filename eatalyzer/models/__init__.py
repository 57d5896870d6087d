from .chart import ChartPoint
from .nutrition import Fats, HealthAssessment, NutritionAnalysis, NutritionalInfo
from .session import ImageUpload, PendingState, SessionSnapshot

__all__ = [
    "ChartPoint",
    "Fats",
    "HealthAssessment",
    "ImageUpload",
    "NutritionAnalysis",
    "NutritionalInfo",
    "PendingState",
    "SessionSnapshot",
]
