# eatalyzer/models/nutrition.py
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    """Frozen model that accepts both the camelCase wire names and field names"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Fats(_WireModel):
    total: float
    saturated: float
    unsaturated: float
    trans: float


class NutritionalInfo(_WireModel):
    fats: Fats
    protein: float
    carbohydrates: float
    sugar: float
    fiber: float


class HealthAssessment(_WireModel):
    is_healthy: bool = Field(alias="isHealthy")
    recommended_consumption: str = Field(alias="recommendedConsumption")
    warnings: List[str] = []
    benefits: List[str] = []


class NutritionAnalysis(_WireModel):
    """
    Nutrition estimate for one meal photo, as returned by the vision model.

    Values are kept exactly as reported: the fat parts are not required to add
    up to the fat total.
    """
    calories: float
    contents: List[str]
    nutritional_info: NutritionalInfo = Field(alias="nutritionalInfo")
    health_assessment: HealthAssessment = Field(alias="healthAssessment")

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "NutritionAnalysis":
        return cls.model_validate(data)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
