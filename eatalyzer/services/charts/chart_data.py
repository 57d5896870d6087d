from typing import List, Optional

from ...models.chart import ChartPoint
from ...models.nutrition import NutritionAnalysis


def nutrition_series(analysis: Optional[NutritionAnalysis]) -> List[ChartPoint]:
    """Macronutrient bars in display order: Carbs, Protein, Total Fat, Fiber, Sugar"""
    if analysis is None:
        return []

    info = analysis.nutritional_info
    return [
        ChartPoint("Carbs", info.carbohydrates, "#4CAF50"),
        ChartPoint("Protein", info.protein, "#2E7D32"),
        ChartPoint("Total Fat", info.fats.total, "#81C784"),
        ChartPoint("Fiber", info.fiber, "#A5D6A7"),
        ChartPoint("Sugar", info.sugar, "#C8E6C9"),
    ]


def fats_series(analysis: Optional[NutritionAnalysis]) -> List[ChartPoint]:
    """Fat breakdown bars: Saturated, Unsaturated, Trans"""
    if analysis is None:
        return []

    fats = analysis.nutritional_info.fats
    return [
        ChartPoint("Saturated", fats.saturated, "#FFA726"),
        ChartPoint("Unsaturated", fats.unsaturated, "#66BB6A"),
        ChartPoint("Trans", fats.trans, "#EF5350"),
    ]
