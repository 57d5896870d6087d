from .chart_data import fats_series, nutrition_series

__all__ = ["fats_series", "nutrition_series"]
