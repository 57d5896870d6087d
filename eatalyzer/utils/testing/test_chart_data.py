from eatalyzer.models.nutrition import NutritionAnalysis
from eatalyzer.services.charts.chart_data import fats_series, nutrition_series
from eatalyzer.views.page import build_chart_rows


def test_nutrition_series_order_and_values(meal_analysis):
    series = nutrition_series(meal_analysis)
    assert [(p.label, p.value) for p in series] == [
        ("Carbs", 40),
        ("Protein", 30),
        ("Total Fat", 8),
        ("Fiber", 5),
        ("Sugar", 3),
    ]


def test_fats_series_order_and_values(meal_analysis):
    series = fats_series(meal_analysis)
    assert [(p.label, p.value) for p in series] == [
        ("Saturated", 2),
        ("Unsaturated", 5),
        ("Trans", 1),
    ]


def test_series_empty_without_analysis():
    assert nutrition_series(None) == []
    assert fats_series(None) == []


def test_values_are_not_rounded(meal_reply):
    meal_reply["nutritionalInfo"]["protein"] = 12.345
    meal_reply["nutritionalInfo"]["fats"]["trans"] = 0.0123
    analysis = NutritionAnalysis.from_wire(meal_reply)
    assert nutrition_series(analysis)[1].value == 12.345
    assert fats_series(analysis)[2].value == 0.0123


def test_inconsistent_fat_parts_kept_as_given(meal_reply):
    meal_reply["nutritionalInfo"]["fats"] = {"total": 5, "saturated": 4, "unsaturated": 4, "trans": 4}
    analysis = NutritionAnalysis.from_wire(meal_reply)
    assert nutrition_series(analysis)[2].value == 5
    assert [p.value for p in fats_series(analysis)] == [4, 4, 4]


def test_series_are_deterministic(meal_analysis):
    assert nutrition_series(meal_analysis) == nutrition_series(meal_analysis)
    assert fats_series(meal_analysis) == fats_series(meal_analysis)


def test_chart_rows_scale_to_largest_value(meal_analysis):
    rows = build_chart_rows(nutrition_series(meal_analysis))
    assert rows[0]["percent"] == 100.0
    assert rows[1]["percent"] == 75.0
    assert rows[0]["value"] == "40"


def test_chart_rows_all_zero(meal_reply):
    meal_reply["nutritionalInfo"]["fats"] = {"total": 0, "saturated": 0, "unsaturated": 0, "trans": 0}
    rows = build_chart_rows(fats_series(NutritionAnalysis.from_wire(meal_reply)))
    assert [r["percent"] for r in rows] == [0, 0, 0]
    assert build_chart_rows([]) == []
