# analysis_prompt.py
"""
Fixed instruction prompt for meal photo analysis.
The reply must be a single JSON object matching NutritionAnalysis.
"""

RESPONSE_FIELDS = (
    "- calories: numeric value of estimated calories\n"
    "- contents: array of ingredients or food items detected\n"
    "- nutritionalInfo: object containing detailed nutritional values including "
    "fats (total, saturated, unsaturated, trans), protein, carbohydrates, sugar, and fiber, "
    "all in grams\n"
    "- healthAssessment: object with boolean isHealthy, recommendedConsumption advice, "
    "warnings array, and benefits array\n"
)

RESPONSE_SHAPE = (
    "{"
    "\"calories\":<number>,"
    "\"contents\":[\"<ingredient>\"],"
    "\"nutritionalInfo\":{"
    "\"fats\":{\"total\":<g>,\"saturated\":<g>,\"unsaturated\":<g>,\"trans\":<g>},"
    "\"protein\":<g>,\"carbohydrates\":<g>,\"sugar\":<g>,\"fiber\":<g>"
    "},"
    "\"healthAssessment\":{"
    "\"isHealthy\":<true|false>,"
    "\"recommendedConsumption\":\"<advice>\","
    "\"warnings\":[\"<warning>\"],"
    "\"benefits\":[\"<benefit>\"]"
    "}"
    "}"
)


def build_analysis_prompt() -> str:
    """
    Build the meal analysis prompt.

    Returns:
        Complete prompt string
    """
    return (
        "Analyze this food image and provide nutritional information.\n"
        "Please respond ONLY with a JSON object containing the following fields:\n"
        + RESPONSE_FIELDS
        + "\nExact shape:\n"
        + RESPONSE_SHAPE
        + "\n\nReturn ONLY the JSON object with no additional text."
    )
