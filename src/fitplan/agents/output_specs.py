"""Structured output schema for plan generation.

The schema uses the OpenAPI subset accepted by Gemini's ``response_schema``
and is also what responses are validated against.
"""

import copy

OBJECT = "OBJECT"
ARRAY = "ARRAY"
STRING = "STRING"
NUMBER = "NUMBER"
INTEGER = "INTEGER"

# Nested item specs
_supplement_spec = {
    "type": OBJECT,
    "properties": {
        "name": {"type": STRING},
        "timing": {"type": STRING},
    },
    "required": ["name", "timing"],
}

_meal_item_spec = {
    "type": OBJECT,
    "properties": {
        "name": {"type": STRING},
        "quantity": {"type": STRING},
    },
    "required": ["name", "quantity"],
}

_meal_spec = {
    "type": OBJECT,
    "properties": {
        "timing": {"type": STRING, "description": "e.g., Breakfast, Pre-workout"},
        "name": {"type": STRING, "description": "Name of the meal"},
        "items": {"type": ARRAY, "items": _meal_item_spec},
        "alternatives": {
            "type": ARRAY,
            "items": {"type": STRING},
            "description": (
                "Exactly 2 distinct alternative meal options. "
                "Each string should describe the full alternative meal."
            ),
        },
    },
    "required": ["timing", "name", "items", "alternatives"],
}

_exercise_spec = {
    "type": OBJECT,
    "properties": {
        "name": {"type": STRING},
        "sets": {"type": STRING},
        "reps": {"type": STRING},
        "rest": {"type": STRING},
        "notes": {"type": STRING, "description": "Form cue or tempo"},
    },
    "required": ["name", "sets", "reps", "rest", "notes"],
}

_workout_day_spec = {
    "type": OBJECT,
    "properties": {
        "day": {"type": STRING, "description": "Day of the week (Sunday, Monday, etc.)"},
        "focus": {"type": STRING, "description": "e.g., Push, Pull, Legs"},
        "warmup": {"type": STRING, "description": "Warmup routine before the session"},
        "exercises": {"type": ARRAY, "items": _exercise_spec},
        "cardio": {"type": STRING, "nullable": True},
        "abs": {"type": STRING, "nullable": True},
    },
    "required": ["day", "focus", "warmup", "exercises"],
}

# Full plan contract
FITNESS_PLAN_SCHEMA = {
    "type": OBJECT,
    "properties": {
        "weekNumber": {
            "type": INTEGER,
            "description": "The week number of this plan (e.g., 1, 2, 3)",
        },
        "stats": {
            "type": OBJECT,
            "properties": {
                "bmr": {"type": NUMBER, "description": "Basal Metabolic Rate"},
                "tdee": {"type": NUMBER, "description": "Total Daily Energy Expenditure"},
                "targetCalories": {"type": NUMBER, "description": "Daily caloric intake goal"},
                "goalDescription": {
                    "type": STRING,
                    "description": "Short summary of the strategy (e.g., 'Caloric deficit of 500 kcal')",
                },
                "estimatedMonthlyCost": {
                    "type": STRING,
                    "description": "Estimated monthly cost for the diet plan in NPR (Nepalese Rupees)",
                },
            },
            "required": ["bmr", "tdee", "targetCalories", "goalDescription", "estimatedMonthlyCost"],
        },
        "macros": {
            "type": OBJECT,
            "properties": {
                "protein": {"type": NUMBER, "description": "Grams of protein"},
                "carbs": {"type": NUMBER, "description": "Grams of carbohydrates"},
                "fats": {"type": NUMBER, "description": "Grams of fats"},
            },
            "required": ["protein", "carbs", "fats"],
        },
        "hydration": {"type": STRING, "description": "Daily water intake recommendation"},
        "supplements": {"type": ARRAY, "items": _supplement_spec},
        "dietPlan": {"type": ARRAY, "items": _meal_spec},
        "workoutSplit": {"type": ARRAY, "items": _workout_day_spec},
        "recovery": {
            "type": OBJECT,
            "properties": {
                "sleep": {"type": STRING},
                "stress": {"type": STRING},
                "progressTracking": {"type": STRING},
            },
            "required": ["sleep", "stress", "progressTracking"],
        },
    },
    "required": [
        "weekNumber",
        "stats",
        "macros",
        "dietPlan",
        "workoutSplit",
        "recovery",
        "hydration",
        "supplements",
    ],
}


def fitness_plan_schema() -> dict:
    """Return a private copy of the plan schema for one request."""
    return copy.deepcopy(FITNESS_PLAN_SCHEMA)
