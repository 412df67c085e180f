"""Data models for fitplan."""

from .plan import (
    Exercise,
    FitnessPlan,
    Macros,
    Meal,
    MealItem,
    PlanStats,
    Recovery,
    Supplement,
    WorkoutDay,
)
from .records import AdminRecord, User
from .user_profile import (
    Budget,
    DietaryPreference,
    FitnessLevel,
    Gender,
    Goal,
    Location,
    SupplementChoice,
    UserProfile,
    WorkoutSplit,
)

__all__ = [
    "AdminRecord",
    "Budget",
    "DietaryPreference",
    "Exercise",
    "FitnessLevel",
    "FitnessPlan",
    "Gender",
    "Goal",
    "Location",
    "Macros",
    "Meal",
    "MealItem",
    "PlanStats",
    "Recovery",
    "Supplement",
    "SupplementChoice",
    "User",
    "UserProfile",
    "WorkoutDay",
    "WorkoutSplit",
]
