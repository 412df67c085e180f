"""User profile data models."""

from dataclasses import dataclass
from enum import Enum

MIN_TIME_AVAILABLE = 30
MAX_TIME_AVAILABLE = 120
MIN_GYM_DAYS = 3
MAX_GYM_DAYS = 7


class _LabelEnum(str, Enum):
    """String enum whose values are the labels shown to users and stored on disk."""

    @classmethod
    def parse(cls, value: "str | _LabelEnum") -> "_LabelEnum":
        """Look up a member by value, ignoring case and surrounding whitespace."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == text or member.name.lower() == text:
                return member
        raise ValueError(f"{value!r} is not a valid {cls.__name__}")


class Gender(_LabelEnum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class FitnessLevel(_LabelEnum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class Goal(_LabelEnum):
    """Primary body-composition goal."""

    FAT_LOSS = "Fat Loss"
    LEAN_MUSCLE = "Lean Muscle"
    BULK = "Bulk"
    RECOMPOSITION = "Recomposition"
    SIX_PACK_ABS = "Six-Pack Abs"


class Location(_LabelEnum):
    GYM = "Gym"
    HOME = "Home"


class DietaryPreference(_LabelEnum):
    VEG = "Veg"
    NON_VEG = "Non-Veg"
    EGGETARIAN = "Eggetarian"
    VEGAN = "Vegan"


class SupplementChoice(_LabelEnum):
    YES = "Yes"
    NO = "No"


class WorkoutSplit(_LabelEnum):
    AI_RECOMMENDED = "AI Recommended"
    FULL_BODY = "Full Body"
    UPPER_LOWER = "Upper/Lower"
    PUSH_PULL_LEGS = "Push/Pull/Legs"
    BRO_SPLIT = "Bro Split"


class Budget(_LabelEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


def _text(data: dict, key: str, default: str | None = None) -> str:
    """Read a string field; None falls back to default when one is given."""
    value = data.get(key) if default is not None else data[key]
    if value is None and default is not None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class UserProfile:
    """Biometric and preference data for one plan request.

    Frozen: the same profile is reused unchanged for every week of a
    progression chain.
    """

    name: str
    gender: Gender = Gender.MALE
    age: int = 25
    height: float = 175  # cm
    weight: float = 75  # kg
    body_fat: float = 20  # percent
    fitness_level: FitnessLevel = FitnessLevel.INTERMEDIATE
    goal: Goal = Goal.FAT_LOSS
    location: Location = Location.GYM
    time_available: int = 60  # minutes per session
    dietary_preference: DietaryPreference = DietaryPreference.NON_VEG
    allergies: str = ""
    gym_days: int = 4
    include_supplements: SupplementChoice = SupplementChoice.YES
    preferred_split: WorkoutSplit = WorkoutSplit.AI_RECOMMENDED
    budget: Budget = Budget.MEDIUM

    def validate(self) -> list[str]:
        """Return a list of problems; empty when the profile is usable."""
        problems = []
        if not self.name.strip():
            problems.append("name is required")
        if self.age <= 0:
            problems.append("age must be positive")
        if self.height <= 0:
            problems.append("height must be positive")
        if self.weight <= 0:
            problems.append("weight must be positive")
        if not 0 <= self.body_fat < 100:
            problems.append("bodyFat must be between 0 and 100")
        if not MIN_TIME_AVAILABLE <= self.time_available <= MAX_TIME_AVAILABLE:
            problems.append(
                f"timeAvailable must be {MIN_TIME_AVAILABLE}-{MAX_TIME_AVAILABLE} minutes"
            )
        if not MIN_GYM_DAYS <= self.gym_days <= MAX_GYM_DAYS:
            problems.append(f"gymDays must be {MIN_GYM_DAYS}-{MAX_GYM_DAYS}")
        return problems

    def to_dict(self) -> dict:
        """Convert to the stored (camelCase) representation."""
        return {
            "name": self.name,
            "gender": self.gender.value,
            "age": self.age,
            "height": self.height,
            "weight": self.weight,
            "bodyFat": self.body_fat,
            "fitnessLevel": self.fitness_level.value,
            "goal": self.goal.value,
            "location": self.location.value,
            "timeAvailable": self.time_available,
            "dietaryPreference": self.dietary_preference.value,
            "allergies": self.allergies,
            "gymDays": self.gym_days,
            "includeSupplements": self.include_supplements.value,
            "preferredSplit": self.preferred_split.value,
            "budget": self.budget.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        """Create from the stored representation."""
        return cls(
            name=_text(data, "name"),
            gender=Gender.parse(data["gender"]),
            age=int(data["age"]),
            height=float(data["height"]),
            weight=float(data["weight"]),
            body_fat=float(data["bodyFat"]),
            fitness_level=FitnessLevel.parse(data["fitnessLevel"]),
            goal=Goal.parse(data["goal"]),
            location=Location.parse(data["location"]),
            time_available=int(data["timeAvailable"]),
            dietary_preference=DietaryPreference.parse(data["dietaryPreference"]),
            allergies=_text(data, "allergies", default=""),
            gym_days=int(data["gymDays"]),
            include_supplements=SupplementChoice.parse(data["includeSupplements"]),
            preferred_split=WorkoutSplit.parse(data["preferredSplit"]),
            budget=Budget.parse(data["budget"]),
        )
