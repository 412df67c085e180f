"""Manual user profile input via interactive questionnaire."""

import questionary
from questionary import Style

from ...models.user_profile import (
    MAX_GYM_DAYS,
    MAX_TIME_AVAILABLE,
    MIN_GYM_DAYS,
    MIN_TIME_AVAILABLE,
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

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#2563eb bold"),
        ("question", "bold"),
        ("answer", "fg:#10b981 bold"),
        ("pointer", "fg:#2563eb bold"),
        ("highlighted", "fg:#2563eb bold"),
        ("selected", "fg:#10b981"),
        ("separator", "fg:#64748b"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def parse_number(
    value: str | None,
    minimum: float | None = None,
    maximum: float | None = None,
) -> float | None:
    """Parse a numeric answer; None if blank, malformed or out of range."""
    try:
        number = float(value)
    except (ValueError, TypeError):
        return None
    if minimum is not None and number < minimum:
        return None
    if maximum is not None and number > maximum:
        return None
    return number


def _number_validator(minimum: float, maximum: float):
    def validate(value: str):
        if parse_number(value, minimum, maximum) is None:
            return f"Enter a number between {minimum:g} and {maximum:g}"
        return True

    return validate


class ManualInputClient:
    """Interactive questionnaire for collecting a user profile."""

    async def collect_profile(self, default_name: str = "") -> UserProfile:
        """Run interactive questionnaire to collect a profile."""
        print("\n=== Fitness Profile Questionnaire ===\n")

        defaults = UserProfile(name=default_name or "User")

        name = await questionary.text(
            "What's your name?",
            default=default_name,
            style=custom_style,
        ).ask_async()

        gender = await self._select("Gender:", Gender, defaults.gender)

        age = await self._number("Age:", defaults.age, 10, 100)
        height = await self._number("Height (cm):", defaults.height, 100, 250)
        weight = await self._number("Weight (kg):", defaults.weight, 30, 300)
        body_fat = await self._number("Body fat (%):", defaults.body_fat, 2, 70)

        goal = await questionary.select(
            "What's your primary goal?",
            choices=[
                questionary.Choice("Fat Loss", Goal.FAT_LOSS),
                questionary.Choice("Lean Muscle", Goal.LEAN_MUSCLE),
                questionary.Choice("Bulk", Goal.BULK),
                questionary.Choice("Body Recomposition", Goal.RECOMPOSITION),
                questionary.Choice("Six-Pack Abs Focus", Goal.SIX_PACK_ABS),
            ],
            style=custom_style,
        ).ask_async()

        fitness_level = await self._select(
            "What's your current fitness level?", FitnessLevel, defaults.fitness_level
        )
        location = await self._select("Where will you train?", Location, defaults.location)

        time_available = await self._number(
            f"Time available per session (minutes, {MIN_TIME_AVAILABLE}-{MAX_TIME_AVAILABLE}):",
            defaults.time_available,
            MIN_TIME_AVAILABLE,
            MAX_TIME_AVAILABLE,
        )

        dietary_preference = await self._select(
            "Diet preference:", DietaryPreference, defaults.dietary_preference
        )

        allergies = await questionary.text(
            "Allergies or food notes? (optional)",
            default="",
            style=custom_style,
        ).ask_async()

        gym_days = await questionary.select(
            "How many days per week can you train?",
            choices=[str(n) for n in range(MIN_GYM_DAYS, MAX_GYM_DAYS + 1)],
            default=str(defaults.gym_days),
            style=custom_style,
        ).ask_async()

        preferred_split = await questionary.select(
            "Preferred workout split:",
            choices=[
                questionary.Choice("AI Recommended", WorkoutSplit.AI_RECOMMENDED),
                questionary.Choice("Full Body", WorkoutSplit.FULL_BODY),
                questionary.Choice("Upper / Lower", WorkoutSplit.UPPER_LOWER),
                questionary.Choice("Push / Pull / Legs", WorkoutSplit.PUSH_PULL_LEGS),
                questionary.Choice("Bro Split (Body Part)", WorkoutSplit.BRO_SPLIT),
            ],
            style=custom_style,
        ).ask_async()

        include_supplements = await questionary.select(
            "Include supplements?",
            choices=[
                questionary.Choice("Yes, include them", SupplementChoice.YES),
                questionary.Choice("No, whole foods only", SupplementChoice.NO),
            ],
            style=custom_style,
        ).ask_async()

        budget = await questionary.select(
            "Monthly food budget:",
            choices=[
                questionary.Choice("Low (Budget Friendly)", Budget.LOW),
                questionary.Choice("Medium (Balanced)", Budget.MEDIUM),
                questionary.Choice("High (Premium)", Budget.HIGH),
            ],
            default=Budget.MEDIUM,
            style=custom_style,
        ).ask_async()

        return UserProfile(
            name=name or defaults.name,
            gender=gender,
            age=int(age),
            height=height,
            weight=weight,
            body_fat=body_fat,
            fitness_level=fitness_level,
            goal=goal,
            location=location,
            time_available=int(time_available),
            dietary_preference=dietary_preference,
            allergies=allergies or "",
            gym_days=int(gym_days),
            include_supplements=include_supplements,
            preferred_split=preferred_split,
            budget=budget,
        )

    async def _select(self, message: str, enum_cls, default):
        return await questionary.select(
            message,
            choices=[questionary.Choice(member.value, member) for member in enum_cls],
            default=default,
            style=custom_style,
        ).ask_async()

    async def _number(self, message: str, default: float, minimum: float, maximum: float) -> float:
        answer = await questionary.text(
            message,
            default=f"{default:g}",
            validate=_number_validator(minimum, maximum),
            style=custom_style,
        ).ask_async()
        number = parse_number(answer, minimum, maximum)
        return default if number is None else number
