"""Builds the instruction text and output schema for a plan request."""

from dataclasses import dataclass

from ..models.user_profile import UserProfile
from .output_specs import fitness_plan_schema
from .prompts import (
    CURRENCY,
    EXCLUSION_DIRECTIVE,
    FOUNDATION_DIRECTIVE,
    MARKET_CONTEXT,
    PLAN_PROMPT,
    PROGRESSION_DIRECTIVE,
    PROTEIN_RANGE_G_PER_KG,
    SYSTEM_ROLE,
    budget_directive,
    calorie_directive,
    day_mapping,
    exercise_count_band,
    supplement_directive,
)


@dataclass(frozen=True)
class PlanRequest:
    """Everything the generator needs for one plan."""

    instruction_text: str
    output_schema: dict
    week_number: int


def _fmt(value: float) -> str:
    """Render a number without a trailing .0 for whole values."""
    return f"{value:g}"


def build_plan_request(profile: UserProfile, week_number: int = 1) -> PlanRequest:
    """Build the plan request for a profile and week.

    Pure and deterministic: the same profile and week always produce the
    same text and an equal schema.

    Args:
        profile: The user's profile
        week_number: Week of the progression chain (1 = foundation week)

    Returns:
        PlanRequest with instruction text and output schema

    Raises:
        ValueError: If the week number is below 1 or the profile is invalid
    """
    if week_number < 1:
        raise ValueError(f"week_number must be >= 1, got {week_number}")
    problems = profile.validate()
    if problems:
        raise ValueError("Invalid profile: " + "; ".join(problems))

    exercise_count, exercise_guidance = exercise_count_band(profile.time_available)
    protein_min, protein_max = PROTEIN_RANGE_G_PER_KG

    text = PLAN_PROMPT.format(
        system_role=SYSTEM_ROLE,
        name=profile.name,
        gender=profile.gender.value,
        age=profile.age,
        height=_fmt(profile.height),
        weight=_fmt(profile.weight),
        body_fat=_fmt(profile.body_fat),
        fitness_level=profile.fitness_level.value,
        goal=profile.goal.value,
        location=profile.location.value,
        time_available=profile.time_available,
        dietary_preference=profile.dietary_preference.value,
        allergies=profile.allergies.strip() or "None",
        gym_days=profile.gym_days,
        preferred_split=profile.preferred_split.value,
        include_supplements=profile.include_supplements.value,
        budget=profile.budget.value,
        week_number=week_number,
        phase_directive=PROGRESSION_DIRECTIVE if week_number > 1 else FOUNDATION_DIRECTIVE,
        calorie_directive=calorie_directive(profile.goal),
        protein_min=protein_min,
        protein_max=protein_max,
        protein_min_total=protein_min * profile.weight,
        protein_max_total=protein_max * profile.weight,
        market=MARKET_CONTEXT,
        budget_directive=budget_directive(profile.budget),
        exclusion_directive=EXCLUSION_DIRECTIVE,
        day_mapping=day_mapping(),
        exercise_count=exercise_count,
        exercise_guidance=exercise_guidance,
        supplement_directive=supplement_directive(profile.include_supplements),
        currency=CURRENCY,
    )

    return PlanRequest(
        instruction_text=text,
        output_schema=fitness_plan_schema(),
        week_number=week_number,
    )
