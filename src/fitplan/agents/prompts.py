"""Prompt templates and directives for plan generation."""

from ..models.user_profile import Budget, Goal, SupplementChoice

CURRENCY = "NPR (Nepalese Rupees)"
MARKET_CONTEXT = "local Nepali markets"
PROTEIN_RANGE_G_PER_KG = (1.6, 2.2)

SYSTEM_ROLE = (
    "Act as an elite sports nutritionist and strength coach. Create a premium, "
    "highly personalized daily diet and workout plan for the profile below."
)

FOUNDATION_DIRECTIVE = (
    "This is the starting foundation week. Establish baseline volume, "
    "technique and calorie targets."
)

PROGRESSION_DIRECTIVE = (
    "This is a progression from the previous week. Apply progressive overload "
    "relative to the prior week: increase intensity, adjust volume, or modify "
    "exercises slightly."
)

LOW_BUDGET_DIRECTIVE = (
    "Since the budget is LOW, you MUST prioritize the most affordable protein sources: "
    "Soya Chunks (Nutrela), Lentils (Dal), Chickpeas (Chana), Eggs, and seasonal vegetables. "
    "Minimize expensive meats. Use rice/oats as primary carb sources."
)

STANDARD_BUDGET_DIRECTIVE = "Balance high-quality ingredients with standard staple foods."

EXCLUDED_PROTEIN_TERMS = ("Buff", "Buffalo", "Buffalo Meat")

EXCLUSION_DIRECTIVE = (
    "STRICT EXCLUSION: Do NOT include 'Buff', 'Buffalo', or 'Buffalo Meat' in any meal "
    "or alternative, regardless of diet preference. Use Chicken, Goat (Mutton), Fish, "
    "or Eggs instead for non-veg."
)

# Daily calorie offset from TDEE for each goal
GOAL_CALORIE_ADJUSTMENTS = {
    Goal.FAT_LOSS: -500,
    Goal.LEAN_MUSCLE: 250,
    Goal.BULK: 500,
    Goal.RECOMPOSITION: -200,
    Goal.SIX_PACK_ABS: -400,
}

# (upper bound in minutes inclusive, exercise count, guidance); None = no upper bound
EXERCISE_BANDS = [
    (45, "3-4", "heavy compound exercises. Focus on intensity."),
    (75, "5-6", "exercises. Balance compound and isolation work."),
    (None, "7-9", "exercises. High volume including accessories and isolation work."),
]

WEEK_DAYS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

PLAN_PROMPT = """{system_role}

PROFILE:
- Name: {name}
- Gender: {gender}
- Age: {age}
- Height: {height} cm
- Weight: {weight} kg
- Body Fat: {body_fat}%
- Fitness Level: {fitness_level}
- Goal: {goal}
- Location: {location}
- Time Available: {time_available} minutes
- Diet Preference: {dietary_preference}
- Allergies/Notes: {allergies}
- Training Days Per Week: {gym_days}
- Preferred Workout Split: {preferred_split}
- Include Supplements: {include_supplements}
- Budget: {budget}

CURRENT PHASE:
This plan is for Week {week_number}.
{phase_directive}

REQUIREMENTS:
1. ENERGY: Calculate BMR with the Mifflin-St Jeor equation and an activity-adjusted TDEE.
   {calorie_directive}
2. PROTEIN: Target {protein_min}-{protein_max} g of protein per kg of bodyweight \
({protein_min_total:.0f} to {protein_max_total:.0f} g per day for {weight} kg).
3. MARKET CONTEXT: The diet plan must strictly use foods available in {market}.
4. BUDGET ADJUSTMENT: {budget_directive}
5. {exclusion_directive}
6. ALTERNATIVES: For every meal, provide exactly 2 distinct alternative options.
7. WORKOUT SCHEDULE: Start on Sunday. {day_mapping}. Provide {gym_days} training days.
8. WORKOUT VOLUME: For {time_available}-minute sessions provide {exercise_count} {exercise_guidance}
9. SUPPLEMENTS: {supplement_directive}
10. COST: Return an estimated monthly cost for this diet plan in {currency}.

Ensure the tone is motivating, professional, and results-oriented."""


def exercise_count_band(time_available: int) -> tuple[str, str]:
    """Map session length in minutes to (exercise count, guidance)."""
    for upper, count, guidance in EXERCISE_BANDS:
        if upper is None or time_available <= upper:
            return count, guidance
    raise AssertionError("unreachable: last band is unbounded")


def budget_directive(budget: Budget) -> str:
    if budget == Budget.LOW:
        return LOW_BUDGET_DIRECTIVE
    return STANDARD_BUDGET_DIRECTIVE


def calorie_directive(goal: Goal) -> str:
    delta = GOAL_CALORIE_ADJUSTMENTS[goal]
    if delta == 0:
        return f"Set the daily calorie target at maintenance (TDEE) for the goal '{goal.value}'."
    return (
        f"Set the daily calorie target to TDEE {delta:+d} kcal/day "
        f"for the goal '{goal.value}'."
    )


def supplement_directive(choice: SupplementChoice) -> str:
    if choice == SupplementChoice.YES:
        return "Recommend evidence-based supplements with their timing."
    return "Whole foods only. Return an empty supplements list."


def day_mapping() -> str:
    return ", ".join(f"Day {i} = {day}" for i, day in enumerate(WEEK_DAYS, start=1))
