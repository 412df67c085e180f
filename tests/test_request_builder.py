"""Tests for plan request building."""

import dataclasses

import pytest

from fitplan.agents.output_specs import FITNESS_PLAN_SCHEMA
from fitplan.agents.prompts import (
    FOUNDATION_DIRECTIVE,
    LOW_BUDGET_DIRECTIVE,
    PROGRESSION_DIRECTIVE,
    exercise_count_band,
)
from fitplan.agents.request_builder import build_plan_request
from fitplan.models.user_profile import Budget, Goal, SupplementChoice


class TestBuildPlanRequest:
    """Tests for build_plan_request."""

    def test_contains_every_profile_value(self, sample_user_profile):
        text = build_plan_request(sample_user_profile).instruction_text

        for expected in [
            "Name: Test User",
            "Gender: Female",
            "Age: 29",
            "Height: 162 cm",
            "Weight: 58.5 kg",
            "Body Fat: 24%",
            "Fitness Level: Beginner",
            "Goal: Lean Muscle",
            "Location: Home",
            "Time Available: 45 minutes",
            "Diet Preference: Eggetarian",
            "Allergies/Notes: Peanuts",
            "Training Days Per Week: 3",
            "Preferred Workout Split: Full Body",
            "Include Supplements: No",
            "Budget: Low",
        ]:
            assert expected in text

    def test_empty_allergies_render_as_none(self, sample_user_profile):
        profile = dataclasses.replace(sample_user_profile, allergies="   ")
        text = build_plan_request(profile).instruction_text
        assert "Allergies/Notes: None" in text

    def test_week_one_is_foundation(self, sample_user_profile):
        request = build_plan_request(sample_user_profile, week_number=1)

        assert request.week_number == 1
        assert "Week 1." in request.instruction_text
        assert FOUNDATION_DIRECTIVE in request.instruction_text
        assert PROGRESSION_DIRECTIVE not in request.instruction_text

    def test_later_week_is_progression(self, sample_user_profile):
        request = build_plan_request(sample_user_profile, week_number=4)
        text = request.instruction_text

        assert "Week 4." in text
        assert "progressive overload relative to the prior week" in text
        assert "foundation" not in text.lower()

    def test_rejects_week_zero(self, sample_user_profile):
        with pytest.raises(ValueError):
            build_plan_request(sample_user_profile, week_number=0)

    def test_rejects_invalid_profile(self, sample_user_profile):
        profile = dataclasses.replace(sample_user_profile, gym_days=9)
        with pytest.raises(ValueError, match="gymDays"):
            build_plan_request(profile)

    def test_low_budget_names_cheap_proteins(self, sample_user_profile):
        text = build_plan_request(sample_user_profile).instruction_text

        assert LOW_BUDGET_DIRECTIVE in text
        assert "Soya Chunks" in text
        assert "Dal" in text

    @pytest.mark.parametrize("budget", [Budget.MEDIUM, Budget.HIGH])
    def test_other_budgets_skip_low_directive(self, sample_user_profile, budget):
        profile = dataclasses.replace(sample_user_profile, budget=budget)
        text = build_plan_request(profile).instruction_text

        assert LOW_BUDGET_DIRECTIVE not in text
        assert "Soya Chunks" not in text

    def test_always_excludes_buffalo(self, sample_user_profile):
        for budget in Budget:
            profile = dataclasses.replace(sample_user_profile, budget=budget)
            text = build_plan_request(profile).instruction_text
            assert "Do NOT include 'Buff', 'Buffalo', or 'Buffalo Meat'" in text

    def test_market_and_currency(self, sample_user_profile):
        text = build_plan_request(sample_user_profile).instruction_text

        assert "Nepali" in text
        assert "NPR" in text
        assert "exactly 2 distinct alternative" in text
        assert "Day 1 = Sunday" in text

    def test_protein_range_for_weight(self, sample_user_profile):
        text = build_plan_request(sample_user_profile).instruction_text
        # 58.5 kg * 1.6 and * 2.2
        assert "94 to 129 g per day" in text

    def test_goal_calorie_directive(self, sample_user_profile):
        profile = dataclasses.replace(sample_user_profile, goal=Goal.FAT_LOSS)
        text = build_plan_request(profile).instruction_text
        assert "TDEE -500 kcal/day" in text

    def test_supplement_choice(self, sample_user_profile):
        no_text = build_plan_request(sample_user_profile).instruction_text
        yes_profile = dataclasses.replace(
            sample_user_profile, include_supplements=SupplementChoice.YES
        )
        yes_text = build_plan_request(yes_profile).instruction_text

        assert "empty supplements list" in no_text
        assert "empty supplements list" not in yes_text

    def test_deterministic(self, sample_user_profile):
        first = build_plan_request(sample_user_profile, week_number=2)
        second = build_plan_request(sample_user_profile, week_number=2)

        assert first == second

    def test_schema_is_private_copy(self, sample_user_profile):
        request = build_plan_request(sample_user_profile)
        request.output_schema["properties"].pop("macros")

        assert "macros" in FITNESS_PLAN_SCHEMA["properties"]
        assert build_plan_request(sample_user_profile).output_schema == FITNESS_PLAN_SCHEMA


class TestExerciseBands:
    """Tests for session length to exercise count mapping."""

    @pytest.mark.parametrize(
        "minutes,expected",
        [(30, "3-4"), (45, "3-4"), (46, "5-6"), (75, "5-6"), (76, "7-9"), (120, "7-9")],
    )
    def test_band_boundaries(self, minutes, expected):
        count, _ = exercise_count_band(minutes)
        assert count == expected

    @pytest.mark.parametrize(
        "minutes,expected,others",
        [(45, "3-4", ["5-6", "7-9"]), (60, "5-6", ["3-4", "7-9"]), (90, "7-9", ["3-4", "5-6"])],
    )
    def test_only_selected_band_in_text(self, sample_user_profile, minutes, expected, others):
        profile = dataclasses.replace(sample_user_profile, time_available=minutes)
        text = build_plan_request(profile).instruction_text

        assert f"provide {expected} " in text
        for other in others:
            assert other not in text
