"""Tests for data models."""

import pytest

from fitplan.models.plan import FitnessPlan, WorkoutDay
from fitplan.models.records import AdminRecord, User
from fitplan.models.user_profile import (
    Budget,
    DietaryPreference,
    Goal,
    SupplementChoice,
    UserProfile,
    WorkoutSplit,
)


class TestUserProfile:
    """Tests for UserProfile model."""

    def test_defaults(self):
        """Test questionnaire defaults."""
        profile = UserProfile(name="A")

        assert profile.age == 25
        assert profile.height == 175
        assert profile.weight == 75
        assert profile.body_fat == 20
        assert profile.goal == Goal.FAT_LOSS
        assert profile.time_available == 60
        assert profile.dietary_preference == DietaryPreference.NON_VEG
        assert profile.gym_days == 4
        assert profile.include_supplements == SupplementChoice.YES
        assert profile.preferred_split == WorkoutSplit.AI_RECOMMENDED
        assert profile.budget == Budget.MEDIUM

    def test_to_dict_uses_stored_keys(self, sample_user_profile):
        """Test profile serialization."""
        data = sample_user_profile.to_dict()

        assert data["bodyFat"] == 24
        assert data["fitnessLevel"] == "Beginner"
        assert data["timeAvailable"] == 45
        assert data["dietaryPreference"] == "Eggetarian"
        assert data["gymDays"] == 3
        assert data["includeSupplements"] == "No"
        assert data["preferredSplit"] == "Full Body"
        assert data["budget"] == "Low"

    def test_roundtrip(self, sample_user_profile):
        """Test profile deserialization restores an equal value."""
        restored = UserProfile.from_dict(sample_user_profile.to_dict())
        assert restored == sample_user_profile

    def test_from_dict_accepts_any_case(self, sample_user_profile):
        data = sample_user_profile.to_dict()
        data["goal"] = "six-pack abs"
        data["budget"] = "HIGH"

        profile = UserProfile.from_dict(data)

        assert profile.goal == Goal.SIX_PACK_ABS
        assert profile.budget == Budget.HIGH

    def test_from_dict_rejects_unknown_label(self, sample_user_profile):
        data = sample_user_profile.to_dict()
        data["goal"] = "Get Huge"

        with pytest.raises(ValueError):
            UserProfile.from_dict(data)

    @pytest.mark.parametrize("field,value", [("name", 5), ("name", None), ("allergies", ["nuts"])])
    def test_from_dict_rejects_non_text(self, sample_user_profile, field, value):
        data = {**sample_user_profile.to_dict(), field: value}

        with pytest.raises(ValueError, match=field):
            UserProfile.from_dict(data)

    def test_from_dict_missing_allergies(self, sample_user_profile):
        data = sample_user_profile.to_dict()
        data.pop("allergies")

        assert UserProfile.from_dict(data).allergies == ""
        assert UserProfile.from_dict({**data, "allergies": None}).allergies == ""

    def test_validate_valid_profile(self, sample_user_profile):
        assert sample_user_profile.validate() == []

    @pytest.mark.parametrize(
        "changes",
        [
            {"name": "  "},
            {"weight": 0},
            {"time_available": 29},
            {"time_available": 121},
            {"gym_days": 2},
            {"gym_days": 8},
        ],
    )
    def test_validate_reports_problems(self, changes):
        profile = UserProfile(**{"name": "A", **changes})
        assert profile.validate()


class TestFitnessPlan:
    """Tests for FitnessPlan model."""

    def test_from_dict(self, sample_plan_dict):
        """Test plan deserialization."""
        plan = FitnessPlan.from_dict(sample_plan_dict)

        assert plan.week_number == 1
        assert plan.stats.target_calories == 2200
        assert plan.macros.protein == 150
        assert len(plan.diet_plan) == 2
        assert plan.diet_plan[0].alternatives == ("Chiura with curd", "Soya chunk poha")
        assert plan.workout_split[0].exercises[0].name == "Bench Press"
        assert plan.workout_split[0].abs is None
        assert plan.workout_split[1].cardio is None
        assert plan.recovery.progress_tracking == "Weigh in every Sunday morning"

    def test_roundtrip_preserves_document(self, sample_plan_dict):
        """Test plans survive serialization unchanged."""
        plan = FitnessPlan.from_dict(sample_plan_dict)
        assert plan.to_dict() == sample_plan_dict

    def test_empty_supplements(self, sample_plan_dict):
        sample_plan_dict["supplements"] = []
        plan = FitnessPlan.from_dict(sample_plan_dict)

        assert plan.supplements == ()
        assert "Supplements" not in plan.get_summary()

    def test_get_summary(self, sample_plan):
        summary = sample_plan.get_summary()

        assert summary.startswith("Week 1: Caloric deficit of 500 kcal")
        assert "Target: 2200 kcal" in summary
        assert "Alt 2: Soya chunk poha" in summary
        assert "Bench Press: 4 x 6-8, rest 120s (Pause at chest)" in summary
        assert "Abs: Hanging leg raises 3x12" in summary

    def test_workout_day_optional_fields(self):
        day = WorkoutDay.from_dict(
            {"day": "Friday", "focus": "Legs", "warmup": "Bike", "exercises": []}
        )
        assert day.cardio is None
        assert day.abs is None


class TestRecords:
    """Tests for account and history record models."""

    def test_user_public_dict_hides_hash(self):
        user = User(id="1", name="A", email="a@x.com", password_hash="pbkdf2_sha256$1$aa$bb")

        assert "passwordHash" in user.to_dict()
        assert "passwordHash" not in user.public_dict()
        assert User.from_dict(user.to_dict()) == user

    def test_admin_record_roundtrip(self, sample_user_profile, sample_plan):
        record = AdminRecord(
            id="1718000000000",
            timestamp="2024-06-10T08:00:00+00:00",
            user=sample_user_profile,
            plan=sample_plan,
            plan_summary=sample_plan.stats.goal_description,
            user_id="42",
        )
        data = record.to_dict()

        assert data["userId"] == "42"
        assert data["planSummary"] == "Caloric deficit of 500 kcal"
        assert AdminRecord.from_dict(data) == record

    def test_admin_record_without_user_id(self, sample_user_profile, sample_plan):
        record = AdminRecord(
            id="1",
            timestamp="2024-06-10T08:00:00+00:00",
            user=sample_user_profile,
            plan=sample_plan,
            plan_summary="x",
        )
        assert "userId" not in record.to_dict()
        assert AdminRecord.from_dict(record.to_dict()).user_id is None
