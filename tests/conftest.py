"""Pytest configuration and fixtures."""

import asyncio
import copy
import dataclasses
import tempfile
from pathlib import Path

import pytest

from fitplan.agents.request_builder import PlanRequest
from fitplan.config import Settings
from fitplan.db import MemoryKeyValueStore, PlanHistoryRepository
from fitplan.errors import GenerationError, GenerationErrorKind
from fitplan.models.plan import FitnessPlan
from fitplan.models.user_profile import (
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

SAMPLE_PLAN = {
    "weekNumber": 1,
    "stats": {
        "bmr": 1750,
        "tdee": 2700,
        "targetCalories": 2200,
        "goalDescription": "Caloric deficit of 500 kcal",
        "estimatedMonthlyCost": "NPR 18,000",
    },
    "macros": {"protein": 150, "carbs": 220, "fats": 70},
    "hydration": "3.5 liters of water daily",
    "supplements": [{"name": "Whey Protein", "timing": "Post-workout"}],
    "dietPlan": [
        {
            "timing": "Breakfast",
            "name": "Oats and Eggs",
            "items": [
                {"name": "Oats", "quantity": "80g"},
                {"name": "Boiled Eggs", "quantity": "3"},
            ],
            "alternatives": ["Chiura with curd", "Soya chunk poha"],
        },
        {
            "timing": "Dinner",
            "name": "Dal Bhat with Chicken",
            "items": [{"name": "Chicken breast", "quantity": "150g"}],
            "alternatives": ["Fish curry with rice", "Chana masala with roti"],
        },
    ],
    "workoutSplit": [
        {
            "day": "Sunday",
            "focus": "Push",
            "warmup": "5 min rowing, band pull-aparts",
            "exercises": [
                {
                    "name": "Bench Press",
                    "sets": "4",
                    "reps": "6-8",
                    "rest": "120s",
                    "notes": "Pause at chest",
                },
            ],
            "cardio": "10 min incline walk",
            "abs": None,
        },
        {
            "day": "Monday",
            "focus": "Pull",
            "warmup": "Dead hangs",
            "exercises": [
                {"name": "Barbell Row", "sets": "4", "reps": "8", "rest": "90s", "notes": ""},
            ],
            "cardio": None,
            "abs": "Hanging leg raises 3x12",
        },
    ],
    "recovery": {
        "sleep": "7-9 hours",
        "stress": "10 min breathing before bed",
        "progressTracking": "Weigh in every Sunday morning",
    },
}


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def temp_settings():
    """Settings pointing at a temporary data directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Settings(
            data_dir=Path(tmpdir),
            gemini_api_key="test-key",
            admin_passphrase="letmein",
        )


@pytest.fixture
def sample_user_profile():
    """Create a sample user profile for testing."""
    return UserProfile(
        name="Test User",
        gender=Gender.FEMALE,
        age=29,
        height=162,
        weight=58.5,
        body_fat=24,
        fitness_level=FitnessLevel.BEGINNER,
        goal=Goal.LEAN_MUSCLE,
        location=Location.HOME,
        time_available=45,
        dietary_preference=DietaryPreference.EGGETARIAN,
        allergies="Peanuts",
        gym_days=3,
        include_supplements=SupplementChoice.NO,
        preferred_split=WorkoutSplit.FULL_BODY,
        budget=Budget.LOW,
    )


@pytest.fixture
def sample_plan_dict():
    """A schema-valid plan document."""
    return copy.deepcopy(SAMPLE_PLAN)


@pytest.fixture
def sample_plan(sample_plan_dict):
    return FitnessPlan.from_dict(sample_plan_dict)


@pytest.fixture
def memory_store():
    return MemoryKeyValueStore()


@pytest.fixture
def history_repo(memory_store):
    return PlanHistoryRepository(memory_store)


class StubPlanGenerator:
    """Deterministic generator returning the sample plan for the requested week."""

    def __init__(self):
        self.requests: list[PlanRequest] = []

    async def generate(self, request: PlanRequest) -> FitnessPlan:
        self.requests.append(request)
        plan = FitnessPlan.from_dict(copy.deepcopy(SAMPLE_PLAN))
        return dataclasses.replace(plan, week_number=request.week_number)


class FailingPlanGenerator:
    """Generator that always fails with the given kind."""

    def __init__(self, kind: GenerationErrorKind = GenerationErrorKind.TRANSPORT_FAILURE):
        self.kind = kind
        self.calls = 0

    async def generate(self, request: PlanRequest) -> FitnessPlan:
        self.calls += 1
        raise GenerationError(self.kind, "stubbed failure")


class BlockingPlanGenerator(StubPlanGenerator):
    """Generator that waits until released, for in-flight tests."""

    def __init__(self):
        super().__init__()
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def generate(self, request: PlanRequest) -> FitnessPlan:
        self.started.set()
        await self.release.wait()
        return await super().generate(request)


@pytest.fixture
def stub_generator():
    return StubPlanGenerator()
