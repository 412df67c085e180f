"""Integration tests for the full generation pipeline.

These call the hosted model and need GEMINI_API_KEY. They check schema
conformance and week progression, not plan content.
"""

import os
import tempfile
from pathlib import Path

import pytest

from fitplan.agents.generator import GeminiPlanGenerator
from fitplan.config import DEFAULT_MODEL
from fitplan.db import PlanHistoryRepository, init_db
from fitplan.models.user_profile import Budget, Goal, UserProfile
from fitplan.services.session import PlanSession, SessionStatus


@pytest.fixture
def generator():
    return GeminiPlanGenerator(
        api_key=os.getenv("GEMINI_API_KEY"),
        model=os.getenv("FITPLAN_MODEL", DEFAULT_MODEL),
        timeout=120,
    )


@pytest.fixture
def profile():
    return UserProfile(name="Integration User", goal=Goal.BULK, budget=Budget.LOW)


class TestPipelineIntegration:
    """Integration tests for the full generation pipeline."""

    async def test_two_week_progression(self, generator, profile):
        """Generate week 1 and week 2 and persist both."""
        with tempfile.TemporaryDirectory() as tmpdir:
            store = await init_db(Path(tmpdir) / "live.db")
            history = PlanHistoryRepository(store)
            session = PlanSession(generator, history, user_id="live")

            first = await session.submit_profile(profile)
            second = await session.request_next_week()

            assert first.plan.week_number == 1
            assert second.plan.week_number == 2
            assert session.status == SessionStatus.PLAN_READY
            assert first.plan.diet_plan
            assert first.plan.workout_split
            assert first.plan.stats.goal_description

            records = await history.list_by_user("live")
            assert [r.plan.week_number for r in records] == [2, 1]
