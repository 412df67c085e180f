"""Week-progression state machine for one user session."""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum

from ..agents.generator import PlanGenerator
from ..agents.request_builder import PlanRequest, build_plan_request
from ..db.repositories import PlanHistoryRepository
from ..errors import GenerationError, InvalidTransitionError, StorageUnavailableError
from ..models.plan import FitnessPlan
from ..models.records import AdminRecord
from ..models.user_profile import UserProfile

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    NO_PLAN = "no_plan"
    GENERATING = "generating"
    PLAN_READY = "plan_ready"


@dataclass(frozen=True)
class SessionState:
    """Snapshot of a session: status plus the plan and profile on display."""

    status: SessionStatus
    plan: FitnessPlan | None = None
    profile: UserProfile | None = None

    @property
    def week_number(self) -> int | None:
        return self.plan.week_number if self.plan else None

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "weekNumber": self.week_number,
            "plan": self.plan.to_dict() if self.plan else None,
            "profile": self.profile.to_dict() if self.profile else None,
        }


NO_PLAN = SessionState(SessionStatus.NO_PLAN)


@dataclass(frozen=True)
class GenerationOutcome:
    """Result of a successful generation.

    ``record`` is None when the plan was shown but could not be saved;
    ``save_error`` then says why.
    """

    plan: FitnessPlan
    record: AdminRecord | None
    save_error: str | None = None

    @property
    def saved(self) -> bool:
        return self.record is not None


class PlanSession:
    """Drives NoPlan -> Generating -> PlanReady(n) -> Generating -> PlanReady(n+1).

    At most one generation may be outstanding; a second request while
    generating is rejected with InvalidTransitionError. Every successful
    generation appends exactly one history record. Failed or cancelled
    generations restore the prior state and append nothing. Once a plan
    has been generated it is shown and saved; cancelling the caller after
    that point no longer rolls it back.
    """

    def __init__(
        self,
        generator: PlanGenerator,
        history: PlanHistoryRepository,
        user_id: str | None = None,
    ):
        self.generator = generator
        self.history = history
        self.user_id = user_id
        self._state = NO_PLAN
        self.last_error: str | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def status(self) -> SessionStatus:
        return self._state.status

    async def submit_profile(self, profile: UserProfile) -> GenerationOutcome:
        """Generate the foundation week for a newly submitted profile."""
        self._require_not_generating("submit a profile")
        request = build_plan_request(profile, week_number=1)
        return await self._generate(request, profile)

    async def request_next_week(self) -> GenerationOutcome:
        """Generate week n+1 from PlanReady(n), reusing the same profile."""
        if self._state.status != SessionStatus.PLAN_READY:
            raise InvalidTransitionError(
                f"Cannot request next week while {self._state.status.value}"
            )
        profile = self._state.profile
        request = build_plan_request(profile, week_number=self._state.plan.week_number + 1)
        return await self._generate(request, profile)

    def view_history_record(self, record: AdminRecord) -> SessionState:
        """Jump straight to a stored plan. No generation, no new record."""
        self._require_not_generating("open a history record")
        self._state = SessionState(SessionStatus.PLAN_READY, plan=record.plan, profile=record.user)
        self.last_error = None
        return self._state

    def reset(self) -> None:
        """Return to NoPlan (e.g. on logout)."""
        self._require_not_generating("reset")
        self._state = NO_PLAN
        self.last_error = None

    def _require_not_generating(self, action: str) -> None:
        if self._state.status == SessionStatus.GENERATING:
            raise InvalidTransitionError(f"Cannot {action} while a plan is generating")

    async def _generate(self, request: PlanRequest, profile: UserProfile) -> GenerationOutcome:
        previous = self._state
        self._state = SessionState(SessionStatus.GENERATING, plan=previous.plan, profile=profile)
        self.last_error = None

        try:
            plan = await self.generator.generate(request)
        except GenerationError as e:
            self._state = previous
            self.last_error = e.user_message
            logger.warning("Week %s generation failed: %s", request.week_number, e)
            raise
        except asyncio.CancelledError:
            self._state = previous
            logger.info("Week %s generation cancelled", request.week_number)
            raise
        except Exception:
            self._state = previous
            logger.exception("Week %s generation raised unexpectedly", request.week_number)
            raise

        # Display first, then persist
        self._state = SessionState(SessionStatus.PLAN_READY, plan=plan, profile=profile)

        try:
            # A displayed plan is always saved, even if the caller is cancelled meanwhile
            record = await asyncio.shield(self.history.append(self.user_id, profile, plan))
        except StorageUnavailableError as e:
            logger.error("Plan for week %s shown but not saved: %s", plan.week_number, e)
            return GenerationOutcome(plan=plan, record=None, save_error=str(e))

        return GenerationOutcome(plan=plan, record=record)
