"""Data access layer for fitplan."""

import logging
from datetime import datetime, timezone
from typing import Callable

from ..errors import DuplicateEmailError
from ..models.plan import FitnessPlan
from ..models.records import AdminRecord, User
from ..models.user_profile import UserProfile
from .engine import ACCOUNTS_KEY, RECORDS_KEY, KeyValueStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_time_id(existing: set[str], now: datetime) -> str:
    """Millisecond-epoch id, bumped until it is unused."""
    candidate = int(now.timestamp() * 1000)
    while str(candidate) in existing:
        candidate += 1
    return str(candidate)


def normalize_email(email: str) -> str:
    """Key used for email uniqueness and login matching."""
    return email.strip().casefold()


class PlanHistoryRepository:
    """Append-only log of generated plans.

    Records are stored newest first. The same log backs both the user
    dashboard and the admin view.
    """

    def __init__(
        self,
        store: KeyValueStore,
        max_records: int = 0,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.store = store
        self.max_records = max_records
        self.clock = clock

    async def append(
        self,
        user_id: str | None,
        profile: UserProfile,
        plan: FitnessPlan,
    ) -> AdminRecord:
        """Persist a new record for a generated plan and return it."""
        now = self.clock()
        record = AdminRecord(
            id="",
            user_id=user_id,
            timestamp=now.isoformat(),
            user=profile,
            plan=plan,
            plan_summary=plan.stats.goal_description,
        )
        created: list[AdminRecord] = []

        def prepend(records: list[dict]) -> list[dict]:
            existing_ids = {str(r.get("id")) for r in records}
            stored = record.with_id(new_time_id(existing_ids, now))
            created.append(stored)
            updated = [stored.to_dict(), *records]
            if self.max_records > 0:
                updated = updated[: self.max_records]
            return updated

        records = await self.store.update(RECORDS_KEY, prepend, default=[])
        logger.info(
            "Saved plan record %s (week %s, user %s, %d total)",
            created[0].id,
            plan.week_number,
            user_id or "anonymous",
            len(records),
        )
        return created[0]

    async def list_all(self) -> list[AdminRecord]:
        """List all records, newest first."""
        records = await self.store.get(RECORDS_KEY, [])
        return [AdminRecord.from_dict(r) for r in records]

    async def list_by_user(self, user_id: str) -> list[AdminRecord]:
        """List one user's records, newest first."""
        return [r for r in await self.list_all() if r.user_id == user_id]

    async def get(self, record_id: str) -> AdminRecord | None:
        """Get a record by ID."""
        for record in await self.list_all():
            if record.id == record_id:
                return record
        return None

    async def clear_all(self) -> None:
        """Irreversibly delete every record."""
        await self.store.delete(RECORDS_KEY)
        logger.warning("Cleared all plan records")


class AccountRepository:
    """Repository for user accounts."""

    def __init__(self, store: KeyValueStore, clock: Callable[[], datetime] = _utcnow):
        self.store = store
        self.clock = clock

    async def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        is_admin: bool = False,
    ) -> User:
        """Create an account.

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        key = normalize_email(email)
        created: list[User] = []

        def add(accounts: list[dict]) -> list[dict]:
            if any(normalize_email(a["email"]) == key for a in accounts):
                raise DuplicateEmailError(email)
            user = User(
                id=new_time_id({str(a["id"]) for a in accounts}, self.clock()),
                name=name,
                email=email.strip(),
                password_hash=password_hash,
                is_admin=is_admin,
            )
            created.append(user)
            return [*accounts, user.to_dict()]

        await self.store.update(ACCOUNTS_KEY, add, default=[])
        return created[0]

    async def list_all(self) -> list[User]:
        accounts = await self.store.get(ACCOUNTS_KEY, [])
        return [User.from_dict(a) for a in accounts]

    async def get(self, user_id: str) -> User | None:
        """Get an account by ID."""
        for user in await self.list_all():
            if user.id == user_id:
                return user
        return None

    async def get_by_email(self, email: str) -> User | None:
        """Get an account by email (case-insensitive)."""
        key = normalize_email(email)
        for user in await self.list_all():
            if normalize_email(user.email) == key:
                return user
        return None
