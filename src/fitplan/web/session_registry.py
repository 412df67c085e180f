"""Tracks logged-in plan sessions for the web API."""

import asyncio
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from ..models.records import User
from ..services.session import PlanSession


@dataclass
class SessionEntry:
    """A logged-in user's plan session.

    The lock serializes generation requests for the session.
    """

    id: str
    user: User
    session: PlanSession
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def busy(self) -> bool:
        return self.lock.locked()

    def to_dict(self) -> dict:
        return {
            "sessionId": self.id,
            "user": self.user.public_dict(),
            "state": self.session.state.to_dict(),
            "lastError": self.session.last_error,
            "busy": self.busy,
            "createdAt": self.created_at.isoformat(),
        }


class SessionRegistry:
    """Holds active sessions, evicting the least recently used past a limit."""

    def __init__(self, max_sessions: int = 200):
        self._sessions: OrderedDict[str, SessionEntry] = OrderedDict()
        self._max_sessions = max_sessions

    def create(self, user: User, session: PlanSession) -> SessionEntry:
        """Register a new session."""
        self._make_room()
        entry = SessionEntry(id=uuid4().hex, user=user, session=session)
        self._sessions[entry.id] = entry
        return entry

    def get(self, session_id: str) -> SessionEntry | None:
        """Get a session by ID and mark it recently used."""
        entry = self._sessions.get(session_id)
        if entry:
            self._sessions.move_to_end(session_id)
        return entry

    def remove(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)

    def _make_room(self) -> None:
        """Evict idle sessions, oldest first, until one more fits. Busy sessions stay."""
        for session_id, entry in list(self._sessions.items()):
            if len(self._sessions) < self._max_sessions:
                break
            if not entry.busy:
                del self._sessions[session_id]
