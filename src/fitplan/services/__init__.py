"""Application services for fitplan."""

from .accounts import ADMIN_LOGIN_EMAIL, AccountService, AdminGate
from .session import PlanSession, SessionState, SessionStatus

__all__ = [
    "ADMIN_LOGIN_EMAIL",
    "AccountService",
    "AdminGate",
    "PlanSession",
    "SessionState",
    "SessionStatus",
]
