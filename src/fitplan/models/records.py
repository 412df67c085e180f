"""Account and plan history record models."""

from dataclasses import dataclass, replace

from .plan import FitnessPlan
from .user_profile import UserProfile


@dataclass(frozen=True)
class User:
    """A registered account.

    Only a salted hash of the password is kept (see utils.passwords).
    """

    id: str
    name: str
    email: str
    password_hash: str
    is_admin: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "passwordHash": self.password_hash,
            "isAdmin": self.is_admin,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            password_hash=data["passwordHash"],
            is_admin=bool(data.get("isAdmin", False)),
        )

    def public_dict(self) -> dict:
        """Representation safe to return to clients."""
        return {"id": self.id, "name": self.name, "email": self.email, "isAdmin": self.is_admin}


@dataclass(frozen=True)
class AdminRecord:
    """A persisted (profile, plan, timestamp) tuple.

    Created once per successful generation and never updated.
    """

    id: str
    timestamp: str  # ISO 8601
    user: UserProfile
    plan: FitnessPlan
    plan_summary: str
    user_id: str | None = None

    def with_id(self, record_id: str) -> "AdminRecord":
        return replace(self, id=record_id)

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "timestamp": self.timestamp,
            "user": self.user.to_dict(),
            "plan": self.plan.to_dict(),
            "planSummary": self.plan_summary,
        }
        if self.user_id is not None:
            data["userId"] = self.user_id
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "AdminRecord":
        return cls(
            id=str(data["id"]),
            user_id=data.get("userId"),
            timestamp=data["timestamp"],
            user=UserProfile.from_dict(data["user"]),
            plan=FitnessPlan.from_dict(data["plan"]),
            plan_summary=data.get("planSummary", ""),
        )
