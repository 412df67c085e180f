"""Exception types for fitplan."""

from enum import Enum

# Shown to the user for every generation failure kind
GENERATION_FAILED_MESSAGE = (
    "Failed to generate plan. Please verify your internet connection and API key, "
    "then try again."
)


class FitplanError(Exception):
    """Base class for all fitplan errors."""


class ConfigurationError(FitplanError):
    """Required configuration is missing or invalid."""


class GenerationErrorKind(str, Enum):
    """Why a plan generation attempt failed."""

    TRANSPORT_FAILURE = "transport_failure"  # Unreachable service or non-success status
    EMPTY_RESPONSE = "empty_response"  # Service answered without a body
    SCHEMA_MISMATCH = "schema_mismatch"  # Body present but not a valid plan
    TIMEOUT = "timeout"


class GenerationError(FitplanError):
    """Plan generation failed."""

    def __init__(
        self,
        kind: GenerationErrorKind,
        message: str = "",
        problems: list[str] | None = None,
    ):
        self.kind = kind
        self.problems = problems or []
        detail = message or kind.value.replace("_", " ")
        if self.problems:
            detail += ": " + "; ".join(self.problems[:5])
            if len(self.problems) > 5:
                detail += f" (+{len(self.problems) - 5} more)"
        super().__init__(detail)

    @property
    def user_message(self) -> str:
        return GENERATION_FAILED_MESSAGE


class AccountError(FitplanError):
    """Base class for account errors."""


class DuplicateEmailError(AccountError):
    """An account with this email already exists."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Email already registered.")


class InvalidCredentialsError(AccountError):
    """No account matches the given email and password."""

    def __init__(self):
        super().__init__("Invalid email or password.")


class AdminAccessDenied(FitplanError):
    """Admin passphrase check failed."""

    def __init__(self):
        super().__init__("Incorrect admin passphrase.")


class StorageUnavailableError(FitplanError):
    """The persistence layer could not be read or written."""


class InvalidTransitionError(FitplanError):
    """A plan session operation is not allowed in the current state."""
