"""Account registration, login and admin access."""

import hmac
import logging

from ..db.repositories import AccountRepository
from ..errors import AdminAccessDenied, InvalidCredentialsError
from ..models.records import User
from ..utils.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)

# Login email that routes to the admin gate instead of an account
ADMIN_LOGIN_EMAIL = "admin"

# Verified against for unknown emails
_DUMMY_HASH = hash_password("fitplan-dummy-password")


class AdminGate:
    """Shared-passphrase check for the admin view.

    A single static secret is weak; accounts with ``is_admin`` set pass
    without it.
    """

    def __init__(self, passphrase: str):
        self._passphrase = passphrase

    def matches(self, passphrase: str | None) -> bool:
        if not passphrase:
            return False
        return hmac.compare_digest(passphrase.encode("utf-8"), self._passphrase.encode("utf-8"))

    def authorize(self, passphrase: str | None = None, user: User | None = None) -> None:
        """Allow admin access by passphrase or admin role.

        Raises:
            AdminAccessDenied: If neither grants access
        """
        if user is not None and user.is_admin:
            return
        if self.matches(passphrase):
            logger.info("Admin access granted by passphrase")
            return
        logger.warning("Admin access denied")
        raise AdminAccessDenied()


class AccountService:
    """Registers and authenticates users."""

    def __init__(self, repository: AccountRepository, admin_gate: AdminGate | None = None):
        self.repository = repository
        self.admin_gate = admin_gate

    async def register(self, name: str, email: str, password: str, is_admin: bool = False) -> User:
        """Create an account.

        Raises:
            ValueError: If a field is blank
            DuplicateEmailError: If the email is already registered
        """
        if not name.strip() or not email.strip() or not password:
            raise ValueError("Name, email and password are required.")
        if email.strip().casefold() == ADMIN_LOGIN_EMAIL:
            raise ValueError(f"'{ADMIN_LOGIN_EMAIL}' is reserved.")

        user = await self.repository.create(
            name=name.strip(),
            email=email,
            password_hash=hash_password(password),
            is_admin=is_admin,
        )
        logger.info("Registered account %s", user.id)
        return user

    async def login(self, email: str, password: str) -> User:
        """Authenticate a user.

        Raises:
            InvalidCredentialsError: If no account matches email and password
        """
        user = await self.repository.get_by_email(email)
        if user is None:
            verify_password(password, _DUMMY_HASH)
            logger.info("Failed login: unknown email")
            raise InvalidCredentialsError()
        if not verify_password(password, user.password_hash):
            logger.info("Failed login for account %s", user.id)
            raise InvalidCredentialsError()
        return user

    def is_admin_login(self, email: str, password: str) -> bool:
        """Whether login form input is the admin shortcut (email 'admin' + passphrase)."""
        if self.admin_gate is None or email.strip().casefold() != ADMIN_LOGIN_EMAIL:
            return False
        return self.admin_gate.matches(password)
