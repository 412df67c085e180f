"""FastAPI application for the fitplan JSON API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..agents.generator import GeminiPlanGenerator, PlanGenerator
from ..agents.request_builder import PlanRequest
from ..config import Settings, setup_logging
from ..db import (
    AccountRepository,
    KeyValueStore,
    PlanHistoryRepository,
    SQLiteKeyValueStore,
)
from ..db.engine import run_migrations
from ..errors import (
    AccountError,
    AdminAccessDenied,
    ConfigurationError,
    DuplicateEmailError,
    GenerationError,
    GenerationErrorKind,
    InvalidTransitionError,
    StorageUnavailableError,
)
from ..models.plan import FitnessPlan
from ..services.accounts import AccountService, AdminGate
from .routers import accounts, admin, sessions
from .session_registry import SessionRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    store = app.state.store
    if isinstance(store, SQLiteKeyValueStore):
        store.db_path.parent.mkdir(parents=True, exist_ok=True)
        await store.initialize()
    await run_migrations(store)
    if app.state.settings.uses_default_admin_passphrase:
        logger.warning("Admin passphrase is the built-in default; set FITPLAN_ADMIN_PASSPHRASE")
    yield


def create_app(
    settings: Settings | None = None,
    store: KeyValueStore | None = None,
    generator: PlanGenerator | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="fitplan",
        description="AI-generated weekly diet and workout plans",
        version=__version__,
        lifespan=lifespan,
    )

    store = store or SQLiteKeyValueStore(settings.db_path)
    admin_gate = AdminGate(settings.admin_passphrase)

    app.state.settings = settings
    app.state.store = store
    app.state.generator = generator or DeferredGeminiGenerator(settings)
    app.state.history = PlanHistoryRepository(store, max_records=settings.max_records)
    app.state.admin_gate = admin_gate
    app.state.accounts = AccountService(AccountRepository(store), admin_gate)
    app.state.registry = SessionRegistry()

    app.include_router(accounts.router)
    app.include_router(sessions.router)
    app.include_router(admin.router)

    _register_error_handlers(app)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app


class DeferredGeminiGenerator:
    """Builds the Gemini client on first use so the API can start without a key."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._generator: GeminiPlanGenerator | None = None

    async def generate(self, request: PlanRequest) -> FitnessPlan:
        if self._generator is None:
            self._generator = GeminiPlanGenerator(
                api_key=self.settings.gemini_api_key,
                model=self.settings.model,
                timeout=self.settings.timeout,
            )
        return await self._generator.generate(request)


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(GenerationError)
    async def generation_error(request: Request, exc: GenerationError):
        status = 504 if exc.kind == GenerationErrorKind.TIMEOUT else 502
        return _error(status, exc.user_message, kind=exc.kind.value)

    @app.exception_handler(AccountError)
    async def account_error(request: Request, exc: AccountError):
        status = 409 if isinstance(exc, DuplicateEmailError) else 401
        return _error(status, str(exc))

    @app.exception_handler(AdminAccessDenied)
    async def admin_denied(request: Request, exc: AdminAccessDenied):
        return _error(401, str(exc))

    @app.exception_handler(InvalidTransitionError)
    async def invalid_transition(request: Request, exc: InvalidTransitionError):
        return _error(409, str(exc))

    @app.exception_handler(StorageUnavailableError)
    async def storage_unavailable(request: Request, exc: StorageUnavailableError):
        logger.error("Storage unavailable: %s", exc)
        return _error(503, "Storage unavailable. Please try again later.")

    @app.exception_handler(ConfigurationError)
    async def configuration_error(request: Request, exc: ConfigurationError):
        logger.error("Configuration error: %s", exc)
        return _error(503, str(exc))
