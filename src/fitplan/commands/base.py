"""Shared CLI utilities."""

import asyncio
from dataclasses import dataclass, field
from functools import wraps
from typing import Callable

import click

from ..agents.generator import GeminiPlanGenerator, PlanGenerator
from ..config import Settings
from ..db import AccountRepository, PlanHistoryRepository, SQLiteKeyValueStore
from ..services.accounts import AccountService, AdminGate


def default_generator_factory(settings: Settings) -> PlanGenerator:
    """Build the Gemini generator from settings."""
    return GeminiPlanGenerator(
        api_key=settings.gemini_api_key,
        model=settings.model,
        timeout=settings.timeout,
    )


@dataclass
class AppContext:
    """Objects shared by all commands (stored on ``ctx.obj``)."""

    settings: Settings
    generator_factory: Callable[[Settings], PlanGenerator] = field(
        default=default_generator_factory
    )

    def store(self) -> SQLiteKeyValueStore:
        return SQLiteKeyValueStore(self.settings.db_path)

    def history(self) -> PlanHistoryRepository:
        return PlanHistoryRepository(self.store(), max_records=self.settings.max_records)

    def admin_gate(self) -> AdminGate:
        return AdminGate(self.settings.admin_passphrase)

    def accounts(self) -> AccountService:
        return AccountService(AccountRepository(self.store()), self.admin_gate())


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def get_app(ctx: click.Context) -> AppContext:
    return ctx.find_root().obj


def ensure_initialized(ctx: click.Context) -> AppContext:
    """Ensure the database is initialized."""
    app = get_app(ctx)
    if not app.settings.db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'fitplan init' first."
        )
        ctx.exit(1)
    return app


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = []
    lines.append("".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)).rstrip())
    lines.append("".join("-" * w + " " * padding for w in widths).rstrip())
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)).rstrip()
        )

    return "\n".join(lines)


def truncate(text: str, length: int = 40) -> str:
    return text[:length] + "..." if len(text) > length else text
