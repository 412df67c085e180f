"""Initialize project command."""

import click

from ..db import init_db
from ..errors import StorageUnavailableError
from .base import async_command, echo_error, echo_info, echo_success, echo_warning, get_app


@click.command()
@click.pass_context
@async_command
async def init(ctx):
    """Initialize the fitplan data directory and database.

    Safe to re-run: existing accounts and records are kept and migrated
    to the current storage layout.
    """
    app = get_app(ctx)
    data_dir = app.settings.data_dir

    echo_info(f"Initializing fitplan in {data_dir}")
    data_dir.mkdir(parents=True, exist_ok=True)

    try:
        await init_db(app.settings.db_path)
    except StorageUnavailableError as e:
        echo_error(str(e))
        ctx.exit(1)
    echo_success("Database initialized")

    if app.settings.uses_default_admin_passphrase:
        echo_warning(
            "Admin passphrase is the built-in default. Set FITPLAN_ADMIN_PASSPHRASE."
        )
    if not app.settings.gemini_api_key:
        echo_warning("GEMINI_API_KEY is not set; plan generation will fail until it is.")

    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Create an account:   fitplan register")
    click.echo("  2. Generate a plan:     fitplan generate --email you@example.com")
