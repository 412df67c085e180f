"""Account registration command."""

import click

from ..errors import DuplicateEmailError, StorageUnavailableError
from .base import async_command, echo_error, echo_success, ensure_initialized


@click.command()
@click.option("--name", prompt="Full name", help="Your name")
@click.option("--email", prompt="Email", help="Login email (case-insensitive)")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Account password",
)
@click.pass_context
@async_command
async def register(ctx, name: str, email: str, password: str):
    """Create a new account."""
    app = ensure_initialized(ctx)

    try:
        user = await app.accounts().register(name, email, password)
    except (ValueError, DuplicateEmailError, StorageUnavailableError) as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Account created for {user.name} (ID: {user.id})")
