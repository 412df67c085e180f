"""Admin commands over all plan records."""

from datetime import datetime

import click

from ..errors import AdminAccessDenied
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    truncate,
)


@click.group()
@click.option(
    "--passphrase",
    prompt="Admin passphrase",
    hide_input=True,
    help="Admin passphrase",
)
@click.pass_context
def admin(ctx, passphrase: str):
    """Admin view of every generated plan."""
    app = ensure_initialized(ctx)
    try:
        app.admin_gate().authorize(passphrase=passphrase)
    except AdminAccessDenied as e:
        echo_error(str(e))
        ctx.exit(1)


def _format_timestamp(value: str) -> str:
    try:
        return datetime.fromisoformat(value).strftime("%Y-%m-%d %H:%M")
    except ValueError:
        return value


@admin.command()
@click.pass_context
@async_command
async def records(ctx):
    """List all plan records, newest first."""
    app = ensure_initialized(ctx)
    all_records = await app.history().list_all()

    if not all_records:
        echo_info("No records found.")
        return

    headers = ["Date", "User Name", "Goal", "Stats", "Budget", "Plan Summary"]
    rows = [
        [
            _format_timestamp(r.timestamp),
            f"{r.user.name} ({r.user.gender.value}, {r.user.age}y)",
            r.user.goal.value,
            f"{r.user.weight:g}kg / {r.user.height:g}cm",
            r.user.budget.value,
            truncate(r.plan_summary),
        ]
        for r in all_records
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(all_records)} record(s)")


@admin.command()
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def clear(ctx, force: bool):
    """Delete every plan record."""
    app = ensure_initialized(ctx)

    if not force:
        if not click.confirm("Are you sure you want to delete all records?"):
            echo_info("Cancelled")
            return

    await app.history().clear_all()
    echo_success("All records deleted")
