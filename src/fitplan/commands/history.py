"""Plan history commands."""

import click

from ..errors import InvalidCredentialsError
from .base import async_command, echo_error, echo_info, ensure_initialized, format_table, truncate


@click.group()
@click.pass_context
def history(ctx):
    """Browse your saved plans."""
    ensure_initialized(ctx)


@history.command(name="list")
@click.option("--email", "-e", required=True, help="Account email")
@click.option("--password", prompt=True, hide_input=True, help="Account password")
@click.pass_context
@async_command
async def list_history(ctx, email: str, password: str):
    """List your saved plans, newest first."""
    app = ensure_initialized(ctx)
    try:
        user = await app.accounts().login(email, password)
    except InvalidCredentialsError as e:
        echo_error(str(e))
        ctx.exit(1)

    records = await app.history().list_by_user(user.id)
    if not records:
        echo_info("No plans yet. Generate one with 'fitplan generate'")
        return

    headers = ["ID", "Date", "Week", "Goal", "Calories", "Summary"]
    rows = [
        [
            r.id,
            r.timestamp[:10],
            str(r.plan.week_number),
            r.user.goal.value,
            f"{r.plan.stats.target_calories:.0f}",
            truncate(r.plan_summary),
        ]
        for r in records
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(records)} plan(s)")


@history.command()
@click.argument("record_id")
@click.option("--email", "-e", required=True, help="Account email")
@click.option("--password", prompt=True, hide_input=True, help="Account password")
@click.pass_context
@async_command
async def show(ctx, record_id: str, email: str, password: str):
    """Show a saved plan."""
    app = ensure_initialized(ctx)
    try:
        user = await app.accounts().login(email, password)
    except InvalidCredentialsError as e:
        echo_error(str(e))
        ctx.exit(1)

    record = await app.history().get(record_id)
    if record is None or record.user_id != user.id:
        echo_error(f"Record {record_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo("=" * 60)
    click.echo(f"Record {record.id} - {record.timestamp}")
    click.echo(f"Profile: {record.user.name}, {record.user.goal.value}, budget {record.user.budget.value}")
    click.echo("=" * 60)
    click.echo(record.plan.get_summary())
