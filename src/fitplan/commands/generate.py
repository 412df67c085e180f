"""Generate plan command."""

import json
from pathlib import Path

import click

from ..clients.manual import ManualInputClient
from ..errors import (
    ConfigurationError,
    GenerationError,
    InvalidCredentialsError,
    StorageUnavailableError,
)
from ..models.user_profile import UserProfile
from ..services.session import GenerationOutcome, PlanSession
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
)


def _load_profile(path: Path) -> UserProfile:
    """Read a profile from a JSON file in the stored (camelCase) layout."""
    data = json.loads(path.read_text(encoding="utf-8"))
    profile = UserProfile.from_dict(data)
    problems = profile.validate()
    if problems:
        raise ValueError("; ".join(problems))
    return profile


def _show(outcome: GenerationOutcome) -> None:
    click.echo()
    click.echo("=" * 60)
    click.echo(outcome.plan.get_summary())
    click.echo("=" * 60)
    if outcome.saved:
        echo_success(f"Week {outcome.plan.week_number} saved (record {outcome.record.id})")
    else:
        echo_warning(f"Week {outcome.plan.week_number} shown but not saved: {outcome.save_error}")


@click.command()
@click.option("--email", "-e", required=True, help="Account email")
@click.option("--password", prompt=True, hide_input=True, help="Account password")
@click.option(
    "--profile-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the profile from a JSON file instead of the questionnaire",
)
@click.option(
    "--from-record",
    "record_id",
    help="Continue from a saved plan record instead of a new profile",
)
@click.option(
    "--weeks",
    "-w",
    type=click.IntRange(1, 12),
    default=1,
    help="Number of plans to generate in sequence (default: 1)",
)
@click.pass_context
@async_command
async def generate(
    ctx,
    email: str,
    password: str,
    profile_file: Path | None,
    record_id: str | None,
    weeks: int,
):
    """Generate a personalized weekly diet and workout plan.

    The first plan is the foundation week. Each further week progresses
    from the previous one using the same profile.

    Examples:

        # Answer the questionnaire and generate week 1
        fitplan generate --email you@example.com

        # Generate weeks 1-4 from a saved profile
        fitplan generate -e you@example.com --profile-file me.json --weeks 4

        # Continue from a saved record (its week + 1)
        fitplan generate -e you@example.com --from-record 1718000000000
    """
    app = ensure_initialized(ctx)

    try:
        user = await app.accounts().login(email, password)
    except InvalidCredentialsError as e:
        echo_error(str(e))
        ctx.exit(1)

    try:
        generator = app.generator_factory(app.settings)
    except ConfigurationError as e:
        echo_error(str(e))
        ctx.exit(1)

    history = app.history()
    session = PlanSession(generator, history, user_id=user.id)

    remaining = weeks
    try:
        if record_id:
            record = await history.get(record_id)
            if record is None or record.user_id != user.id:
                echo_error(f"Record {record_id} not found")
                ctx.exit(1)
            session.view_history_record(record)
            echo_info(f"Loaded week {record.plan.week_number} from record {record.id}")
        else:
            if profile_file:
                try:
                    profile = _load_profile(profile_file)
                except (ValueError, KeyError) as e:
                    echo_error(f"Invalid profile file: {e}")
                    ctx.exit(1)
            else:
                profile = await ManualInputClient().collect_profile(default_name=user.name)

            echo_info("Generating week 1...")
            _show(await session.submit_profile(profile))
            remaining -= 1

        while remaining > 0:
            echo_info(f"Generating week {session.state.week_number + 1}...")
            _show(await session.request_next_week())
            remaining -= 1
    except GenerationError as e:
        echo_error(e.user_message)
        echo_info(f"Details: {e}")
        if session.state.plan is not None:
            echo_info(f"Week {session.state.week_number} remains the current plan.")
        ctx.exit(1)
    except StorageUnavailableError as e:
        echo_error(f"Storage unavailable: {e}")
        ctx.exit(1)

    click.echo()
    click.echo("Next steps:")
    click.echo(f"  - View history: fitplan history list --email {user.email}")
    if session.state.plan is not None:
        latest = await history.list_by_user(user.id)
        if latest:
            click.echo(
                f"  - Next week:    fitplan generate --email {user.email} --from-record {latest[0].id}"
            )
