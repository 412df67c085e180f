"""CLI entry point for fitplan."""

import click

from . import __version__
from .commands import admin, generate, history, init, register, serve
from .commands.base import AppContext
from .config import Settings, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="fitplan")
@click.pass_context
def main(ctx):
    """fitplan: AI-generated weekly diet and workout plans.

    Collects your biometrics and preferences, asks Gemini for a structured
    plan, and keeps a history of every week you generate.

    Example usage:

        # Initialize the project
        fitplan init

        # Create an account
        fitplan register

        # Generate your first week, then the next
        fitplan generate --email you@example.com --weeks 2

        # Review saved plans
        fitplan history list --email you@example.com
    """
    if ctx.obj is None:
        ctx.obj = AppContext(settings=Settings.from_env())
    setup_logging(ctx.obj.settings.log_level)


# Register commands
main.add_command(init)
main.add_command(register)
main.add_command(generate)
main.add_command(history)
main.add_command(admin)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
