"""Tests for the command line interface."""

import asyncio
import json

import pytest
from click.testing import CliRunner

from conftest import FailingPlanGenerator, StubPlanGenerator
from fitplan.cli import main
from fitplan.commands.base import AppContext, format_table, truncate
from fitplan.db.engine import RECORDS_KEY
from fitplan.errors import ConfigurationError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def stub_app(temp_settings):
    generator = StubPlanGenerator()
    app = AppContext(settings=temp_settings, generator_factory=lambda settings: generator)
    app.stub = generator
    return app


@pytest.fixture
def profile_file(tmp_path, sample_user_profile):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(sample_user_profile.to_dict()))
    return path


def invoke(runner, app, *args):
    return runner.invoke(main, list(args), obj=app, catch_exceptions=False)


def register(runner, app, email="asha@example.com"):
    return invoke(
        runner, app, "register", "--name", "Asha", "--email", email, "--password", "pw"
    )


class TestCommands:
    """End-to-end command tests against a temporary data directory."""

    def test_requires_init(self, runner, stub_app):
        result = invoke(runner, stub_app, "register", "--name", "A", "--email", "a", "--password", "p")

        assert result.exit_code == 1
        assert "fitplan init" in result.output

    def test_init(self, runner, stub_app):
        result = invoke(runner, stub_app, "init")

        assert result.exit_code == 0
        assert "Database initialized" in result.output
        assert stub_app.settings.db_path.exists()

    def test_register_duplicate(self, runner, stub_app):
        invoke(runner, stub_app, "init")
        assert register(runner, stub_app).exit_code == 0

        result = register(runner, stub_app, email="ASHA@example.com")

        assert result.exit_code == 1
        assert "Email already registered." in result.output

    def test_generate_weeks_and_history(self, runner, stub_app, profile_file):
        invoke(runner, stub_app, "init")
        register(runner, stub_app)

        result = invoke(
            runner,
            stub_app,
            "generate",
            "--email",
            "asha@example.com",
            "--password",
            "pw",
            "--profile-file",
            str(profile_file),
            "--weeks",
            "2",
        )

        assert result.exit_code == 0, result.output
        assert "Week 1 saved" in result.output
        assert "Week 2 saved" in result.output
        assert [r.week_number for r in stub_app.stub.requests] == [1, 2]

        listing = invoke(
            runner, stub_app, "history", "list", "--email", "asha@example.com", "--password", "pw"
        )
        assert listing.exit_code == 0
        assert "Total: 2 plan(s)" in listing.output

    def test_generate_from_record(self, runner, stub_app, profile_file):
        invoke(runner, stub_app, "init")
        register(runner, stub_app)
        invoke(
            runner, stub_app, "generate", "-e", "asha@example.com", "--password", "pw",
            "--profile-file", str(profile_file),
        )
        records = _records(stub_app)

        result = invoke(
            runner, stub_app, "generate", "-e", "asha@example.com", "--password", "pw",
            "--from-record", records[0]["id"],
        )

        assert result.exit_code == 0, result.output
        assert "Loaded week 1" in result.output
        assert "Week 2 saved" in result.output
        assert len(_records(stub_app)) == 2

    def test_generate_wrong_password(self, runner, stub_app, profile_file):
        invoke(runner, stub_app, "init")
        register(runner, stub_app)

        result = invoke(
            runner, stub_app, "generate", "-e", "asha@example.com", "--password", "bad",
            "--profile-file", str(profile_file),
        )

        assert result.exit_code == 1
        assert "Invalid email or password." in result.output

    def test_generate_failure(self, runner, temp_settings, profile_file):
        app = AppContext(
            settings=temp_settings, generator_factory=lambda settings: FailingPlanGenerator()
        )
        invoke(runner, app, "init")
        register(runner, app)

        result = invoke(
            runner, app, "generate", "-e", "asha@example.com", "--password", "pw",
            "--profile-file", str(profile_file),
        )

        assert result.exit_code == 1
        assert "Failed to generate plan" in result.output
        assert _records(app) == []

    def test_generate_without_api_key(self, runner, temp_settings, profile_file):
        def no_key(settings):
            raise ConfigurationError("GEMINI_API_KEY is not set.")

        app = AppContext(settings=temp_settings, generator_factory=no_key)
        invoke(runner, app, "init")
        register(runner, app)

        result = invoke(
            runner, app, "generate", "-e", "asha@example.com", "--password", "pw",
            "--profile-file", str(profile_file),
        )

        assert result.exit_code == 1
        assert "GEMINI_API_KEY" in result.output

    def test_admin_records_and_clear(self, runner, stub_app, profile_file):
        invoke(runner, stub_app, "init")
        register(runner, stub_app)
        invoke(
            runner, stub_app, "generate", "-e", "asha@example.com", "--password", "pw",
            "--profile-file", str(profile_file),
        )

        denied = invoke(runner, stub_app, "admin", "--passphrase", "nope", "records")
        assert denied.exit_code == 1
        assert "Incorrect admin passphrase." in denied.output

        listing = invoke(runner, stub_app, "admin", "--passphrase", "letmein", "records")
        assert listing.exit_code == 0
        assert "Test User (Female, 29y)" in listing.output
        assert "Total: 1 record(s)" in listing.output

        cleared = invoke(runner, stub_app, "admin", "--passphrase", "letmein", "clear", "--force")
        assert cleared.exit_code == 0
        assert _records(stub_app) == []


def _records(app: AppContext) -> list[dict]:
    return asyncio.run(app.store().get(RECORDS_KEY, []))


class TestFormatting:
    """Tests for CLI formatting helpers."""

    def test_format_table(self):
        table = format_table(["A", "Long"], [["x", "y"], ["wide", "z"]])
        lines = table.splitlines()

        assert lines[0] == "A     Long"
        assert lines[1] == "----  ----"
        assert lines[3] == "wide  z"

    def test_format_table_empty(self):
        assert format_table(["A"], []) == ""

    def test_truncate(self):
        assert truncate("short") == "short"
        assert truncate("x" * 50, 10) == "x" * 10 + "..."
