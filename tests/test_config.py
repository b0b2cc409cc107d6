"""Tests for environment configuration."""

from timekeep.config import DEFAULT_LOCALE, DEFAULT_LOG_LEVEL, Settings


def test_defaults(monkeypatch):
    """Test settings without environment variables."""
    monkeypatch.delenv("TIMEKEEP_DB_PATH", raising=False)
    monkeypatch.delenv("TIMEKEEP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TIMEKEEP_LOCALE", raising=False)

    settings = Settings.load()
    assert settings.database_path is None
    assert settings.log_level == DEFAULT_LOG_LEVEL
    assert settings.locale == DEFAULT_LOCALE


def test_environment_overrides(monkeypatch, tmp_path):
    """Test settings read from the environment."""
    db_path = str(tmp_path / "env.db")
    monkeypatch.setenv("TIMEKEEP_DB_PATH", db_path)
    monkeypatch.setenv("TIMEKEEP_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("TIMEKEEP_LOCALE", "ru")

    settings = Settings.load()
    assert settings.database_path == db_path
    assert settings.log_level == "DEBUG"
    assert settings.locale == "ru"


def test_cli_uses_environment_database(cli_runner, monkeypatch, tmp_path):
    """Test the CLI falls back to TIMEKEEP_DB_PATH."""
    from timekeep.cli.main import cli

    monkeypatch.setenv("TIMEKEEP_DB_PATH", str(tmp_path / "env.db"))
    result = cli_runner.invoke(cli, ["employee", "add", "Env User"])

    assert result.exit_code == 0
    assert (tmp_path / "env.db").exists()


def test_invalid_now_option(cli_runner, tmp_path):
    """Test an unparsable --now value."""
    from timekeep.cli.main import cli

    result = cli_runner.invoke(
        cli, ["--db-path", str(tmp_path / "x.db"), "--now", "whenever", "employee", "list"]
    )
    assert result.exit_code == 1
    assert "Could not parse datetime" in result.output
