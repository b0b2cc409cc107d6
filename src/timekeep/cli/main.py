"""Main CLI entry point."""

from datetime import datetime

import click
from timekeep.config import Settings, setup_logging
from timekeep.database.factories import create_sqlite_database
from timekeep.utils.calendar import as_datetime
from timekeep.utils.plurals import get_plural_policy

# Import and register all commands at module level
from timekeep.cli.commands import (
    employee,
    leave,
    vacation,
    deadline,
    work,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides TIMEKEEP_DB_PATH environment variable)",
)
@click.option(
    "--log-level",
    help="Log level, e.g. DEBUG or INFO (overrides TIMEKEEP_LOG_LEVEL)",
)
@click.option(
    "--locale",
    help="Locale for worked period wording: en or ru (overrides TIMEKEEP_LOCALE)",
)
@click.option(
    "--now",
    "now_value",
    help="Evaluate as of this instant (YYYY-MM-DD or ISO datetime) instead of the current time",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None, locale: str | None, now_value: str | None):
    """Timekeep - employee time, leave and deadline tracking.

    Tracks vacation accrual (28 days a year, earned month by month),
    leave requests, task assignments and deadlines.
    """
    ctx.ensure_object(dict)

    defaults = Settings.load()
    settings = Settings(
        database_path=db_path or defaults.database_path,
        log_level=log_level or defaults.log_level,
        locale=locale or defaults.locale,
    )
    setup_logging(settings.log_level)

    try:
        get_plural_policy(settings.locale)
        now = as_datetime(now_value) if now_value else datetime.now()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    ctx.obj["settings"] = settings
    ctx.obj["now"] = now

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=settings.database_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
employee.register_commands(cli)
leave.register_commands(cli)
vacation.register_commands(cli)
deadline.register_commands(cli)
work.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
