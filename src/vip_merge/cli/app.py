"""Typer CLI root application."""

import typer

from vip_merge.core.config import get_settings
from vip_merge.core.logging import setup_logging

app = typer.Typer(name="vip-merge", help="Repair and merge voter address and polling place files")


@app.callback()
def _main_callback(
    json_logs: bool = typer.Option(False, "--json-logs", help="Write log records to stderr as JSON lines"),
) -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir, json_logs=json_logs or settings.log_json)


def _register_subcommands() -> None:
    """Register all CLI commands."""
    from vip_merge.cli.merge_cmd import merge

    app.command("merge")(merge)


_register_subcommands()
