"""CLI command running the HTTP API."""

from __future__ import annotations

import click
import uvicorn
from pydantic import ValidationError as SettingsError

from lessonshop.infrastructure.http.app import create_app
from lessonshop.infrastructure.log_config import configure_logging
from lessonshop.infrastructure.settings import Settings


@click.command("serve")
@click.option("--port", type=int, default=None, help="Override LESSONSHOP_PORT.")
def serve(port: int | None) -> None:
    """Run the HTTP API with uvicorn.

    Settings (admin credentials, data directory, ...) come from
    LESSONSHOP_* environment variables or a .env file. Seat reservations
    are atomic within this one process only, so keep other lessonshop
    commands off its data directory while it runs.
    """
    try:
        settings = Settings()
    except SettingsError as exc:
        raise click.ClickException(f"Invalid configuration:\n{exc}")

    configure_logging(settings.log_level)
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=port or settings.port, log_config=None)
