"""CLI entrypoint for inspecting flight recording files."""

from __future__ import annotations

import logging

import typer
from rich import print

from flyg_format.config import settings
from flyg_format.errors import FlygFormatError
from flyg_format.loader import load_flight_information_from_file

app = typer.Typer(help="Inspect recorded flight-log files")


@app.callback()
def main() -> None:
    logging.basicConfig(level=settings.log_level.upper())


@app.command()
def inspect(
    path: str = typer.Argument(..., help="Path to a .flyg or .flygz file"),
    compression: bool = typer.Option(True, help="Decode .flygz files through gzip"),
) -> None:
    """Load a flight recording and print it as a document."""
    enabled = compression and settings.compression_enabled
    try:
        recording = load_flight_information_from_file(path, compression_enabled=enabled)
    except FlygFormatError as exc:
        print({"error": str(exc), "kind": exc.kind.value})
        raise typer.Exit(code=1)

    print(recording.model_dump(mode="json", by_alias=True))


@app.command()
def config() -> None:
    """Show runtime configuration."""
    print(
        {
            "log_level": settings.log_level,
            "compression_enabled": settings.compression_enabled,
        }
    )


if __name__ == "__main__":
    app()
