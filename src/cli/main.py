"""CLI principal (Typer + Rich).

Comandos:
- `decode`: decodifica un documento de petición y lo muestra (o lo re-exporta
  en forma canónica).
- `event encode|decode`: demostración del codec `"Date: "`.
- `doctor`: diagnóstico del entorno.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.document_loader import load_event, load_request
from adapters.json_exporter import export_request_json, render_request_json
from cli import doctor
from cli.ui_components import (
    build_event_panel,
    build_request_view,
    build_schema_error_panel,
    print_banner,
)
from core.config import AppSettings
from core.domain.event import Event
from core.errors import SchemaError
from core.logging_config import configure_logging
from core.services.request_codec import dump_event

app = typer.Typer(no_args_is_help=True, help="Decode and inspect stream event request documents.")
event_app = typer.Typer(no_args_is_help=True, help="Date-wrap codec demo for Event documents.")
app.add_typer(event_app, name="event")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _fail_schema(error: SchemaError) -> typer.Exit:
    _err_console.print(build_schema_error_panel(error))
    return typer.Exit(code=1)


def _fail_io(path: str | Path, error: OSError, *, action: str = "read") -> typer.Exit:
    _err_console.print(f"[red]Cannot {action} {path}:[/red] {error.strerror or error}")
    return typer.Exit(code=1)


@app.callback()
def _setup() -> None:
    configure_logging(AppSettings())


@app.command()
def decode(
    path: str = typer.Argument(..., help="Request document path ('-' reads stdin)."),
    json_output: bool = typer.Option(False, "--json", help="Print the canonical JSON document."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the canonical JSON to a file."),
) -> None:
    """Decode a request document and show its contents."""

    settings = AppSettings()
    try:
        request = load_request(path)
    except SchemaError as exc:
        raise _fail_schema(exc) from None
    except OSError as exc:
        raise _fail_io(path, exc) from None

    if output is not None:
        try:
            written = export_request_json(request=request, output_path=output, settings=settings)
        except OSError as exc:
            raise _fail_io(output, exc, action="write") from None
        _err_console.print(f"[green]Saved canonical document to:[/green] {written}")

    if json_output:
        typer.echo(render_request_json(request=request, settings=settings), nl=False)
        return

    if output is None:
        if _console.is_terminal:
            print_banner(_console)
        _console.print(build_request_view(request))


@event_app.command("encode")
def event_encode(
    name: str = typer.Argument(..., help="Event name."),
    date: str = typer.Argument(..., help="Raw date text, e.g. 2024-11-14."),
) -> None:
    """Encode an Event and decode it back (the date gains a 'Date: ' prefix on the wire)."""

    event = Event(name=name, date=date)
    encoded = dump_event(event)
    _console.print(build_event_panel(event, encoded=encoded))


@event_app.command("decode")
def event_decode(
    path: str = typer.Argument(..., help="Event document path ('-' reads stdin)."),
) -> None:
    """Decode an Event document; a missing 'Date: ' prefix is tolerated."""

    try:
        event = load_event(path)
    except SchemaError as exc:
        raise _fail_schema(exc) from None
    except OSError as exc:
        raise _fail_io(path, exc) from None

    _console.print(build_event_panel(event, encoded=dump_event(event)))


def run() -> None:
    app()
