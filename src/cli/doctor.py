"""Doctor command for environment diagnostics."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.document_loader import load_request
from core.codecs.date_wrap import decode_date, encode_date
from core.codecs.humantime import DurationError, format_duration, parse_duration
from core.config import ENV_FILE, ENV_PREFIX, AppSettings
from core.errors import SchemaError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_durations() -> tuple[bool, str]:
    """Parse a few known spellings and make sure formatting round-trips."""

    expected = {
        "1h": timedelta(hours=1),
        "60s": timedelta(seconds=60),
        "234ms": timedelta(milliseconds=234),
        "1h 30m": timedelta(minutes=90),
    }
    try:
        for text, value in expected.items():
            parsed = parse_duration(text)
            if parsed != value:
                return False, f"{text!r} parsed as {parsed!r}"
            if parse_duration(format_duration(parsed)) != parsed:
                return False, f"{text!r} does not round-trip"
    except DurationError as exc:
        return False, str(exc)
    return True, ", ".join(expected)


def _check_date_codec() -> tuple[bool, str]:
    encoded = encode_date("2024-11-14")
    if encoded != "Date: 2024-11-14":
        return False, f"encode produced {encoded!r}"
    if decode_date(encoded) != "2024-11-14" or decode_date("2024-11-14") != "2024-11-14":
        return False, "decode is not the inverse of encode"
    return True, repr(encoded)


def _check_sample(path: Path) -> tuple[bool, str]:
    try:
        request = load_request(path)
    except SchemaError as exc:
        return False, str(exc)
    except OSError as exc:
        return False, exc.strerror or str(exc)
    return True, f"{request.request_type.value}, {len(request.gifts)} gift(s)"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="stream-events Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white", no_wrap=True)
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Env prefix", "OK", ENV_PREFIX)
    table.add_row(".env", "OK" if Path(ENV_FILE).is_file() else "OPTIONAL", str(Path(ENV_FILE).resolve()))
    table.add_row("Log level", "OK", f"{settings.log_level} ({'json' if settings.log_json else 'console'})")
    table.add_row("JSON output", "OK", f"indent={settings.json_indent} sort_keys={settings.json_sort_keys}")

    ok_durations, detail_durations = _check_durations()
    table.add_row("Duration grammar", "OK" if ok_durations else "FAIL", detail_durations)

    ok_codec, detail_codec = _check_date_codec()
    table.add_row("Date codec", "OK" if ok_codec else "FAIL", detail_codec)

    ok_sample = True
    if settings.sample_document_path is None:
        table.add_row("Sample document", "OPTIONAL", f"Set {ENV_PREFIX}SAMPLE_DOCUMENT_PATH to check one")
    else:
        ok_sample, detail_sample = _check_sample(settings.sample_document_path)
        table.add_row("Sample document", "OK" if ok_sample else "FAIL", detail_sample)

    _console.print(table)

    if not (ok_durations and ok_codec and ok_sample):
        raise typer.Exit(code=1)
