"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.codecs.humantime import format_duration
from core.domain.event import Event
from core.domain.models import Request
from core.domain.types import format_instant
from core.errors import SchemaError


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en modo interactivo)."""

    title = Text("stream-events", style="bold cyan")
    subtitle = Text("Stream event requests • Tariffs • Gifts", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_stream_table(request: Request) -> Table:
    stream = request.stream
    table = Table(title="Stream", show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("type", request.request_type.label())
    table.add_row("user_id", str(stream.user_id))
    table.add_row("is_private", "yes" if stream.is_private else "no")
    table.add_row("settings", f"{stream.settings} (0x{stream.settings:08x})")
    table.add_row("shard_url", str(stream.shard_url))
    table.add_row("shard host", stream.shard_url.host or "")
    return table


def build_tariffs_table(request: Request) -> Table:
    """Tarifa pública y privada en una sola tabla (la privada no tiene id)."""

    public = request.stream.public_tariff
    private = request.stream.private_tariff

    table = Table(title="Tariffs")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Id", style="white")
    table.add_column("Price", style="green", justify="right")
    table.add_column("Duration", style="magenta")
    table.add_column("Description", style="white")
    table.add_row("public", str(public.id), str(public.price), format_duration(public.duration), public.description)
    table.add_row(
        "private",
        "-",
        str(private.client_price),
        format_duration(private.duration),
        private.description,
    )
    return table


def build_gifts_table(request: Request) -> Table:
    table = Table(title=f"Gifts ({len(request.gifts)})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Id", style="cyan")
    table.add_column("Price", style="green", justify="right")
    table.add_column("Description", style="white")
    for index, gift in enumerate(request.gifts):
        table.add_row(str(index), str(gift.id), str(gift.price), gift.description)
    return table


def build_debug_panel(request: Request) -> Panel:
    body = Text()
    body.append("duration: ", style="bold")
    body.append(format_duration(request.debug.duration) + "\n")
    body.append("at: ", style="bold")
    body.append(format_instant(request.debug.at))
    return Panel(body, title=Text("Debug", style="bold yellow"), border_style="yellow")


def build_request_view(request: Request) -> Group:
    """Vista completa de un `Request` para `decode`."""

    return Group(
        build_stream_table(request),
        build_tariffs_table(request),
        build_gifts_table(request),
        build_debug_panel(request),
    )


def build_event_panel(event: Event, *, encoded: str) -> Panel:
    body = Text()
    body.append("json:    ", style="bold")
    body.append(encoded + "\n")
    body.append("decoded: ", style="bold")
    body.append(f"name={event.name!r} date={event.date!r}")
    return Panel(body, title=Text("Event", style="bold cyan"), border_style="cyan")


def build_schema_error_panel(error: SchemaError) -> Panel:
    """Panel rojo con todos los errores de decodificación."""

    body = Text()
    for field, message in error.errors:
        body.append(field or "<document>", style="bold")
        body.append(f": {message}\n")
    return Panel(body, title=Text("Schema error", style="bold red"), border_style="red")
