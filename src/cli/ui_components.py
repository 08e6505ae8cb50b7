"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.models import ContentMeta


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en comandos interactivos)."""

    title = Text("dc-delivery", style="bold cyan")
    subtitle = Text("Content delivery • Legacy upgrade • Link inlining", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_meta_table(meta: ContentMeta) -> Table:
    """Resumen de identidad de un content item."""

    table = Table(title="Content item")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("deliveryId", meta.delivery_id or "-")
    table.add_row("name", meta.name or "-")
    table.add_row("schema", meta.schema_uri)
    return table


def build_settings_table(settings: AppSettings) -> Table:
    table = Table(title="dc-delivery settings")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("base_url", settings.base_url)
    table.add_row("account", settings.account or "[red]<unset>[/red]")
    table.add_row("locale", settings.locale or "-")
    table.add_row("timeout", f"{settings.http_timeout_seconds:g}s")
    return table
