"""CLI principal (Typer).

Comandos:
- `get <id>`: consulta un content item y lo imprime/exporta como JSON.
- `doctor ...`: diagnóstico y configuración guardada por usuario.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import httpx
import typer
from rich.console import Console

from adapters.delivery_client import ContentDeliveryClient
from adapters.json_exporter import export_content_item_json
from cli import doctor
from cli.logging_setup import configure_logging
from cli.ui_components import build_meta_table
from core.config import AppSettings
from core.domain.errors import ContentNotFoundError, MalformedResponseError
from core.domain.models import ContentItem

app = typer.Typer(no_args_is_help=True, help="Fetch fully resolved content items from the delivery API.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

# 2 is what Click uses for usage errors.
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2
EXIT_MALFORMED = 3
EXIT_TRANSPORT = 4


async def _fetch(settings: AppSettings, identifier: str) -> ContentItem:
    async with ContentDeliveryClient(settings) as client:
        return await client.get_content_item(identifier)


@app.command()
def get(
    identifier: str = typer.Argument(..., help="Delivery id (uuid) or content IRI."),
    account: str | None = typer.Option(None, "--account", "-a", help="Account/store name."),
    locale: str | None = typer.Option(None, "--locale", "-l", help="Locale, e.g. en-GB."),
    base_url: str | None = typer.Option(None, "--base-url", help="Delivery API base URL."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write JSON to this file."),
    summary: bool = typer.Option(False, "--summary", help="Print the item identity to stderr."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Fetch one content item, upgrade legacy shapes and inline its links."""

    overrides = {"account": account, "locale": locale, "base_url": base_url}
    settings = AppSettings(**{k: v for k, v in overrides.items() if v is not None})
    configure_logging("DEBUG" if verbose else settings.log_level)

    if not settings.account:
        _err_console.print("[red]Missing account:[/red] pass --account or set DC_DELIVERY_ACCOUNT")
        raise typer.Exit(code=EXIT_USAGE)

    try:
        item = asyncio.run(_fetch(settings, identifier))
    except ContentNotFoundError as exc:
        _err_console.print(f"[red]Not found:[/red] {exc.identifier}")
        raise typer.Exit(code=EXIT_NOT_FOUND)
    except MalformedResponseError as exc:
        _err_console.print(f"[red]Malformed response:[/red] {exc}")
        raise typer.Exit(code=EXIT_MALFORMED)
    except httpx.HTTPError as exc:
        _err_console.print(f"[red]Transport error:[/red] {exc}")
        raise typer.Exit(code=EXIT_TRANSPORT)

    if summary:
        _err_console.print(build_meta_table(item.meta))

    if output is not None:
        path = export_content_item_json(item=item, output_path=output)
        _err_console.print(f"[green]Saved:[/green] {path}")
        return

    _console.print_json(data=item.to_json())


def run() -> None:
    app()


if __name__ == "__main__":
    run()
