"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from adapters.http_client import build_async_client
from cli.ui_components import build_settings_table, print_banner
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get("/")
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Show the effective configuration and check connectivity to the API."""

    print_banner(_console)
    settings = AppSettings()
    _console.print(build_settings_table(settings))

    ok_http, detail_http = asyncio.run(_check_http(settings))
    status = "[green]OK[/green]" if ok_http else "[red]FAIL[/red]"
    _console.print(f"Connectivity to {settings.base_url}: {status} ({detail_http})")

    if not settings.account:
        _console.print(
            "\n[yellow]Note:[/yellow] no account configured. Run `dc-delivery doctor configure` "
            "or set DC_DELIVERY_ACCOUNT."
        )
    if not ok_http:
        raise typer.Exit(code=1)


@app.command()
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = AppSettings()

    account = typer.prompt("Account (store) name", default=current.account or "", show_default=True).strip()
    base_url = typer.prompt("Delivery base URL", default=current.base_url, show_default=True).strip()
    locale = typer.prompt("Locale (empty for none)", default=current.locale or "", show_default=False).strip()

    if not account or not base_url:
        raise typer.BadParameter("account and base_url are required")

    env_path = write_user_env_vars(
        {
            "DC_DELIVERY_ACCOUNT": account,
            "DC_DELIVERY_BASE_URL": base_url,
            "DC_DELIVERY_LOCALE": locale,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
