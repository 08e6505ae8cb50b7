"""Logging para la CLI.

La librería solo usa `logging.getLogger(__name__)`; es la CLI quien decide
dónde y con qué formato se muestran los mensajes (Rich, en stderr).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> None:
    """Instala un `RichHandler` en el logger raíz (idempotente)."""

    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(resolved)
    # httpx loguea cada request a INFO; solo lo queremos en modo debug.
    logging.getLogger("httpx").setLevel(resolved if resolved <= logging.DEBUG else logging.WARNING)
