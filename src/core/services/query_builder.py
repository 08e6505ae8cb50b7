"""Construcción de URLs para `/cms/content/query`.

Función pura: no hace I/O ni guarda estado. Todo lo que viaja en la query
string se codifica por completo (`quote(..., safe="")`), así que cuentas con
espacios o caracteres reservados llegan intactas.
"""

from __future__ import annotations

import json
from typing import Mapping
from urllib.parse import quote


QUERY_PATH = "/cms/content/query"
CONTENT_IRI_PREFIX = "http://content.cms.amplience.com/"


def content_iri(identifier: str) -> str:
    """IRI canónico de un content item.

    Un uuid suelto se convierte en `http://content.cms.amplience.com/<uuid>`;
    un IRI http(s) completo se respeta tal cual.
    """

    value = identifier.strip()
    if value.startswith(("http://", "https://")):
        return value
    return f"{CONTENT_IRI_PREFIX}{value}"


def build_url(
    predicate: Mapping[str, str],
    account: str,
    locale: str | None = None,
) -> str:
    """URL relativa de consulta para un predicado (p.ej. `{"sys.iri": ...}`)."""

    query = json.dumps(dict(predicate), separators=(",", ":"), ensure_ascii=False)
    url = (
        f"{QUERY_PATH}?query={quote(query, safe='')}"
        f"&fullBodyObject=true&scope=tree&store={quote(account, safe='')}"
    )
    if locale:
        url += f"&locale={quote(locale, safe='')}"
    return url
