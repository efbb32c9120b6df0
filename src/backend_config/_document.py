"""YAML document reader.

Turns raw text into the untyped tree of dicts, lists and scalars that the
section decoders consume.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ._types import DocumentSyntaxError, TypeMismatchError, kind_of


def parse_document(text: str, source: str | Path | None = None) -> dict[str, Any]:
    """Parse *text* as a YAML mapping.

    An empty document parses to ``{}``. Malformed YAML raises
    ``DocumentSyntaxError``; a document whose top level is not a mapping
    raises ``TypeMismatchError``.
    """
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentSyntaxError(str(exc), source=source) from exc

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise TypeMismatchError("<document>", "mapping", kind_of(document), section="root")
    return document


def read_document(path: Path) -> dict[str, Any]:
    """Read and parse the YAML file at *path*."""
    try:
        with path.open("r", encoding="utf-8") as handle:
            text = handle.read()
    except UnicodeDecodeError as exc:
        raise DocumentSyntaxError(str(exc), source=path) from exc
    return parse_document(text, source=path)
