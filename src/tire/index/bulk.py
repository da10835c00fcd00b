"""Index – document normalisation and bulk (NDJSON) encoding."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from itertools import islice
from typing import Any

from tire.logging import dump_json

DEFAULT_TYPE = "document"


def document_to_dict(document: Any) -> dict[str, Any]:
    """Accept a mapping or any object exposing ``to_dict()``."""
    if isinstance(document, Mapping):
        return dict(document)
    to_dict = getattr(document, "to_dict", None)
    if callable(to_dict):
        return dict(to_dict())
    raise TypeError(f"Cannot index {type(document).__name__}: expected a mapping or to_dict()")


def document_type(document: Mapping[str, Any]) -> str:
    return str(document.get("type") or document.get("_type") or DEFAULT_TYPE)


def document_id(document: Mapping[str, Any]) -> str | None:
    value = document.get("id", document.get("_id"))
    return None if value is None else str(value)


def bulk_body(index_name: str, documents: Iterable[Any]) -> str:
    """Encode *documents* as bulk ``index`` actions, one action/source line pair each."""
    lines: list[str] = []
    for raw in documents:
        document = document_to_dict(raw)
        action: dict[str, Any] = {"_index": index_name, "_type": document_type(document)}
        doc_id = document_id(document)
        if doc_id is not None:
            action["_id"] = doc_id
        lines.append(dump_json({"index": action}))
        lines.append(dump_json(document))
    return "\n".join(lines) + "\n" if lines else ""


def batches(documents: Iterable[Any], size: int) -> Iterator[list[Any]]:
    if size < 1:
        raise ValueError("per_page must be >= 1")
    iterator = iter(documents)
    while batch := list(islice(iterator, size)):
        yield batch


__all__ = ["DEFAULT_TYPE", "batches", "bulk_body", "document_id", "document_to_dict", "document_type"]
