"""Search – Item, Results and the response materializer.

A raw response document is turned into an ordered :class:`Results` of
wrapped hits. Facet payloads are copied verbatim; the engine is the only
source of truth for counts.
"""
from __future__ import annotations

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Iterator

from tire.errors import MalformedResponseError

Wrapper = Callable[[dict[str, Any]], Any]


def _wrap(value: Any) -> Any:
    if isinstance(value, Mapping) and not isinstance(value, Item):
        return Item(value)
    if isinstance(value, (list, tuple)):
        return tuple(_wrap(v) for v in value)
    return value


def _unwrap(value: Any) -> Any:
    if isinstance(value, Item):
        return Item.to_dict(value)
    if isinstance(value, tuple):
        return [_unwrap(v) for v in value]
    return value


class Item(Mapping[str, Any]):
    """Immutable document with attribute access (``item.title``).

    Nested mappings become :class:`Item` instances and lists become tuples.
    Document attributes take precedence over method names, so a document
    with an ``items`` field answers ``item.items`` with that field; use
    ``Item.to_dict(item)`` or subscripting in generic code.
    """

    __slots__ = ("_attributes",)

    def __init__(self, attributes: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        merged = dict(attributes or {}, **kwargs)
        object.__setattr__(self, "_attributes", {k: _wrap(v) for k, v in merged.items()})

    def __getattribute__(self, name: str) -> Any:
        if not name.startswith("__") and name != "_attributes":
            attributes = object.__getattribute__(self, "_attributes")
            if name in attributes:
                return attributes[name]
        return object.__getattribute__(self, name)

    def __getattr__(self, name: str) -> Any:
        raise AttributeError(f"{type(self).__name__} has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __getitem__(self, key: str) -> Any:
        return self._attributes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Item):
            return self._attributes == other._attributes
        if isinstance(other, Mapping):
            return Item.to_dict(self) == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}: {v!r}" for k, v in self._attributes.items())
        return f"<Item {fields}>"

    def to_dict(self) -> dict[str, Any]:
        return {k: _unwrap(v) for k, v in self._attributes.items()}


class Results:
    """Materialized search response: ordered hits plus facets and totals."""

    def __init__(
        self,
        items: list[Any],
        *,
        total: int,
        facets: Mapping[str, Any] | None = None,
        max_score: float | None = None,
        took: int | None = None,
    ) -> None:
        self._items = list(items)
        self.total = total
        self.facets: Mapping[str, Any] = MappingProxyType(copy.deepcopy(dict(facets or {})))
        self.max_score = max_score
        self.took = took

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Results(count={len(self._items)}, total={self.total})"

    def count(self) -> int:
        """Number of hits in this response (``total`` counts all matches)."""
        return len(self._items)


def _hit_attributes(hit: Mapping[str, Any], highlighting: bool) -> dict[str, Any]:
    document = hit.get("_source")
    if document is None:
        document = hit.get("fields") or {}
    attributes: dict[str, Any] = dict(document)
    if "_id" in hit:
        attributes["id"] = hit["_id"]
    for meta in ("_score", "_index", "_type"):
        if meta in hit:
            attributes[meta] = hit[meta]
    if highlighting and hit.get("highlight"):
        attributes["highlight"] = dict(hit["highlight"])
    return attributes


def _total(hits: Mapping[str, Any], fallback: int) -> int:
    total = hits.get("total")
    if isinstance(total, Mapping):
        total = total.get("value")
    if total is None:
        return fallback
    try:
        return int(total)
    except (TypeError, ValueError) as exc:
        raise MalformedResponseError(f"Unusable hit total: {total!r}", cause=exc) from exc


def materialize(
    response: Mapping[str, Any],
    request: Mapping[str, Any] | None = None,
    wrapper: Wrapper | None = None,
) -> Results:
    """Build :class:`Results` from a decoded response.

    *request* is the request document the response answers; highlight
    fragments are only attached when it declared a ``highlight`` section.

    Raises:
        MalformedResponseError: the ``hits`` section or its hit list is missing.
    """
    hits = response.get("hits") if isinstance(response, Mapping) else None
    if not isinstance(hits, Mapping):
        raise MalformedResponseError("Response has no 'hits' section", response=response)
    hit_list = hits.get("hits")
    if not isinstance(hit_list, list):
        raise MalformedResponseError("Response 'hits.hits' is not a list", response=response)

    wrap = wrapper or Item
    highlighting = bool(request) and "highlight" in request  # type: ignore[operator]
    items = [wrap(_hit_attributes(hit, highlighting)) for hit in hit_list]

    return Results(
        items,
        total=_total(hits, len(hit_list)),
        facets=response.get("facets") or {},
        max_score=hits.get("max_score"),
        took=response.get("took"),
    )


__all__ = ["Item", "Results", "Wrapper", "materialize"]
