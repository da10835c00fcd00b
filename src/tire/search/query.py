"""Search – query clause variants and the Query builder.

Supported clauses: ``query_string``, ``term``, ``terms``, ``match_all`` and
``ids``. Each is a frozen value object serialising to the engine's query DSL.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, Union


@dataclasses.dataclass(frozen=True)
class StringQuery:
    """Raw query-syntax string; the engine is the sole validator of its syntax."""
    expression: str
    options: tuple[tuple[str, Any], ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"query_string": {"query": self.expression, **dict(self.options)}}


@dataclasses.dataclass(frozen=True)
class TermQuery:
    field: str
    value: Any

    def to_dict(self) -> dict[str, Any]:
        return {"term": {self.field: self.value}}


@dataclasses.dataclass(frozen=True)
class TermsQuery:
    """Match any of *values*; ``minimum_match`` raises how many must match."""
    field: str
    values: tuple[Any, ...]
    minimum_match: int | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {self.field: list(self.values)}
        if self.minimum_match is not None:
            body["minimum_match"] = self.minimum_match
        return {"terms": body}


@dataclasses.dataclass(frozen=True)
class MatchAllQuery:
    def to_dict(self) -> dict[str, Any]:
        return {"match_all": {}}


@dataclasses.dataclass(frozen=True)
class IdsQuery:
    values: tuple[str, ...]
    type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"values": list(self.values)}
        if self.type is not None:
            body["type"] = self.type
        return {"ids": body}


QueryClause = Union[StringQuery, TermQuery, TermsQuery, MatchAllQuery, IdsQuery]
QUERY_CLAUSE_TYPES = (StringQuery, TermQuery, TermsQuery, MatchAllQuery, IdsQuery)


class Query:
    """Builder holding exactly one query clause; the last call wins.

    Example::

        Query().terms("tags", ["ruby", "python"], minimum_match=2)
    """

    def __init__(self) -> None:
        self.clause: QueryClause | None = None

    def string(self, expression: str, **options: Any) -> "Query":
        self.clause = StringQuery(expression, tuple(options.items()))
        return self

    def term(self, field: str, value: Any) -> "Query":
        self.clause = TermQuery(field, value)
        return self

    def terms(self, field: str, values: Sequence[Any], minimum_match: int | None = None) -> "Query":
        self.clause = TermsQuery(field, tuple(values), minimum_match)
        return self

    def all(self) -> "Query":
        self.clause = MatchAllQuery()
        return self

    def ids(self, values: Sequence[str], type: str | None = None) -> "Query":  # noqa: A002
        self.clause = IdsQuery(tuple(values), type)
        return self

    def to_dict(self) -> dict[str, Any]:
        return (self.clause or MatchAllQuery()).to_dict()


__all__ = [
    "IdsQuery",
    "MatchAllQuery",
    "QUERY_CLAUSE_TYPES",
    "Query",
    "QueryClause",
    "StringQuery",
    "TermQuery",
    "TermsQuery",
]
