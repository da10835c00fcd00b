"""Search – the request assembler.

:class:`Search` accumulates a query, filters, facets, sorting and
highlighting into one request document for ``/<indices>/_search``::

    s = (
        Search("articles")
        .query(lambda q: q.string("title:T*"))
        .filter("terms", tags=["ruby"])
        .facet("tags", lambda f: f.terms("tags"))
        .sort("title", "desc")
    )
    for article in s.results:
        print(article.title)

Nothing is sent until :meth:`Search.perform` (or :attr:`Search.results`).
Use one instance per search; instances share no state.
"""
from __future__ import annotations

import copy
from typing import Any, Callable, Mapping, Sequence, TypeVar

from tire.config import Configuration
from tire.errors import ConfigurationError
from tire.logging import curl_command, dump_json, get_logger
from tire.search.facet import FACET_DEFINITION_TYPES, Facet, FacetDefinition
from tire.search.filter import Filter, combine_filters
from tire.search.highlight import Highlight
from tire.search.query import QUERY_CLAUSE_TYPES, MatchAllQuery, Query, QueryClause
from tire.search.results import Results, Wrapper, materialize
from tire.search.sort import Direction, Sort, SortClause
from tire.transport import Transport

_log = get_logger(__name__)

B = TypeVar("B")


def _configure(value: Any, builder_cls: Callable[[], B]) -> B | Any:
    """Accept a builder, a finished variant, or a callable that fills a fresh builder."""
    if isinstance(value, builder_cls):  # type: ignore[arg-type]
        return value
    if callable(value):
        builder = builder_cls()
        value(builder)
        return builder
    return value


class Search:
    """Accumulates one search request and executes it on demand."""

    def __init__(
        self,
        indices: str | Sequence[str],
        *,
        transport: Transport | None = None,
        wrapper: Wrapper | None = None,
        strict: bool | None = None,
    ) -> None:
        self.indices: tuple[str, ...] = (indices,) if isinstance(indices, str) else tuple(indices)
        if not self.indices:
            raise ConfigurationError("At least one index name is required")
        self._transport = transport
        self._wrapper = wrapper
        self._strict = Configuration.strict_query() if strict is None else strict

        self._query: QueryClause | None = None
        self._filters: list[Filter] = []
        self._facets: dict[str, FacetDefinition] = {}
        self._sort: list[SortClause] = []
        self._highlight: Highlight | None = None
        self._size: int | None = None
        self._from: int | None = None
        self._fields: tuple[str, ...] | None = None
        self._results: Results | None = None

    # -- configuration -------------------------------------------------------

    def query(self, value: Query | QueryClause | Callable[[Query], Any]) -> "Search":
        """Set the query clause, replacing any previous one.

        With ``strict=True`` a second call raises :class:`ConfigurationError`.
        """
        resolved = _configure(value, Query)
        clause = resolved.clause if isinstance(resolved, Query) else resolved
        if clause is None:
            raise ConfigurationError("Query builder has no clause configured")
        if not isinstance(clause, QUERY_CLAUSE_TYPES):
            raise ConfigurationError(f"Unsupported query clause: {clause!r}")
        if self._strict and self._query is not None:
            raise ConfigurationError(
                "Query is already set",
                detail={"current": self._query.to_dict(), "new": clause.to_dict()},
            )
        self._query = clause
        return self

    def filter(self, type: str, params: Mapping[str, Any] | None = None, **kwargs: Any) -> "Search":  # noqa: A002
        """Append a filter; all filters must hold (they are ANDed in call order)."""
        self._filters.append(Filter(type, {**dict(params or {}), **kwargs}))
        return self

    def facet(self, name: str, value: Facet | FacetDefinition | Callable[[Facet], Any]) -> "Search":
        if name in self._facets:
            raise ConfigurationError(
                f"Facet '{name}' is already defined", detail={"facet": name}
            )
        resolved = _configure(value, Facet)
        definition = resolved.definition if isinstance(resolved, Facet) else resolved
        if not isinstance(definition, FACET_DEFINITION_TYPES):
            raise ConfigurationError(
                f"Facet '{name}' has no valid definition", detail={"facet": name}
            )
        self._facets[name] = definition
        return self

    def sort(
        self,
        value: str | SortClause | Sort | Callable[[Sort], Any],
        direction: Direction | None = None,
    ) -> "Search":
        """Append sort clauses. A bare field name sorts ascending unless *direction* is given."""
        if isinstance(value, str):
            self._sort.append(SortClause(value, direction or "asc"))
            return self
        if direction is not None:
            raise ConfigurationError(
                "A direction can only accompany a field name",
                detail={"direction": direction},
            )
        if isinstance(value, SortClause):
            self._sort.append(value)
            return self
        resolved = _configure(value, Sort)
        if not isinstance(resolved, Sort):
            raise ConfigurationError(f"Unsupported sort value: {value!r}")
        self._sort.extend(resolved.clauses)
        return self

    def highlight(
        self,
        *fields: str | Mapping[str, Mapping[str, Any]],
        options: Mapping[str, Any] | None = None,
        **field_options: Mapping[str, Any],
    ) -> "Search":
        """Highlight *fields*; a later call replaces the directive.

        ``options={"tag": '<strong class="highlight">'}`` sets the wrapper tag.
        """
        if not fields and not field_options:
            raise ConfigurationError("At least one field to highlight is required")
        self._highlight = Highlight.of(*fields, options=options, **field_options)
        return self

    def size(self, value: int) -> "Search":
        self._size = value
        return self

    def from_(self, value: int) -> "Search":
        self._from = value
        return self

    def fields(self, *names: str) -> "Search":
        self._fields = names
        return self

    # -- serialisation -------------------------------------------------------

    def build(self) -> dict[str, Any]:
        """Return the request document. Each call returns a fresh copy."""
        document: dict[str, Any] = {
            "query": (self._query or MatchAllQuery()).to_dict()
        }
        combined = combine_filters(self._filters)
        if combined is not None:
            document["filter"] = combined
        if self._facets:
            document["facets"] = {name: d.to_dict() for name, d in self._facets.items()}
        if self._sort:
            document["sort"] = [c.to_dict() for c in self._sort]
        if self._highlight is not None:
            document["highlight"] = self._highlight.to_dict()
        if self._from is not None:
            document["from"] = self._from
        if self._size is not None:
            document["size"] = self._size
        if self._fields is not None:
            document["fields"] = list(self._fields)
        return copy.deepcopy(document)

    @property
    def path(self) -> str:
        return f"/{','.join(self.indices)}/_search"

    @property
    def url(self) -> str:
        return f"{self.transport.url}{self.path}"

    def to_json(self) -> str:
        return dump_json(self.build())

    def to_curl(self) -> str:
        return curl_command("POST", f"{self.url}?pretty=true", self.to_json())

    # -- execution -----------------------------------------------------------

    @property
    def transport(self) -> Transport:
        """The transport given at construction, else the shared one from :class:`Configuration`."""
        if self._transport is not None:
            return self._transport
        return Configuration.transport()

    def perform(self) -> Results:
        """Send the request and materialize the response."""
        document = self.build()
        response = self.transport.execute("POST", self.path, document)
        self._results = materialize(
            response,
            document,
            wrapper=self._wrapper or Configuration.wrapper(),
        )
        _log.debug(
            "search_performed",
            indices=list(self.indices),
            hits=self._results.count(),
            total=self._results.total,
        )
        return self._results

    @property
    def results(self) -> Results:
        """Results of the search, performing it on first access."""
        if self._results is None:
            self.perform()
        return self._results  # type: ignore[return-value]


def search(
    indices: str | Sequence[str],
    *,
    transport: Transport | None = None,
    wrapper: Wrapper | None = None,
    strict: bool | None = None,
) -> Search:
    return Search(indices, transport=transport, wrapper=wrapper, strict=strict)


__all__ = ["Search", "search"]
