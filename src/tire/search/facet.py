"""Search – facet definitions and the Facet builder."""
from __future__ import annotations

import dataclasses
from typing import Any, Union


@dataclasses.dataclass(frozen=True)
class TermsFacet:
    """Term counts over *field*.

    ``global_`` computes the counts over the whole index instead of the
    current query; the engine applies it, the client only expresses it.
    """
    field: str
    size: int = 10
    all_terms: bool = False
    global_: bool = False

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "terms": {"field": self.field, "size": self.size, "all_terms": self.all_terms}
        }
        if self.global_:
            body["global"] = True
        return body


@dataclasses.dataclass(frozen=True)
class DateHistogramFacet:
    field: str
    interval: str = "day"
    global_: bool = False

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "date_histogram": {"field": self.field, "interval": self.interval}
        }
        if self.global_:
            body["global"] = True
        return body


FacetDefinition = Union[TermsFacet, DateHistogramFacet]
FACET_DEFINITION_TYPES = (TermsFacet, DateHistogramFacet)


class Facet:
    """Builder for a single facet definition; the last call wins."""

    def __init__(self) -> None:
        self.definition: FacetDefinition | None = None

    def terms(
        self,
        field: str,
        size: int = 10,
        all_terms: bool = False,
        global_: bool = False,
    ) -> "Facet":
        self.definition = TermsFacet(field, size, all_terms, global_)
        return self

    def date(self, field: str, interval: str = "day", global_: bool = False) -> "Facet":
        self.definition = DateHistogramFacet(field, interval, global_)
        return self


__all__ = [
    "DateHistogramFacet",
    "FACET_DEFINITION_TYPES",
    "Facet",
    "FacetDefinition",
    "TermsFacet",
]
