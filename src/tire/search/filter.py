"""Search – filter clauses."""
from __future__ import annotations

import copy
import dataclasses
from typing import Any, Sequence


@dataclasses.dataclass(frozen=True)
class Filter:
    """One restriction on the result set, e.g. ``Filter("terms", {"tags": ["ruby"]})``.

    Filters narrow the hits without changing the scope facets are computed over.
    """
    type: str
    params: dict[str, Any] = dataclasses.field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {self.type: copy.deepcopy(self.params)}


def combine_filters(filters: Sequence[Filter]) -> dict[str, Any] | None:
    """A single filter serialises as itself; several are ANDed in order."""
    if not filters:
        return None
    if len(filters) == 1:
        return filters[0].to_dict()
    return {"and": [f.to_dict() for f in filters]}


__all__ = ["Filter", "combine_filters"]
