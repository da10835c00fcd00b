"""Search – sort clauses and the Sort builder."""
from __future__ import annotations

import dataclasses
from typing import Any, Literal

from tire.errors import ConfigurationError

Direction = Literal["asc", "desc"]
DIRECTIONS = ("asc", "desc")


@dataclasses.dataclass(frozen=True)
class SortClause:
    """One field and direction; later clauses break ties of earlier ones."""
    field: str
    direction: Direction = "asc"

    def __post_init__(self) -> None:
        if self.direction not in DIRECTIONS:
            raise ConfigurationError(
                f"Sort direction for '{self.field}' must be 'asc' or 'desc'",
                detail={"field": self.field, "direction": self.direction},
            )

    def to_dict(self) -> dict[str, Any]:
        return {self.field: {"order": self.direction}}


class Sort:
    """Ordered list of sort clauses.

    Example::

        Sort().by("published_on").by("title", "desc")
    """

    def __init__(self) -> None:
        self.clauses: list[SortClause] = []

    def by(self, field: str, direction: Direction = "asc") -> "Sort":
        self.clauses.append(SortClause(field, direction))
        return self

    def to_list(self) -> list[dict[str, Any]]:
        return [c.to_dict() for c in self.clauses]


__all__ = ["DIRECTIONS", "Direction", "Sort", "SortClause"]
