"""Search – highlight directive."""
from __future__ import annotations

import copy
import dataclasses
import re
from typing import Any, Mapping

_OPENING_TAG = re.compile(r"^<([a-zA-Z][a-zA-Z0-9]*).*")


def closing_tag(tag: str) -> str:
    """``'<strong class="x">'`` -> ``'</strong>'``."""
    return _OPENING_TAG.sub(r"</\1>", tag)


@dataclasses.dataclass(frozen=True)
class Highlight:
    """Fields to highlight, their per-field options and the global options.

    Per-field options are nested under each field, so they take precedence
    over the global ones for that field. A ``tag`` global option wraps
    fragments in that tag; without it the engine default (``<em>``) applies.
    """
    fields: tuple[tuple[str, Mapping[str, Any]], ...]
    options: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def of(
        cls,
        *fields: str | Mapping[str, Mapping[str, Any]],
        options: Mapping[str, Any] | None = None,
        **field_options: Mapping[str, Any],
    ) -> "Highlight":
        ordered: dict[str, Mapping[str, Any]] = {}
        for entry in fields:
            if isinstance(entry, str):
                ordered.setdefault(entry, {})
            else:
                for name, opts in entry.items():
                    ordered[name] = dict(opts or {})
        for name, opts in field_options.items():
            ordered[name] = dict(opts or {})
        return cls(tuple(ordered.items()), dict(options or {}))

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = copy.deepcopy(dict(self.options))
        tag = body.pop("tag", None)
        if tag is not None:
            body["pre_tags"] = [tag]
            body["post_tags"] = [closing_tag(tag)]
        body["fields"] = {name: copy.deepcopy(dict(opts)) for name, opts in self.fields}
        return body


__all__ = ["Highlight", "closing_tag"]
