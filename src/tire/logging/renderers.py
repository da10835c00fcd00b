"""Logging – CurlRenderer.

Renders request/response events as shell-comment annotated ``curl``
commands, so a logged session can be pasted into a terminal::

    # 2011-04-24 11:34:01 [_search] ("articles")
    #
    curl -X POST "http://localhost:9200/articles/_search?pretty=true" -d '{...}'

    # 2011-04-24 11:34:01 [200] (3 msec)
"""
from __future__ import annotations

from typing import Any


class CurlRenderer:
    """structlog renderer for the curl-friendly log format."""

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> str:
        timestamp = event_dict.get("timestamp", "")
        event = event_dict.get("event", "")

        if event == "request":
            return "\n".join([
                f"# {timestamp} [{event_dict.get('label', '')}] (\"{event_dict.get('target', '')}\")",
                "#",
                str(event_dict.get("curl", "")),
                "",
            ])

        if event == "response":
            line = f"# {timestamp} [{event_dict.get('status', '')}]"
            if event_dict.get("took") is not None:
                line += f" ({event_dict['took']} msec)"
            return line + "\n"

        if event == "response.body":
            body = str(event_dict.get("body", ""))
            lines = [f"# {timestamp} [{event_dict.get('status', '')}]", "#"]
            lines.extend(f"# {line}" for line in body.splitlines())
            return "\n".join(lines) + "\n"

        skip = {"timestamp", "event", "level", "logger"}
        extras = " ".join(f"{k}={v!r}" for k, v in event_dict.items() if k not in skip)
        level = str(event_dict.get("level", "info")).upper()
        return f"# {timestamp} [{level}] {event} {extras}".rstrip()


__all__ = ["CurlRenderer"]
