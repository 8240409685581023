"""Helpers for calling a tool: argument parsing and result rendering."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


class ToolCallError(Exception):
    """Raised when a tool call reports an error."""


def parse_args(args: Iterable[str]) -> dict[str, Any]:
    """Parse ``key=value`` arguments into a mapping.

    An argument without ``=`` maps to ``None``. A key given more than once
    collects its values into a list, in order.
    """
    parsed: dict[str, Any] = {}
    for arg in args:
        key, sep, raw = arg.partition("=")
        value: Any = raw if sep else None

        if key in parsed:
            previous = parsed[key]
            if isinstance(previous, list):
                previous.append(value)
            else:
                parsed[key] = [previous, value]
        else:
            parsed[key] = value
    return parsed


def _content_text(content: Any) -> str:
    if isinstance(content, Mapping) and content.get("type") == "text":
        return str(content.get("text", ""))
    return str(content)


def to_text(contents: Iterable[Any]) -> str:
    """Join the contents of a tool result, one per line."""
    return "\n".join(_content_text(content) for content in contents)


def render_call_result(tool_name: str, result: Mapping[str, Any]) -> str:
    """Return the text of a tool result, raising if the result is an error."""
    text = to_text(result.get("content") or [])
    if result.get("isError"):
        raise ToolCallError(f"error calling tool {tool_name}: {text}")
    return text