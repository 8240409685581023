"""Rendering of tool listings in text and JSON form."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any


class ToolNotFoundError(LookupError):
    """Raised when an inspected tool is not in the listing."""


def description_summary(description: str) -> str:
    """Reduce a tool description to its first sentence."""
    result: list[str] = []
    for raw_line in description.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        if line in ("Error Responses:", "Returns:"):
            break
        if ". " in line:
            result.append(line.split(". ", 1)[0] + ".")
            break
        result.append(line)
        if line.endswith("."):
            break
    return " ".join(result).strip()


def tool_description(tool: Mapping[str, Any]) -> str:
    """Return the tool's annotated title, or a summary of its description."""
    title = (tool.get("annotations") or {}).get("title")
    if title:
        return title
    return description_summary(tool.get("description") or "")


def _inspect_text(tool: Mapping[str, Any]) -> list[str]:
    lines = [f"Name: {tool.get('name', '')}", f"Description: {tool.get('description', '')}"]
    properties = (tool.get("inputSchema") or {}).get("properties") or {}
    for name, prop in properties.items():
        prop_type = prop.get("type")
        if prop_type in ("", None):
            prop_type = "string"
        desc = prop.get("description")
        if desc is None:
            desc = prop.get("title")
        lines.append(f" - {name} ({prop_type}): {'' if desc is None else desc}")
    return lines


def render_tools(
    tools: Sequence[Mapping[str, Any]], show: str, tool: str = "", fmt: str = ""
) -> str:
    """Render a tool listing.

    ``show`` is one of ``list``, ``count`` or ``inspect``; ``fmt`` is ``json``
    or anything else for plain text. Any other ``show`` renders nothing.
    """
    as_json = fmt == "json"

    if show == "list":
        if as_json:
            return json.dumps(list(tools), indent=2)
        lines = [f"{len(tools)} tools:"]
        lines.extend(f" - {t.get('name', '')} - {tool_description(t)}" for t in tools)
        return "\n".join(lines)

    if show == "count":
        if as_json:
            return f'{{"count": {len(tools)}}}'
        return f"{len(tools)} tools"

    if show == "inspect":
        found = next((t for t in tools if t.get("name") == tool), None)
        if found is None:
            raise ToolNotFoundError(f"tool {tool} not found")
        if as_json:
            return json.dumps(found, indent=2)
        return "\n".join(_inspect_text(found))

    return ""