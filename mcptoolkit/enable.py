"""Enabling and disabling individual tools of catalog servers.

A catalog is a mapping of server names to server entries, each holding an
optional ``tools`` list of ``{"name": ...}`` entries. A tools configuration
maps server names to the list of enabled tool names.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import yaml


class ToolConfigError(LookupError):
    """Raised when a tool or server cannot be found in the catalog."""


def _tool_names(server: Mapping[str, Any] | None) -> list[str]:
    return [tool.get("name") for tool in (server or {}).get("tools") or []]


def find_server_by_tool(catalog: Mapping[str, Any], tool_name: str) -> str:
    """Return the name of the first server offering ``tool_name``."""
    for server_name, server in catalog.items():
        if tool_name in _tool_names(server):
            return server_name
    raise ToolConfigError(f'tool "{tool_name}" not found in any server')


def validate_tool_exists_in_server(
    catalog: Mapping[str, Any], server_name: str, tool_name: str
) -> None:
    """Raise unless ``server_name`` is in the catalog and offers ``tool_name``."""
    if server_name not in catalog:
        raise ToolConfigError(f'server "{server_name}" not found in catalog')
    if tool_name not in _tool_names(catalog[server_name]):
        raise ToolConfigError(f'tool "{tool_name}" not found in server "{server_name}"')


def _target_server(catalog: Mapping[str, Any], tool_name: str, server_name: str) -> str:
    if server_name:
        validate_tool_exists_in_server(catalog, server_name, tool_name)
        return server_name
    return find_server_by_tool(catalog, tool_name)


def update(
    server_tools: Mapping[str, Iterable[str] | None] | None,
    catalog: Mapping[str, Any],
    add: Iterable[str] | None,
    remove: Iterable[str] | None,
    server_name: str = "",
) -> dict[str, list[str]]:
    """Return a new tools configuration with tools added and removed.

    With an empty ``server_name`` each tool's server is looked up in the
    catalog. Disabling a tool of a server absent from the configuration
    enables every other tool of that server. Each server's list is sorted.
    """
    config = {name: list(tools or []) for name, tools in (server_tools or {}).items()}

    for tool_name in add or []:
        target = _target_server(catalog, tool_name, server_name)
        enabled = config.setdefault(target, [])
        if tool_name not in enabled:
            enabled.append(tool_name)

    for tool_name in remove or []:
        target = _target_server(catalog, tool_name, server_name)
        current = config.get(target)
        if current is None:
            current = _tool_names(catalog.get(target))
        config[target] = [tool for tool in current if tool != tool_name]

    return {name: sorted(tools) for name, tools in config.items()}


def enable(
    server_tools: Mapping[str, Iterable[str] | None] | None,
    catalog: Mapping[str, Any],
    tool_names: Iterable[str],
    server_name: str = "",
) -> dict[str, list[str]]:
    """Return the configuration with ``tool_names`` enabled."""
    return update(server_tools, catalog, tool_names, None, server_name)


def disable(
    server_tools: Mapping[str, Iterable[str] | None] | None,
    catalog: Mapping[str, Any],
    tool_names: Iterable[str],
    server_name: str = "",
) -> dict[str, list[str]]:
    """Return the configuration with ``tool_names`` disabled."""
    return update(server_tools, catalog, None, tool_names, server_name)


class _IndentDumper(yaml.SafeDumper):
    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        return super().increase_indent(flow, False)


def dump_tools_yaml(server_tools: Mapping[str, Iterable[str]]) -> str:
    """Serialise a tools configuration to YAML with two-space indentation."""
    data = {name: list(tools) for name, tools in server_tools.items()}
    return yaml.dump(
        data,
        Dumper=_IndentDumper,
        indent=2,
        default_flow_style=False,
        sort_keys=True,
    )