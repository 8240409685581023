# mcptoolkit

A small toolkit around MCP gateway tools. It gives you:

- helpers for building tool-call arguments and reading tool results and
  tool listings;
- functions that update the per-server list of enabled tools against a
  catalog, and write that list as YAML;
- four small command-line programs: a JSON file concatenator, a
  TCP-to-process bridge, an allow-list HTTP proxy, and an example tool-call
  interceptor.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

### Tool call arguments and results (`mcptoolkit.call`)

`parse_args(args)` turns `key=value` strings into a dictionary of arguments.
A bare `key` gives `None`, and a key that is repeated collects its values into
a list, in order:

```python
from mcptoolkit.call import parse_args

parse_args(["query=Docker", "verbose", "tag=a", "tag=b"])
# {"query": "Docker", "verbose": None, "tag": ["a", "b"]}
```

`to_text(contents)` joins the items of a tool result's content, one per line.
An item that is a mapping with `"type": "text"` contributes its `text`; any
other item contributes its `str()`.

`render_call_result(tool_name, result)` takes a result mapping with `content`
and `isError` keys and returns its text; when `isError` is true it raises
`ToolCallError` with the message `error calling tool <name>: <text>`.

### Tool listings (`mcptoolkit.listing`)

- `description_summary(description)` shortens a tool description to its first
  sentence, skipping blank lines and stopping at a `Returns:` or
  `Error Responses:` line.
- `tool_description(tool)` returns the tool's `annotations.title` if set, and
  otherwise the summary of its `description`.
- `render_tools(tools, show, tool="", fmt="")` renders a list of tool mappings.
  `show` is `list`, `count` or `inspect` (any other value gives an empty
  string); `fmt="json"` gives JSON, anything else plain text. `inspect` shows
  the tool named `tool`, with one line per input-schema property, and raises
  `ToolNotFoundError` if there is no such tool.

### Enabling and disabling tools (`mcptoolkit.enable`)

A catalog is a mapping of server names to server entries, each with an
optional `tools` list of `{"name": ...}` entries. A tools configuration maps
server names to lists of enabled tool names.

- `enable(server_tools, catalog, tool_names, server_name="")` and
  `disable(server_tools, catalog, tool_names, server_name="")` return a new
  configuration; the one passed in is left untouched. Both call
  `update(server_tools, catalog, add, remove, server_name="")`.
- With an empty `server_name`, each tool's server is the first catalog server
  that offers it (`find_server_by_tool`). With a server name, the server and
  tool are checked with `validate_tool_exists_in_server`.
- An unknown server or tool raises `ToolConfigError`.
- Enabling a tool that is already enabled changes nothing. Disabling a tool on
  a server that has no entry yet enables every other tool of that server.
- Every server's list in the result is sorted.

```python
from mcptoolkit.enable import disable, dump_tools_yaml

catalog = {"duckduckgo": {"tools": [{"name": "search"}, {"name": "fetch"}]}}
config = disable({}, catalog, ["search"], "duckduckgo")
# {"duckduckgo": ["fetch"]}
print(dump_tools_yaml(config))
# duckduckgo:
#   - fetch
```

`dump_tools_yaml(server_tools)` writes a configuration as block-style YAML
with two-space indentation and server names in sorted order.

### Version (`mcptoolkit.version`)

`user_agent()` returns the user agent string, `docker/mcp_gateway/v/HEAD`.

## Command-line programs

### mcptoolkit-jcat

Reads every file named on the command line and writes their contents to
standard output as one compact JSON array of strings (`null` when no files are
given). If a file cannot be read it prints `Error: ...` to standard error and
exits with status 1.

```
mcptoolkit-jcat first.txt second.txt
```

### mcptoolkit-bridge

Listens on TCP port 4444 and, for every connection, runs the given command
with the connection as its standard input; its standard output and error are
sent back over the connection. Without a command it prints a usage line and
exits with status 2.

```
mcptoolkit-bridge docker mcp gateway run
```

From Python, `serve(command, host="", port=4444)` starts the server and
`handle_connection(command, reader, writer)` serves a single connection.

### mcptoolkit-l7proxy

An HTTP proxy on port 8080 that only lets through requests whose host appears
in the comma-separated `ALLOWED_HOSTS` environment variable; other hosts get
`403 Forbidden`. The host is compared exactly as written: for `CONNECT` it is
the `host:port` target, for absolute-URL requests the URL's network location,
and otherwise the `Host` header. `CONNECT` requests open a tunnel (a failed
connection gives `503`); other requests are forwarded, over TLS for `https`
URLs (a failure gives `500`).

```
ALLOWED_HOSTS=example.com,api.example.com:443 mcptoolkit-l7proxy
```

From Python, `ProxyServer(allowed_hosts)` offers `is_allowed(host)`,
`handle(reader, writer)` and `start(host="0.0.0.0", port=8080)`.

### mcptoolkit-interceptor

An example interceptor on port 8080. `POST /before` receives a tool call and
logs the tool name and arguments to standard error; `POST /after` receives the
tool result and logs the length in bytes of its first text content. A body
that cannot be read this way gets `400 Bad Request`, and other paths get
`404`. `make_server(host="", port=8080)` returns the server without starting
it.

```
mcptoolkit-interceptor
```

## What it does not do

mcptoolkit does not run a gateway or an MCP client: it does not start
servers, list tools from a live gateway, or perform tool calls itself. The
listing and call helpers work on data you pass in. Likewise, `enable` and
`disable` neither read a catalog or tools configuration from disk nor save
one; loading the data and writing the YAML produced by `dump_tools_yaml` is
left to the caller.