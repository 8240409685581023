"""HTTP interceptor that logs tool calls before and after they run."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import urlsplit


def _log_before(data: Any) -> str:
    params = data.get("params") or {}
    name = params.get("name") or ""
    if not isinstance(name, str):
        raise ValueError("wrong type for name")
    return f"Calling tool [{name}] with arguments: {params.get('arguments')}"


def _log_after(data: Any) -> str:
    text = (data.get("content") or [])[0].get("text") or ""
    if not isinstance(text, str):
        raise ValueError("wrong type for text")
    return f"Tool gave a response of: {len(text.encode('utf-8'))} characters"


_ROUTES = {"/before": _log_before, "/after": _log_after}


class InterceptorHandler(BaseHTTPRequestHandler):
    """Handles ``/before`` and ``/after`` tool call notifications."""

    def do_POST(self) -> None:
        route = _ROUTES.get(urlsplit(self.path).path)
        if route is None:
            self._reply(HTTPStatus.NOT_FOUND, "404 page not found\n")
            return
        body = self.rfile.read(int(self.headers.get("Content-Length") or 0))
        try:
            message = route(json.loads(body) or {})
        except (ValueError, AttributeError, IndexError, TypeError):
            self._reply(HTTPStatus.BAD_REQUEST, "Invalid request body\n")
            return
        print(message, end="", file=sys.stderr, flush=True)
        self._reply(HTTPStatus.OK, "")

    def _reply(self, status: HTTPStatus, text: str) -> None:
        data = text.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    def log_message(self, format: str, *args: Any) -> None:
        pass


def make_server(host: str = "", port: int = 8080) -> ThreadingHTTPServer:
    """Create the interceptor HTTP server, bound but not yet serving."""
    return ThreadingHTTPServer((host, port), InterceptorHandler)


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the interceptor on port 8080."""
    try:
        server = make_server("", 8080)
    except OSError as exc:
        print("Server failed:", exc, file=sys.stderr)
        return 1
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())