"""An HTTP proxy that only lets requests through to allowed hosts."""

from __future__ import annotations

import asyncio
import os
import sys
from collections.abc import Sequence
from contextlib import suppress
from http import HTTPStatus
from urllib.parse import urlsplit

_DROPPED_HEADERS = {"connection", "proxy-connection", "keep-alive"}


async def _respond(writer: asyncio.StreamWriter, status: HTTPStatus, body: str = "") -> None:
    data = body.encode()
    writer.write(
        f"HTTP/1.1 {status.value} {status.phrase}\r\nContent-Length: {len(data)}\r\n"
        f"Connection: close\r\n\r\n".encode("latin-1") + data
    )
    await writer.drain()


async def _pipe(source: asyncio.StreamReader, sink: asyncio.StreamWriter) -> None:
    with suppress(OSError):
        while chunk := await source.read(65536):
            sink.write(chunk)
            await sink.drain()


class ProxyServer:
    """Proxy for plain HTTP requests and CONNECT tunnels to allowed hosts."""

    def __init__(self, allowed_hosts: str) -> None:
        self.allowed_hosts = {host.strip() for host in allowed_hosts.split(",")}
        for host in self.allowed_hosts:
            print("Allowed host:", host, file=sys.stderr)

    def is_allowed(self, host: str) -> bool:
        """Whether requests to ``host`` (as ``name`` or ``name:port``) may pass."""
        return host in self.allowed_hosts

    async def handle(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        """Serve one client connection."""
        try:
            line = (await reader.readline()).decode("latin-1").split()
            if not line:
                return
            headers = []
            while (raw := await reader.readline()) not in (b"\r\n", b"\n", b""):
                name, _, value = raw.decode("latin-1").partition(":")
                headers.append((name.strip(), value.strip()))
            if len(line) != 3:
                await _respond(writer, HTTPStatus.BAD_REQUEST, "Error when parsing request")
                return
            method, target, version = line
            connect = method == "CONNECT"
            split = urlsplit(target)
            absolute = bool(split.scheme and split.netloc)
            host_header = next((v for k, v in headers if k.lower() == "host"), None)
            host = target if connect else split.netloc.rpartition("@")[2] if absolute else host_header or ""

            if not self.is_allowed(host):
                print("Access DENIED to", host, file=sys.stderr)
                await _respond(writer, HTTPStatus.FORBIDDEN)
                return
            print("Access GRANTED to", host, file=sys.stderr)

            https = not connect and split.scheme.lower() == "https"
            address = urlsplit("//" + host)
            try:
                port = address.port or (None if connect else 443 if https else 80)
                if port is None:
                    raise OSError(f"missing port in address {host}")
                dest_reader, dest_writer = await asyncio.open_connection(
                    address.hostname or host, port, ssl=True if https else None
                )
            except (OSError, ValueError) as exc:
                if connect:
                    await _respond(writer, HTTPStatus.SERVICE_UNAVAILABLE, "Failed to connect to destination")
                else:
                    await _respond(writer, HTTPStatus.INTERNAL_SERVER_ERROR, f"Failed to process request: {exc}")
                return

            if connect:
                writer.write(b"HTTP/1.1 200 OK\r\n\r\n")
            else:
                path = (split.path or "/") + (f"?{split.query}" if split.query else "") if absolute else target
                kept = [(k, v) for k, v in headers if k.lower() not in _DROPPED_HEADERS]
                if host_header is None:
                    kept.insert(0, ("Host", host))
                kept.append(("Connection", "close"))
                lines = [f"{method} {path} {version}", *(f"{k}: {v}" for k, v in kept), "", ""]
                dest_writer.write("\r\n".join(lines).encode("latin-1"))

            upstream = asyncio.create_task(_pipe(reader, dest_writer))
            try:
                await _pipe(dest_reader, writer)
            finally:
                upstream.cancel()
                dest_writer.close()
        except OSError:
            pass
        finally:
            writer.close()

    async def start(self, host: str = "0.0.0.0", port: int = 8080) -> asyncio.Server:
        """Start listening and return the running server."""
        return await asyncio.start_server(self.handle, host or None, port)


async def _run(proxy: ProxyServer) -> None:
    async with await proxy.start() as server:
        await server.serve_forever()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the proxy on port 8080, allowing the hosts in ``ALLOWED_HOSTS``."""
    try:
        asyncio.run(_run(ProxyServer(os.environ.get("ALLOWED_HOSTS", ""))))
    except KeyboardInterrupt:
        pass
    except OSError as exc:
        print(f"Failed to run proxy: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())