"""Expose a command over TCP: every connection runs the command once."""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Sequence
from contextlib import suppress

logger = logging.getLogger(__name__)


async def _pump(source: asyncio.StreamReader, sink: asyncio.StreamWriter, close: bool = False) -> None:
    with suppress(OSError):
        while chunk := await source.read(65536):
            sink.write(chunk)
            await sink.drain()
    if close:
        sink.close()


async def handle_connection(
    command: Sequence[str], reader: asyncio.StreamReader, writer: asyncio.StreamWriter
) -> int | None:
    """Run ``command`` wired to a connection; return its exit code, or ``None`` if it did not start."""
    pipe = asyncio.subprocess.PIPE
    try:
        try:
            process = await asyncio.create_subprocess_exec(*command, stdin=pipe, stdout=pipe, stderr=pipe)
        except OSError as exc:
            logger.error("Error running command: %s", exc)
            return None
        feeder = asyncio.create_task(_pump(reader, process.stdin, close=True))
        await asyncio.gather(_pump(process.stdout, writer), _pump(process.stderr, writer))
        code = await process.wait()
        feeder.cancel()
        if code != 0:
            logger.error("Error running command: exit status %d", code)
        return code
    finally:
        writer.close()


async def serve(command: Sequence[str], host: str = "", port: int = 4444) -> asyncio.Server:
    """Start listening; each accepted connection runs ``command``."""
    command = list(command)
    return await asyncio.start_server(lambda r, w: handle_connection(command, r, w), host or None, port)


async def _run(command: Sequence[str]) -> None:
    async with await serve(command) as server:
        await server.serve_forever()


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the command given by the arguments on port 4444."""
    command = list(sys.argv[1:] if argv is None else argv)
    if not command:
        print("usage: bridge COMMAND [ARG...]", file=sys.stderr)
        return 2
    with suppress(KeyboardInterrupt):
        asyncio.run(_run(command))
    return 0


if __name__ == "__main__":
    sys.exit(main())