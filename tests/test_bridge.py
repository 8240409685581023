import asyncio
import sys

import pytest

from mcptoolkit.bridge import handle_connection, main, serve

UPPER_ECHO = [
    sys.executable,
    "-c",
    "import sys; data = sys.stdin.read(); sys.stdout.write(data.upper()); "
    "sys.stdout.flush(); sys.stderr.write('diag'); sys.stderr.flush()",
]


async def _exchange(port, payload):
    reader, writer = await asyncio.open_connection("127.0.0.1", port)
    writer.write(payload)
    await writer.drain()
    writer.write_eof()
    data = await asyncio.wait_for(reader.read(), timeout=30)
    writer.close()
    return data


async def _handle_once(command, payload):
    """Run handle_connection on one accepted connection; return (exit code, client data)."""
    accepted = asyncio.get_running_loop().create_future()
    finished = asyncio.Event()

    async def on_connect(reader, writer):
        accepted.set_result((reader, writer))
        await finished.wait()

    server = await asyncio.start_server(on_connect, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    async with server:
        client_reader, client_writer = await asyncio.open_connection("127.0.0.1", port)
        client_writer.write(payload)
        await client_writer.drain()
        client_writer.write_eof()
        reader, writer = await asyncio.wait_for(accepted, timeout=30)
        received = asyncio.create_task(client_reader.read())
        code = await asyncio.wait_for(handle_connection(command, reader, writer), timeout=30)
        data = await asyncio.wait_for(received, timeout=30)
        finished.set()
        client_writer.close()
    return code, data


@pytest.mark.asyncio
async def test_handle_connection_pipes_stdout_and_stderr():
    code, data = await _handle_once(UPPER_ECHO, b"hello")
    assert code == 0
    assert b"HELLO" in data
    assert b"diag" in data


@pytest.mark.asyncio
async def test_handle_connection_returns_exit_code():
    command = [sys.executable, "-c", "import sys; sys.exit(3)"]
    code, _ = await _handle_once(command, b"")
    assert code == 3


@pytest.mark.asyncio
async def test_handle_connection_missing_command_closes_connection():
    code, data = await _handle_once(["no-such-command-xyz"], b"ignored")
    assert code is None
    assert data == b""


@pytest.mark.asyncio
async def test_serve_runs_command_per_connection():
    server = await serve(UPPER_ECHO, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    async with server:
        first = await _exchange(port, b"one")
        second = await _exchange(port, b"two")
    assert b"ONE" in first
    assert b"TWO" in second


def test_main_without_command_fails(capsys):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().err