import http.client
import json
import threading

import pytest

from mcptoolkit.interceptor import make_server


@pytest.fixture
def server():
    srv = make_server("127.0.0.1", 0)
    thread = threading.Thread(target=srv.serve_forever, daemon=True)
    thread.start()
    yield srv
    srv.shutdown()
    srv.server_close()
    thread.join()


def _post(server, path, body):
    conn = http.client.HTTPConnection("127.0.0.1", server.server_address[1], timeout=10)
    data = body if isinstance(body, bytes) else json.dumps(body).encode()
    conn.request("POST", path, body=data, headers={"Content-Type": "application/json"})
    response = conn.getresponse()
    result = response.status, response.read()
    conn.close()
    return result


def test_before_logs_tool_call(server, capsys):
    status, body = _post(
        server, "/before", {"params": {"name": "search", "arguments": {"query": "Docker"}}}
    )
    assert status == 200
    assert body == b""
    assert "Calling tool [search] with arguments:" in capsys.readouterr().err


def test_before_rejects_invalid_json(server):
    status, body = _post(server, "/before", b"{not json")
    assert status == 400
    assert body == b"Invalid request body\n"


def test_before_rejects_wrong_types(server):
    status, _ = _post(server, "/before", {"params": {"name": 42}})
    assert status == 400


def test_after_logs_response_size_in_bytes(server, capsys):
    status, _ = _post(server, "/after", {"content": [{"text": "héllo"}]})
    assert status == 200
    assert "Tool gave a response of: 6 characters" in capsys.readouterr().err


def test_after_without_content_is_rejected(server):
    status, body = _post(server, "/after", {"content": []})
    assert status == 400
    assert body == b"Invalid request body\n"


def test_unknown_path_is_not_found(server):
    status, _ = _post(server, "/elsewhere", {})
    assert status == 404