import json
import socket
import threading
import urllib.error
import urllib.request

import pytest

from fileuploadsys.server import make_server, start_http_server


@pytest.fixture
def base_url():
    server = make_server("127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    try:
        yield f"http://{host}:{port}"
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


def _post(url, data=b""):
    request = urllib.request.Request(url, data=data, method="POST")
    return urllib.request.urlopen(request, timeout=5)


def _status_and_body(url, data=b""):
    try:
        with _post(url, data=data) as response:
            return response.status, response.read()
    except urllib.error.HTTPError as error:
        with error:
            return error.code, error.read()


def test_post_upload_returns_json_message(base_url):
    with _post(base_url + "/upload") as response:
        assert response.status == 200
        assert response.headers["Content-Type"].startswith("application/json")
        assert json.loads(response.read()) == "upload successfully!"


def test_post_upload_with_body_is_accepted(base_url):
    with _post(base_url + "/upload", data=b"some file content") as response:
        assert json.loads(response.read()) == "upload successfully!"


def test_post_upload_ignores_query_string(base_url):
    with _post(base_url + "/upload?name=x") as response:
        assert response.status == 200


def test_unknown_path_is_not_found(base_url):
    status, body = _status_and_body(base_url + "/elsewhere")
    assert status == 404
    assert body == b"404 page not found"


def test_make_server_binds_requested_port():
    with socket.socket() as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]
    server = make_server("127.0.0.1", str(port))
    try:
        assert server.server_address[1] == port
    finally:
        server.server_close()


def test_start_http_server_fails_on_port_in_use():
    with socket.socket() as busy:
        busy.bind(("", 0))
        busy.listen()
        port = busy.getsockname()[1]
        with pytest.raises(SystemExit) as info:
            start_http_server(str(port))
    assert "Failed to run http server" in str(info.value)


def test_start_http_server_rejects_bad_port():
    with pytest.raises(SystemExit) as info:
        start_http_server("notaport")
    assert "Failed to run http server" in str(info.value)