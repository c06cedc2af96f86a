"""HTTP server exposing the upload endpoint."""

from __future__ import annotations

import json
import logging
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

UPLOAD_PATH = "/upload"
UPLOAD_MESSAGE = "upload successfully!"

logger = logging.getLogger(__name__)


class UploadHandler(BaseHTTPRequestHandler):
    """Routes POST /upload to the upload handler; other paths get 404."""

    def do_POST(self) -> None:
        length = int(self.headers.get("Content-Length") or 0)
        if length > 0:
            self.rfile.read(length)

        if urlsplit(self.path).path == UPLOAD_PATH:
            body = json.dumps(UPLOAD_MESSAGE).encode("utf-8")
            self._send(HTTPStatus.OK, body, "application/json; charset=utf-8")
        else:
            self._send(HTTPStatus.NOT_FOUND, b"404 page not found", "text/plain")

    def _send(self, status: HTTPStatus, body: bytes, content_type: str) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


def make_server(host: str, port) -> ThreadingHTTPServer:
    """Create a server bound to ``host``:``port`` serving :class:`UploadHandler`."""
    server = ThreadingHTTPServer((host, int(port)), UploadHandler)
    server.daemon_threads = True
    return server


def start_http_server(port) -> None:
    """Serve on all interfaces at ``port`` until interrupted.

    Exits with a message when the server cannot be started.
    """
    try:
        server = make_server("", port)
    except (OSError, ValueError, OverflowError) as exc:
        logger.error("Failed to run http server, err: %s", exc)
        raise SystemExit(f"Failed to run http server, err: {exc}") from exc

    print("Start running http server..")
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass