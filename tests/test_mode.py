"""
Mode Selector (mode.py)

Tests detect_dev_server against a local HTTP server and a closed port.
"""

import socket
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

from vitebridge.mode import detect_dev_server


def _handler(status: int):
    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            self.send_response(status)
            self.send_header("Content-Length", "2")
            self.end_headers()
            self.wfile.write(b"ok")

        def log_message(self, format, *args):
            pass

    return Handler


@pytest.fixture
def serve():
    servers = []

    def start(status: int) -> str:
        server = HTTPServer(("127.0.0.1", 0), _handler(status))
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        servers.append(server)
        return f"http://127.0.0.1:{server.server_address[1]}/"

    yield start

    for server in servers:
        server.shutdown()
        server.server_close()


def _closed_port() -> int:
    sock = socket.socket()
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


class TestDetectDevServer:

    def test_reachable(self, serve):
        assert detect_dev_server(serve(200), timeout=5) is True

    def test_error_status_counts_as_reachable(self, serve):
        assert detect_dev_server(serve(404), timeout=5) is True
        assert detect_dev_server(serve(500), timeout=5) is True

    def test_connection_refused(self):
        assert detect_dev_server(f"http://127.0.0.1:{_closed_port()}/", timeout=5) is False

    def test_unresolvable_host(self):
        assert detect_dev_server("http://vitebridge.invalid/", timeout=5) is False

    def test_default_timeout(self, serve):
        assert detect_dev_server(serve(200)) is True
