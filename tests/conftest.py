"""Shared fixtures: loopback webhook servers and a fixed clock."""

import socket
import socketserver
import threading
from datetime import datetime, timezone
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


class _RecordingHandler(BaseHTTPRequestHandler):
    def do_POST(self):
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length)
        self.server.received.append({"path": self.path, "headers": dict(self.headers), "body": body})

        status = self.server.status
        self.send_response(status)
        if status == 204:
            self.end_headers()
            return

        reply = b'{"message": "rejected"}'
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(reply)))
        self.end_headers()
        self.wfile.write(reply)

    def log_message(self, format, *args):
        pass


class _DropHandler(socketserver.BaseRequestHandler):
    def handle(self):
        # Read the request, then close without answering.
        self.request.recv(65536)


class _DropServer(socketserver.ThreadingMixIn, socketserver.TCPServer):
    daemon_threads = True


@pytest.fixture(autouse=True)
def no_proxy_env(monkeypatch):
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def webhook_server():
    """HTTP server recording every POST; set ``.status`` to choose the answer."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _RecordingHandler)
    server.status = 204
    server.received = []
    server.url = f"http://127.0.0.1:{server.server_address[1]}/api/webhooks/123/token"
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()


@pytest.fixture
def dropping_server():
    """TCP server that accepts a connection and closes it without a response."""
    server = _DropServer(("127.0.0.1", 0), _DropHandler)
    server.url = f"http://127.0.0.1:{server.server_address[1]}/api/webhooks/123/token"
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()


@pytest.fixture
def closed_port_url():
    """URL pointing at a local port nothing listens on."""
    sock = socket.socket()
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return f"http://127.0.0.1:{port}/api/webhooks/123/token"


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW
