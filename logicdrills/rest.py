"""HTTP front end that serves the word tally of a text file as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import signal
import sys
import threading
from dataclasses import dataclass, field
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

from logicdrills.meat import FileMeta, ProcessFileService

log = logging.getLogger(__name__)

SUMMARY_ROUTE = "/api/beef/summary"
DEFAULT_ADDRESS = "localhost:8080"
DEFAULT_META = FileMeta("file.txt", "./pie-fire-dire/files", "txt")


@dataclass
class MeatResponse:
    """Body of a successful summary response."""

    beef: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {"beef": dict(self.beef)}


def _parse_address(addr: str) -> tuple[str, int]:
    host, sep, port_text = addr.rpartition(":")
    if not sep:
        raise ValueError(f"address {addr!r} must have the form host:port")
    try:
        port = int(port_text)
    except ValueError:
        raise ValueError(f"address {addr!r} has an invalid port") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"address {addr!r} has a port out of range")
    return host, port


def _normalise_path(raw_path: str) -> str:
    path = urlsplit(raw_path).path.rstrip("/") or "/"
    return path.lower()


class _Handler(BaseHTTPRequestHandler):
    server: _Server

    def do_GET(self) -> None:
        path = urlsplit(self.path).path
        if _normalise_path(self.path) != SUMMARY_ROUTE:
            self._send_text(HTTPStatus.NOT_FOUND, f"Cannot GET {path}")
            return
        try:
            meat_list = self.server.service.get_meat_list()
        except OSError as exc:
            log.error("Error getting meat list: %s", exc)
            self._send_json(
                HTTPStatus.INTERNAL_SERVER_ERROR,
                {"error": "Failed to get meat list"},
            )
            return
        self._send_json(HTTPStatus.OK, MeatResponse(meat_list).to_dict())

    def _send_json(self, status: HTTPStatus, payload: object) -> None:
        self._send(status, json.dumps(payload).encode("utf-8"), "application/json")

    def _send_text(self, status: HTTPStatus, text: str) -> None:
        self._send(status, text.encode("utf-8"), "text/plain; charset=utf-8")

    def _send(self, status: HTTPStatus, body: bytes, content_type: str) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        log.debug("%s - %s", self.address_string(), format % args)


class _Server(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, address: tuple[str, int], service: ProcessFileService) -> None:
        self.service = service
        super().__init__(address, _Handler)


class HttpRest:
    """HTTP server exposing the word tally at ``/api/beef/summary``.

    The socket is bound when the server is created; ``start`` serves until
    ``stop`` is called from another thread.
    """

    def __init__(self, addr: str, service: ProcessFileService | None = None) -> None:
        self.addr = addr
        self.service = service if service is not None else ProcessFileService(DEFAULT_META)
        self._server = _Server(_parse_address(addr), self.service)
        self._serving = threading.Event()
        self._closed = False

    @property
    def address(self) -> tuple[str, int]:
        """The host and port the server is bound to."""
        host, port = self._server.server_address[:2]
        return str(host), int(port)

    def start(self) -> None:
        """Serve requests until ``stop`` is called."""
        log.info("Starting HTTP server on %s", self.addr)
        self._serving.set()
        try:
            self._server.serve_forever()
        finally:
            self._server.server_close()
            self._closed = True
        log.info("HTTP server stopped")

    def stop(self) -> None:
        """Stop serving and release the socket."""
        log.info("Stopping HTTP server")
        if self._serving.is_set():
            self._server.shutdown()
        elif not self._closed:
            self._server.server_close()
            self._closed = True


def main(argv: list[str] | None = None) -> int:
    """Run the HTTP server until SIGINT or SIGTERM arrives."""
    parser = argparse.ArgumentParser(prog="pie-fire-dire")
    parser.add_argument("--addr", default=DEFAULT_ADDRESS)
    parser.add_argument("--file-path", default=DEFAULT_META.file_path)
    parser.add_argument("--file-name", default=DEFAULT_META.file_name)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(level=logging.INFO)
    meta = FileMeta(args.file_name, args.file_path, "txt")
    print("File Name:", meta.file_name)
    print("File Path:", meta.file_path)

    try:
        server = HttpRest(args.addr, ProcessFileService(meta))
    except (ValueError, OSError) as exc:
        print(f"Failed to start HTTP server: {exc}", file=sys.stderr)
        return 1

    stop_requested = threading.Event()

    def _request_stop(signum: int, frame: object) -> None:
        stop_requested.set()

    previous = {
        sig: signal.signal(sig, _request_stop) for sig in (signal.SIGINT, signal.SIGTERM)
    }
    worker = threading.Thread(target=server.start, name="http-server")
    worker.start()
    try:
        while not stop_requested.wait(0.5):
            pass
        log.info("Shutting down...")
    finally:
        server.stop()
        worker.join()
        for sig, handler in previous.items():
            signal.signal(sig, handler)
    log.info("Servers gracefully stopped.")
    return 0


if __name__ == "__main__":
    sys.exit(main())