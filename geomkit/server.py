"""HTTP server exposing the geometric algorithms as JSON endpoints."""

from __future__ import annotations

import json
import logging
import re
import sys
import threading
from collections.abc import Callable
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any

from geomkit.methods import (
    MethodError,
    graham_scan_method,
    monotone_polygon_triangulation_method,
)

logger = logging.getLogger(__name__)

ROUTES: dict[str, Callable[[Any], dict[str, Any]]] = {
    "/GrahamScan": graham_scan_method,
    "/MonotonePolygonTriangulation": monotone_polygon_triangulation_method,
}


class _Handler(BaseHTTPRequestHandler):
    def log_message(self, format: str, *args: Any) -> None:
        """Route request logs to the module logger instead of stderr."""
        logger.debug("%s - %s", self.address_string(), format % args)

    def _send(self, status: int, payload: dict[str, Any] | None = None) -> None:
        body = b"" if payload is None else json.dumps(payload).encode("utf-8")
        self.send_response(status)
        if payload is not None:
            self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self) -> None:
        if self.path != "/stop":
            self._send(404)
            return
        self._send(200)
        threading.Thread(target=self.server.shutdown, daemon=True).start()

    def do_POST(self) -> None:
        method = ROUTES.get(self.path)
        if method is None:
            self._send(404)
            return

        length = int(self.headers.get("Content-Length") or 0)
        raw = self.rfile.read(length)
        try:
            data = json.loads(raw.decode("utf-8"))
        except ValueError as error:
            self._send(400, {"error": f"Parse error: {error}"})
            return

        try:
            result = method(data)
        except MethodError as error:
            self._send(400, {"error": error.message})
            return
        except Exception as error:  # noqa: BLE001 - reported to the client
            self._send(400, {"error": f"Exception: {error}"})
            return
        self._send(200, result)


def create_server(host: str, port: int) -> ThreadingHTTPServer:
    """Create (but do not start) the server bound to host and port.

    ``GET /stop`` shuts down a running server.
    """
    return ThreadingHTTPServer((host, port), _Handler)


def main(argv: list[str] | None = None) -> int:
    """Serve on the port given as the first argument (8080 by default)."""
    args = sys.argv[1:] if argv is None else list(argv)
    port = 8080
    if args:
        match = re.match(r"\s*([+-]?\d+)", args[0])
        if match is None:
            return -1
        port = int(match.group(1))

    print(f"Listening on port {port}...", file=sys.stderr)
    with create_server("0.0.0.0", port) as server:
        server.serve_forever()
    return 0


if __name__ == "__main__":
    sys.exit(main())