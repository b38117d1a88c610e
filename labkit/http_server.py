"""TCP servers answering HTTP requests from a directory of files."""

from __future__ import annotations

import argparse
import os
import socket
import sys
from pathlib import Path
from typing import Callable, Optional, Union

from .http_files import handle_request, search_file

PathLike = Union[str, os.PathLike]
Handler = Callable[[bytes, PathLike], bytes]

DEFAULT_PORT = 8000
MAX_MESSAGE_LENGTH = 1024
BACKLOG = 5

_SIMPLE_HEADERS = {
    ".html": "HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n\r\n",
    ".png": "HTTP/1.1 200 OK\r\nContent-Type: image/png\r\n\r\n",
    ".css": "HTTP/1.1 200 OK\r\nContent-Type: text/css\r\n\r\n",
}
_UNSUPPORTED_HEADER = "HTTP/1.1 415 Unsupported Media Type\r\n\r\n"
_SIMPLE_NOT_FOUND = (
    "HTTP/1.1 404 Not Found\r\nContent-Type: text/html\r\n\r\n"
    "<html><body><h1>404 Not Found</h1>"
    "<p>The requested file was not found.</p></body></html>"
)

_GOODBYE = (
    "HTTP/1.1 200 OK\r\n"
    "Content-Type: text/html; charset=UTF-8\r\n\r\n"
    "<!DOCTYPE html><html><head><title>Bye-bye baby bye-bye</title>"
    "<style>body { background-color: #111 }"
    "h1 { font-size:4cm; text-align: center; color: black;"
    " }</style></head>"
    "<body><h1>Goodbye, world!</h1></body></html>\r\n"
)


def _decode(message: Union[str, bytes]) -> str:
    if isinstance(message, bytes):
        return message.split(b"\0", 1)[0].decode("utf-8", "surrogateescape")
    return message


def handle_simple_request(message: Union[str, bytes], directory: PathLike = ".") -> bytes:
    """Answer a GET for a file of ``directory``; empty when nothing is sent.

    The path is the request target without its leading slash. HTML, PNG and
    CSS files are sent with their content type; other files that have an
    extension are sent after a 415 header; files without one send nothing.
    Missing files get a 404 page.
    """
    words = _decode(message).split()
    if not words or not words[0].startswith("GET"):
        return b""
    target = words[1] if len(words) > 1 else ""
    path = target[1:] if target.startswith("/") else ""
    root = Path(directory)
    if not path or not search_file(path, root):
        return _SIMPLE_NOT_FOUND.encode("ascii")
    try:
        content = (root / path).read_bytes()
    except OSError:
        return b""
    dot = path.rfind(".")
    if dot < 0:
        return b""
    header = _SIMPLE_HEADERS.get(path[dot:], _UNSUPPORTED_HEADER)
    return header.encode("ascii") + content


def goodbye_response() -> bytes:
    """Return the fixed page sent to every client by the goodbye server."""
    return _GOODBYE.encode("utf-8")


def serve_connection(
    conn: socket.socket,
    directory: PathLike = ".",
    handler: Handler = handle_request,
) -> bytes:
    """Read one request from ``conn``, send the handler's reply and close it.

    Returns the bytes that were sent.
    """
    with conn:
        message = conn.recv(MAX_MESSAGE_LENGTH)
        response = handler(message, directory)
        if response:
            conn.sendall(response)
    return response


def serve(
    host: str = "",
    port: int = DEFAULT_PORT,
    directory: PathLike = ".",
    handler: Handler = handle_request,
    max_connections: Optional[int] = None,
) -> int:
    """Accept connections and answer each with ``handler``.

    Runs forever unless ``max_connections`` is given; returns the number of
    connections served.
    """
    served = 0
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind((host, port))
        listener.listen(BACKLOG)
        print(f"Server listening on port {listener.getsockname()[1]}...", flush=True)
        while max_connections is None or served < max_connections:
            try:
                conn, _ = listener.accept()
            except OSError as error:
                print(f"Error accepting connection: {error}", file=sys.stderr)
                continue
            try:
                serve_connection(conn, directory, handler)
            except OSError as error:
                print(f"Error receiving data: {error}", file=sys.stderr)
            served += 1
    return served


def _goodbye_handler(message: bytes, directory: PathLike) -> bytes:
    return goodbye_response()


_HANDLERS = {
    "files": handle_request,
    "simple": handle_simple_request,
    "goodbye": _goodbye_handler,
}


def main(argv=None) -> int:
    """Start a server answering from a directory until interrupted."""
    parser = argparse.ArgumentParser(description="Serve files over HTTP.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--directory", default=".")
    parser.add_argument("--mode", choices=sorted(_HANDLERS), default="files")
    parser.add_argument("--max-connections", type=int, default=None)
    args = parser.parse_args(argv)
    try:
        serve(args.host, args.port, args.directory, _HANDLERS[args.mode],
              args.max_connections)
    except KeyboardInterrupt:
        return 0
    except OSError as error:
        print(f"Error binding socket: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())