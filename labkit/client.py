"""An interactive client sending lines to a server and showing its replies."""

from __future__ import annotations

import argparse
import socket
import sys

SERVER_HOST = "127.0.0.1"
SERVER_PORT = 8000
MAX_MESSAGE_LENGTH = 2000


def exchange(sock: socket.socket, message: str) -> str:
    """Send ``message`` with a terminating NUL byte and return the reply.

    The reply is read in one receive of at most ``MAX_MESSAGE_LENGTH``
    bytes and cut at its first NUL byte.
    """
    sock.sendall(message.encode("utf-8") + b"\0")
    reply = sock.recv(MAX_MESSAGE_LENGTH)
    if not reply:
        raise ConnectionError("server closed the connection")
    return reply.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def main(argv=None) -> int:
    """Read lines from standard input, send each and print the server's reply."""
    parser = argparse.ArgumentParser(description="Send lines to a TCP server.")
    parser.add_argument("--host", default=SERVER_HOST)
    parser.add_argument("--port", type=int, default=SERVER_PORT)
    args = parser.parse_args(argv)
    try:
        with socket.create_connection((args.host, args.port)) as sock:
            while True:
                print("\nEnter message to send to server:")
                line = sys.stdin.readline()
                if not line:
                    break
                reply = exchange(sock, line)
                print(f"Server is replying: {reply}")
    except OSError as error:
        print(f"Connection error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())