import io
import socket
import threading

import pytest

from labkit.client import exchange, main


def test_exchange_sends_nul_terminated_message():
    ours, peer = socket.socketpair()
    with ours, peer:
        peer.sendall(b"pong\0")
        assert exchange(ours, "hello\n") == "pong"
        assert peer.recv(100) == b"hello\n\0"


def test_exchange_cuts_reply_at_nul():
    ours, peer = socket.socketpair()
    with ours, peer:
        peer.sendall(b"reply\0leftover")
        assert exchange(ours, "x") == "reply"


def test_exchange_raises_when_server_closes():
    ours, peer = socket.socketpair()
    with ours, peer:
        peer.shutdown(socket.SHUT_WR)
        with pytest.raises(ConnectionError):
            exchange(ours, "hello")


def test_main_talks_to_server(monkeypatch, capsys):
    server = socket.create_server(("127.0.0.1", 0))
    port = server.getsockname()[1]
    received = []

    def serve_once():
        conn, _ = server.accept()
        with conn:
            received.append(conn.recv(100))
            conn.sendall(b"ack\0")

    thread = threading.Thread(target=serve_once)
    thread.start()
    monkeypatch.setattr("sys.stdin", io.StringIO("hello\n"))
    try:
        result = main(["--host", "127.0.0.1", "--port", str(port)])
    finally:
        thread.join(timeout=5)
        server.close()
    assert result == 0
    assert received == [b"hello\n\0"]
    assert "Server is replying: ack" in capsys.readouterr().out


def test_main_reports_refused_connection(capsys):
    probe = socket.create_server(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    assert main(["--host", "127.0.0.1", "--port", str(port)]) == 1
    assert "Connection error" in capsys.readouterr().err