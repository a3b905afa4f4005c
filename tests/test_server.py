import socket
import threading

import pytest

from tinyhttpd.server import create_listening_socket, handle_connection, run_server


def _recv_all(sock):
    data = bytearray()
    while chunk := sock.recv(4096):
        data += chunk
    return bytes(data)


def test_create_listening_socket_accepts_connections():
    listener = create_listening_socket(0, "127.0.0.1")
    try:
        port = listener.getsockname()[1]
        assert port > 0
        with socket.create_connection(("127.0.0.1", port), timeout=5):
            client, _ = listener.accept()
            client.close()
    finally:
        listener.close()


def test_create_listening_socket_port_in_use():
    listener = create_listening_socket(0, "127.0.0.1")
    try:
        port = listener.getsockname()[1]
        with pytest.raises(OSError):
            create_listening_socket(port, "127.0.0.1")
    finally:
        listener.close()


def test_handle_connection_answers_and_closes():
    server_side, client_side = socket.socketpair()
    try:
        client_side.sendall(b"GET /calc/add/2/3 HTTP/1.1\r\n\r\n")
        client_side.shutdown(socket.SHUT_WR)
        handle_connection(server_side, ".")
        data = _recv_all(client_side)
        assert data.startswith(b"HTTP/1.1 200 OK\r\n")
        assert data.endswith(b"result: 2 + 3 = 5")
        assert server_side.fileno() == -1
    finally:
        client_side.close()


def test_handle_connection_method_not_allowed():
    server_side, client_side = socket.socketpair()
    try:
        client_side.sendall(b"POST / HTTP/1.1\r\n\r\n")
        client_side.shutdown(socket.SHUT_WR)
        handle_connection(server_side, ".")
        assert server_side.fileno() == -1
        data = _recv_all(client_side)
        head, _, body = data.partition(b"\r\n\r\n")
        assert head.split(b"\r\n")[0] == b"HTTP/1.1 405 Method Not Allowed"
        assert b"Content-Type: text/plain" in head.split(b"\r\n")
        assert b"Content-Length: 18" in head.split(b"\r\n")
        assert body == b"Method not allowed"
    finally:
        client_side.close()


def test_run_server_serves_static_files(tmp_path):
    static = tmp_path / "static"
    static.mkdir()
    (static / "img.png").write_bytes(b"png bytes")
    listener = create_listening_socket(0, "127.0.0.1")
    port = listener.getsockname()[1]
    thread = threading.Thread(target=run_server, args=(listener, tmp_path), daemon=True)
    thread.start()
    with socket.create_connection(("127.0.0.1", port), timeout=5) as conn:
        conn.sendall(b"GET /static/img.png HTTP/1.1\r\n\r\n")
        conn.shutdown(socket.SHUT_WR)
        data = _recv_all(conn)
    assert b"Content-Type: image/png\r\n" in data
    assert data.endswith(b"\r\n\r\npng bytes")