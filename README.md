# tinyhttpd

A small HTTP/1.1 server. Each connection is handled on its own thread. It
answers `GET` requests only and knows two kinds of route.

- `/static/<file>` returns the file at `static/<file>` under the serving
  directory. A path that contains `..` is refused with `403 Forbidden`, and so
  is a directory. A file that cannot be read gives `404 Not Found`. The content
  type is `image/png` if the path contains `.png`, otherwise `image/jpg` if it
  contains `.jpg`, and `application/octet-stream` for anything else.
- `/calc/<op>/<a>/<b>` does integer arithmetic. `<op>` is one of `add`, `sub`,
  `mul` or `div`; division truncates toward zero. The answer is plain text
  such as `result: 6 * 7 = 42`. A malformed path, an unknown operation or a
  division by zero gives `400 Bad Request`.

Any other path gives `404 Not Found` with the body `i got it`. Any method
other than `GET` gives `405 Method Not Allowed`.

Every response carries `Content-Type`, `Content-Length` and
`Connection: close` headers. The connection itself stays open and is read for
further requests until the client closes it.

## Installation

```
pip install .
```

## Running

```
tinyhttpd            # listens on port 80
tinyhttpd -p 8080    # listens on port 8080
```

The port given with `-p` must be between 80 and 65535; any other value prints
`Invalid port number: <n>` and exits with status 1. A value that does not
start with an integer leaves the port at 80. If the socket cannot be bound the
program prints the error and exits with status 1. Progress messages (binding,
accepted and closed connections, received requests) are logged to standard
error. Static files are looked up relative to the directory the server was
started from. Stop the server with Ctrl-C.

```
$ curl http://localhost:8080/calc/add/2/3
result: 2 + 3 = 5
```

## Using it from Python

```python
from tinyhttpd.request import parse_request
from tinyhttpd.routes import generate_response

req = parse_request("GET /calc/mul/6/7 HTTP/1.1\r\nHost: x\r\n\r\n")
res = generate_response(req, ".")
print(res.to_bytes())
```

The pieces:

- `tinyhttpd.request`: `Request` (method, path, version, raw text and the
  `Content-Length` value), `parse_request(raw)` and
  `read_client_request(sock)`, which returns `None` once the peer has closed.
- `tinyhttpd.response`: `Response` (status, content type, body) with
  `header_bytes()` and `to_bytes()`, and `send_response(sock, response)`.
- `tinyhttpd.routes`: `generate_response(req, root)`,
  `static_file_response(req, root)` and `calc_response(req)`.
- `tinyhttpd.server`: `create_listening_socket(port, host)`,
  `handle_connection(client, root)` and `run_server(listener, root)`, which
  accepts connections until the listening socket is closed.
- `tinyhttpd.cli`: `parse_port(argv)` and `main(argv)`.

## Limits

The server reads at most 1023 bytes of each request and stops at the end of
the header block; request bodies are not read. Methods other than `GET`,
including `HEAD`, are not supported. There is no TLS, no directory listing
and no configuration beyond the port.

## Tests

```
pip install .[test]
pytest
```