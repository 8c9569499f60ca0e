# level2

Building blocks for data processing services: a thread-safe, configurable
logger, an HTTP/1.1 request reader and response writer, and a generic
threaded TCP server to build listeners on.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Logging

The logger is a process-wide singleton, reached through `get_logger()` or
`Logger.get_instance()`. Out of the box it reports every level from `TRACE`
up and writes to standard output in this form:

```
[INFO] [2024-05-01 12:00:00] Hello from the logger
```

```python
from level2.logger import get_logger
from level2.loglevels import LogLevel
from level2.destinations import StdErrDestination, create_destination

log = get_logger()
log.info("service started")

log.set_max_log_level(LogLevel.WARN)          # or by name: "WARN"
log.set_destination(StdErrDestination())      # replace every destination
log.add_destination(create_destination({"type": "file", "fileName": "app.log"}))

print(log.max_log_level, log.destination_count)
```

- Levels (`level2.loglevels.LogLevel`): `NO_LOGGING`, `FATAL`, `ERROR`,
  `WARN`, `INFO`, `DEBUG`, `TRACE`. A message is written when its level is at
  or below the maximum level. `parse_log_level` and `log_level_name` convert
  between levels and their names.
- Destinations (`level2.destinations`): `StdOutDestination`,
  `StdErrDestination`, `FileDestination(file_name)` (appends, opening the
  file for each message) and `SyslogDestination(application_name)`.
- `create_destination(params)` builds one from a mapping whose `type` is
  `stdout`, `stderr`, `file` (needs `fileName`) or `syslog` (needs
  `applicationName`); it returns `None` for anything else, and
  `Logger.add_destination` ignores `None`.
- `set_max_log_level` ignores names it does not know.
- The timestamp comes from `Logger.time_provider`, a
  `level2.timeproviders.TimeProvider`; the default gives local time as
  `YYYY-MM-DD HH:MM:SS`.

The environment variable `LEVEL2_MAX_LOG_LEVEL` overrides the maximum level
each time a message is logged. An unknown value there is reported on
standard error and otherwise ignored.

## HTTP

- `level2.httprequest.HttpRequest` holds method, path, URL parameters
  (split off the path's query string), header fields and the body
  (`content`, bytes or `None`).
- `level2.httpresponse.HttpResponse` starts as `200 OK` with
  `Connection: close`, a plain-text `Content-Type` and a `Server` field.
  `set_payload` sets the body and `Content-Length`; setting a status that is
  not 2xx replaces the body with the status line. `message()` returns the
  bytes to send.
- `level2.http11.Http11(client_socket)` reads one request with
  `read_request(client_host)` and answers with `send_response(response)`. A
  request without a header terminator, a malformed first line or header
  field, a missing `Content-Length` when the body is still incoming, or a
  30-second stall is recorded as a `level2.httpexception.HttpException`
  carrying a suggested status line; `read_request` then returns `None`, and
  `has_errors()` / `last_error()` report it.

## TCP server

`level2.generic_server.GenericServer` accepts connections on a configured
port and serves each client on its own thread. Configuration keys are
`name`, `port` and `maxClients` (the listen backlog, default 10). The server
only opens its socket after `init_fifo` or `init_processor` has been called.
The client socket handed to `handle_client_connection` is non-blocking and is
closed when the handler returns. The server is also a context manager that
stops listening on exit.

```python
from level2.generic_server import GenericServer

class EchoServer(GenericServer):
    def handle_client_connection(self, client_socket, client_host):
        client_socket.setblocking(True)
        client_socket.sendall(client_socket.recv(1024))

with EchoServer({"name": "echo", "port": 8888, "maxClients": 10}) as server:
    server.init_fifo(None)
    server.start_listening()
    print(server.is_listening, server.server_address)
    ...
```

`level2.networklistener.NetworkListener` is the common base: `init_fifo`
selects asynchronous hand-over to an object with `enqueue`/`dequeue`,
`init_processor` synchronous hand-over to an object with `execute`, and
`last_message()` dequeues from the FIFO. `config_value` reads a typed field
from a configuration mapping, logging and falling back to a default when it
is missing or of the wrong type.

## What is not included

The package provides no ready-made HTTP server: nothing joins `Http11` to
`GenericServer`, so a handler has to be written as shown above. It has no
pipelines, FIFOs or processors of its own; listeners accept any objects with
the methods named above. There are no file-watching or MQTT listeners.

## Command

```
level2
```

logs a greeting through the logger, prints one to standard output and exits
with status 0.