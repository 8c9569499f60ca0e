"""Thread-safe logger, HTTP/1.1 request and response handling, and a threaded TCP server base."""

__version__ = "1.0.0"