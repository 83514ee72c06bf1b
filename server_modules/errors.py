"""Startup errors for the TLS server.

Every failure before the listener is up is fatal; main.py logs these and exits
with a non-zero status.
"""


class ServerStartupError(Exception):
    """Base class for errors raised while the server is starting."""

    pass


class FileReadError(ServerStartupError):
    """Key or certificate file is missing or unreadable."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class TLSConfigError(ServerStartupError):
    """Key/certificate material is malformed or the pair does not match."""

    pass


class BindError(ServerStartupError):
    """The listening socket could not be bound."""

    def __init__(self, message, host=None, port=None):
        super().__init__(message)
        self.host = host
        self.port = port
