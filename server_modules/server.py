"""TLS listener setup and the Werkzeug WSGI server that runs on it."""

import errno
import socket
import logging

from werkzeug.serving import make_server

from .config import s
from .errors import BindError
from .tls import load_tls_context

logger = logging.getLogger(__name__)

LISTEN_BACKLOG = 128


def bind_listener(host, port):
    """Bind and listen on host:port, returning the plain TCP socket.

    Raises:
        BindError: If the address is in use or cannot be bound.
    """
    logger.info(s.LOG_BINDING.format(host=host, port=port))
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(LISTEN_BACKLOG)
    except OSError as e:
        sock.close()
        if e.errno == errno.EADDRINUSE:
            message = s.ERROR_PORT_IN_USE.format(port=port)
        else:
            message = s.ERROR_BIND_FAILED.format(host=host, port=port, error=e)
        raise BindError(message, host=host, port=port) from e
    return sock


def start_server(app, host, port, key_path, cert_path):
    """Run the startup sequence and return a bound, TLS-wrapped WSGI server.

    The key and certificate are loaded before any socket is bound, so bad
    material never leaves a listener behind.
    """
    ssl_context = load_tls_context(key_path, cert_path)
    sock = bind_listener(host, port)
    try:
        # Werkzeug duplicates the descriptor, the original socket is closed below
        server = make_server(host, port, app, threaded=True, ssl_context=ssl_context, fd=sock.fileno())
    finally:
        sock.close()
    logger.info(s.LOG_SERVER_LISTENING.format(host=host, port=server.port))
    return server
