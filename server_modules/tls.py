"""Loading PEM key material and building the server's TLS context."""

import os
import ssl
import logging
import tempfile

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization

from .config import s
from .errors import FileReadError, TLSConfigError

logger = logging.getLogger(__name__)


def read_pem_file(path, kind="PEM data"):
    """Read a PEM file and return its raw bytes.

    Args:
        path (str): File path, relative paths resolve against the working directory.
        kind (str): Human readable name used in log and error messages.

    Returns:
        bytes: The file contents.

    Raises:
        FileReadError: If the file is missing or unreadable. Empty files are
            returned as-is and rejected later when the TLS context is built.
    """
    logger.info(s.LOG_READING_PEM.format(kind=kind, path=path))
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise FileReadError(s.ERROR_PEM_READ_FAILED.format(kind=kind, path=path, error=e), path=path) from e
    logger.debug(s.LOG_PEM_READ.format(size=len(data), kind=kind, path=path))
    return data


def _public_key_der(public_key):
    return public_key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def validate_key_pair(key_pem, cert_pem):
    """Parse the key and certificate and check that they belong together.

    Returns the parsed certificate so callers can log its subject.
    """
    try:
        private_key = serialization.load_pem_private_key(key_pem, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise TLSConfigError(s.ERROR_KEY_INVALID.format(error=e)) from e

    try:
        certificate = x509.load_pem_x509_certificate(cert_pem)
    except ValueError as e:
        raise TLSConfigError(s.ERROR_CERT_INVALID.format(error=e)) from e

    if _public_key_der(private_key.public_key()) != _public_key_der(certificate.public_key()):
        raise TLSConfigError(s.ERROR_KEY_CERT_MISMATCH)
    return certificate


def create_tls_context(key_pem, cert_pem):
    """Build a server-side SSLContext from in-memory PEM bytes.

    The ssl module only loads cert chains from files, so the material is written
    to a private temporary directory that is removed as soon as it is loaded.

    Raises:
        TLSConfigError: If the material is malformed or the pair does not match.
    """
    certificate = validate_key_pair(key_pem, cert_pem)

    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    with tempfile.TemporaryDirectory() as tmp_dir:
        cert_path = os.path.join(tmp_dir, "cert.pem")
        key_path = os.path.join(tmp_dir, "key.pem")
        with open(cert_path, "wb") as f:
            f.write(cert_pem)
        with open(key_path, "wb") as f:
            f.write(key_pem)
        try:
            context.load_cert_chain(certfile=cert_path, keyfile=key_path)
        except ssl.SSLError as e:
            raise TLSConfigError(s.ERROR_TLS_CONTEXT_FAILED.format(error=e)) from e

    logger.info(s.LOG_TLS_CONTEXT_READY.format(subject=certificate.subject.rfc4514_string()))
    return context


def load_tls_context(key_path, cert_path):
    """Read key.pem and cert.pem from disk and return the server TLS context."""
    key_pem = read_pem_file(key_path, kind="private key")
    cert_pem = read_pem_file(cert_path, kind="certificate")
    return create_tls_context(key_pem, cert_pem)
