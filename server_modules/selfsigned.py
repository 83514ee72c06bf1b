import os
import logging
import datetime
import ipaddress

from cryptography import x509
from cryptography.x509.oid import NameOID
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from .config import s

logger = logging.getLogger(__name__)


def generate_self_signed(common_name="localhost", days=365, key_size=2048):
    """
    Generates an RSA private key and a self-signed certificate for it.

    The certificate carries subject alternative names for the common name,
    localhost and 127.0.0.1 so that local clients can connect by name or address.

    Args:
        common_name (str): Subject common name of the certificate.
        days (int): Validity period, starting now.
        key_size (int): RSA modulus size in bits.

    Returns:
        tuple[bytes, bytes]: (key_pem, cert_pem)
    """
    key = rsa.generate_private_key(
        public_exponent=65537,
        key_size=key_size,
    )
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    dns_names = {common_name, "localhost"}
    alt_names = [x509.DNSName(n) for n in sorted(dns_names)]
    alt_names.append(x509.IPAddress(ipaddress.ip_address("127.0.0.1")))

    now = datetime.datetime.now(datetime.timezone.utc)
    certificate = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(minutes=5))
        .not_valid_after(now + datetime.timedelta(days=days))
        .add_extension(x509.SubjectAlternativeName(alt_names), critical=False)
        .add_extension(x509.BasicConstraints(ca=False, path_length=None), critical=True)
        .sign(key, hashes.SHA256())
    )
    logger.info(s.LOG_SELF_SIGNED_GENERATED.format(common_name=common_name, days=days))

    key_pem = key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )
    cert_pem = certificate.public_bytes(serialization.Encoding.PEM)
    return key_pem, cert_pem


def write_pem_pair(directory, key_pem, cert_pem, key_name="key.pem", cert_name="cert.pem", force=False):
    """Write key and certificate PEM files into directory and return their paths."""
    key_path = os.path.join(directory, key_name)
    cert_path = os.path.join(directory, cert_name)
    if not force:
        for path in (key_path, cert_path):
            if os.path.exists(path):
                raise FileExistsError(s.ERROR_SELF_SIGNED_EXISTS.format(path=path))

    os.makedirs(directory, exist_ok=True)
    # Private key readable by the owner only
    fd = os.open(key_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "wb") as f:
        f.write(key_pem)
    logger.info(s.LOG_SELF_SIGNED_WRITTEN.format(path=key_path))
    with open(cert_path, "wb") as f:
        f.write(cert_pem)
    logger.info(s.LOG_SELF_SIGNED_WRITTEN.format(path=cert_path))
    return key_path, cert_path
