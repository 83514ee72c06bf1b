import pytest

from server_modules.selfsigned import generate_self_signed, write_pem_pair


@pytest.fixture(scope="session")
def pem_pair():
    """A matching (key_pem, cert_pem) pair, generated once per test session."""
    return generate_self_signed(common_name="localhost", days=1)


@pytest.fixture
def pem_dir(tmp_path, pem_pair):
    """Directory holding a valid key.pem and cert.pem."""
    key_pem, cert_pem = pem_pair
    write_pem_pair(str(tmp_path), key_pem, cert_pem)
    return tmp_path


@pytest.fixture
def mismatched_pem_dir(tmp_path, pem_pair):
    """Directory whose key.pem does not belong to its cert.pem."""
    other_key_pem, _ = generate_self_signed(common_name="other.example", days=1)
    _, cert_pem = pem_pair
    write_pem_pair(str(tmp_path), other_key_pem, cert_pem)
    return tmp_path
