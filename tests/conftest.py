"""
Shared fixtures.

Provides:
- RSA keypairs standing in for the application key and Alipay's key
- Credentials built from those keys
- A complete alipay.properties file
"""

from pathlib import Path

import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from bill_gateway.domain.entities import AlipayCredentials
from tests.helpers import (
    TEST_APP_ID,
    TEST_BILL_USER_ID,
    TEST_GATEWAY_URL,
    escape_newlines,
    private_key_pem,
    public_key_pem,
    write_properties,
)


@pytest.fixture(scope="session")
def app_key() -> rsa.RSAPrivateKey:
    """Application keypair used to sign OpenAPI requests."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def alipay_key() -> rsa.RSAPrivateKey:
    """Keypair playing Alipay's role when signing responses."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def credentials(app_key, alipay_key) -> AlipayCredentials:
    return AlipayCredentials(
        gateway_url=TEST_GATEWAY_URL,
        bill_user_id=TEST_BILL_USER_ID,
        app_id=TEST_APP_ID,
        app_private_key=private_key_pem(app_key),
        alipay_public_key=public_key_pem(alipay_key),
    )


@pytest.fixture
def properties_file(tmp_path: Path, app_key, alipay_key) -> Path:
    """A complete alipay.properties with backslash-n escaped PEM keys."""
    return write_properties(
        tmp_path / "custom.properties",
        gateway_url=TEST_GATEWAY_URL,
        bill_user_id=TEST_BILL_USER_ID,
        app_id=TEST_APP_ID,
        app_private_key=escape_newlines(private_key_pem(app_key)),
        alipay_public_key=escape_newlines(public_key_pem(alipay_key)),
    )
