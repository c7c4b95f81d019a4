"""Test helpers for building keys, properties files and Alipay bodies."""

import json
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from bill_gateway.infrastructure.clients.openapi import rsa2_sign

TEST_GATEWAY_URL = "https://alipay.test/gateway.do"
TEST_BILL_USER_ID = "2088000000000001"
TEST_APP_ID = "2021000000000001"


def private_key_pem(key: rsa.RSAPrivateKey) -> str:
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


def public_key_pem(key: rsa.RSAPrivateKey) -> str:
    return key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()


def escape_newlines(value: str) -> str:
    """Render a multi-line value the way alipay.properties stores it."""
    return value.strip().replace("\n", "\\n")


def write_properties(path: Path, **values: str) -> Path:
    lines = ["# test configuration"]
    lines += [f"{key}={value}" for key, value in values.items()]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def signed_alipay_body(
    node_name: str,
    payload: dict,
    alipay_key: rsa.RSAPrivateKey | None,
) -> str:
    """Build an Alipay response body, signing the node when a key is given."""
    node = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    if alipay_key is None:
        return f'{{"{node_name}":{node}}}'
    sign = rsa2_sign(node, alipay_key)
    return f'{{"{node_name}":{node},"sign":"{sign}"}}'
