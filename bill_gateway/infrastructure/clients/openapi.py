"""Minimal Alipay OpenAPI client with RSA2 request signing."""

import base64
import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Optional

import httpx
import structlog
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from bill_gateway.domain.entities import AlipayCredentials
from bill_gateway.domain.exceptions import AlipayAPIException, ConfigurationError

logger = structlog.get_logger(__name__)

FORMAT = "JSON"
CHARSET = "utf-8"
SIGN_TYPE = "RSA2"
API_VERSION = "1.0"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
SUCCESS_CODE = "10000"


@dataclass(frozen=True)
class OpenAPIResponse:
    """Parsed OpenAPI response node plus the untouched HTTP body."""

    body: str
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def code(self) -> Optional[str]:
        return self.payload.get("code")

    @property
    def msg(self) -> Optional[str]:
        return self.payload.get("msg")

    @property
    def sub_code(self) -> Optional[str]:
        return self.payload.get("sub_code")

    @property
    def sub_msg(self) -> Optional[str]:
        return self.payload.get("sub_msg")

    @property
    def is_success(self) -> bool:
        return self.code == SUCCESS_CODE and not self.sub_code


def load_private_key(value: str) -> rsa.RSAPrivateKey:
    """Load an RSA private key given as PEM or bare base64 (PKCS#8 or PKCS#1) DER."""
    text = value.strip()
    if "-----BEGIN" in text:
        key = serialization.load_pem_private_key(text.encode(), password=None)
    else:
        key = serialization.load_der_private_key(_b64decode_key(text), password=None)
    if not isinstance(key, rsa.RSAPrivateKey):
        raise ValueError("app_private_key is not an RSA key")
    return key


def load_public_key(value: str) -> rsa.RSAPublicKey:
    """Load an RSA public key given as PEM or bare base64 SubjectPublicKeyInfo."""
    text = value.strip()
    if "-----BEGIN" in text:
        key = serialization.load_pem_public_key(text.encode())
    else:
        key = serialization.load_der_public_key(_b64decode_key(text))
    if not isinstance(key, rsa.RSAPublicKey):
        raise ValueError("alipay_public_key is not an RSA key")
    return key


def _b64decode_key(text: str) -> bytes:
    return base64.b64decode("".join(text.split()))


def build_sign_content(params: Dict[str, str]) -> str:
    """Canonical string to sign: sorted key=value pairs, empty values and sign excluded."""
    return "&".join(
        f"{key}={value}"
        for key, value in sorted(params.items())
        if key != "sign" and value
    )


def rsa2_sign(content: str, private_key: rsa.RSAPrivateKey) -> str:
    signature = private_key.sign(content.encode(CHARSET), padding.PKCS1v15(), hashes.SHA256())
    return base64.b64encode(signature).decode("ascii")


def rsa2_verify(content: str, sign: str, public_key: rsa.RSAPublicKey) -> bool:
    try:
        public_key.verify(
            base64.b64decode(sign),
            content.encode(CHARSET),
            padding.PKCS1v15(),
            hashes.SHA256(),
        )
    except (InvalidSignature, ValueError):
        return False
    return True


def extract_response_node(body: str, node_name: str) -> Optional[str]:
    """
    Return the exact JSON text of ``node_name`` inside ``body``.

    Alipay signs the response node as it appears on the wire, so the
    text is sliced out of the body rather than re-serialized.
    """
    marker = f'"{node_name}"'
    start = body.find(marker)
    if start < 0:
        return None
    brace = body.find("{", start + len(marker))
    if brace < 0:
        return None

    depth = 0
    in_string = False
    escaped = False
    for index in range(brace, len(body)):
        char = body[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return body[brace:index + 1]
    return None


class AlipayOpenAPIClient:
    """
    Signs and sends single Alipay OpenAPI calls.

    Format, charset and sign type are fixed to JSON, UTF-8 and RSA2.
    Responses are verified against the Alipay public key when
    ``verify_response`` is enabled.
    """

    def __init__(
        self,
        credentials: AlipayCredentials,
        timeout: float | None = None,
        verify_response: bool = True,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._gateway_url = credentials.gateway_url
        self._app_id = credentials.app_id
        self._timeout = timeout
        self._verify_response = verify_response
        self._clock = clock

        try:
            self._private_key = load_private_key(credentials.app_private_key)
        except (ValueError, UnsupportedAlgorithm) as e:
            raise ConfigurationError(f"Invalid app_private_key: {e}") from e
        try:
            self._alipay_public_key = load_public_key(credentials.alipay_public_key)
        except (ValueError, UnsupportedAlgorithm) as e:
            raise ConfigurationError(f"Invalid alipay_public_key: {e}") from e

    def build_params(self, method: str, biz_content: Dict[str, Any]) -> Dict[str, str]:
        """Build the signed request envelope for ``method``."""
        params = {
            "app_id": self._app_id,
            "method": method,
            "format": FORMAT,
            "charset": CHARSET,
            "sign_type": SIGN_TYPE,
            "timestamp": self._clock().strftime(TIMESTAMP_FORMAT),
            "version": API_VERSION,
            "biz_content": json.dumps(biz_content, ensure_ascii=False, separators=(",", ":")),
        }
        params["sign"] = rsa2_sign(build_sign_content(params), self._private_key)
        return params

    async def execute(self, method: str, biz_content: Dict[str, Any]) -> OpenAPIResponse:
        """
        Send one signed OpenAPI call.

        Raises:
            AlipayAPIException: On HTTP errors, unparseable bodies or a
                response signature that does not verify
            httpx.HTTPError: On transport failures
        """
        params = self.build_params(method, biz_content)
        biz = params.pop("biz_content")

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.post(
                self._gateway_url,
                params=params,
                data={"biz_content": biz},
            )

        if response.status_code >= 400:
            raise AlipayAPIException(
                message=f"Alipay gateway error: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        return self.parse_response(method, response.text)

    def parse_response(self, method: str, body: str) -> OpenAPIResponse:
        try:
            data = json.loads(body)
        except ValueError as e:
            raise AlipayAPIException(f"Invalid response from Alipay: {e}") from e
        if not isinstance(data, dict):
            raise AlipayAPIException("Invalid response from Alipay: not a JSON object")

        node_name = method.replace(".", "_") + "_response"
        if node_name not in data and "error_response" in data:
            node_name = "error_response"
        payload = data.get(node_name)
        if not isinstance(payload, dict):
            raise AlipayAPIException(f"Invalid response from Alipay: missing {node_name}")

        result = OpenAPIResponse(body=body, payload=payload)
        if self._verify_response:
            self._check_response_sign(body, node_name, data.get("sign"), result)
        return result

    def _check_response_sign(
        self,
        body: str,
        node_name: str,
        sign: Optional[str],
        result: OpenAPIResponse,
    ) -> None:
        # Error responses are frequently unsigned
        if not sign:
            if result.is_success:
                raise AlipayAPIException("sign check fail: response is not signed")
            return

        content = extract_response_node(body, node_name)
        if content is None or not rsa2_verify(content, sign, self._alipay_public_key):
            logger.warning("alipay_response_sign_mismatch", node=node_name)
            raise AlipayAPIException("sign check fail: response signature mismatch")
