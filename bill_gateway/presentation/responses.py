"""JSON envelope rendering shared by every gateway endpoint."""

import json
from typing import Any

from fastapi.responses import JSONResponse, Response

from bill_gateway.domain.entities import AccountLogSuccess, QueryResult

JSON_MEDIA_TYPE = "application/json; charset=UTF-8"


class GatewayJSONResponse(JSONResponse):
    """JSONResponse that always declares the UTF-8 charset."""

    media_type = JSON_MEDIA_TYPE


def encode_json(data: Any) -> bytes:
    return json.dumps(data, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def to_envelope(result: QueryResult) -> tuple[bytes, int]:
    """
    Render a bill query result.

    Success and upstream failure alike are status 200; failures are
    signalled by ``"success": false`` in the body. Account logs are
    passed through byte for byte.
    """
    if isinstance(result, AccountLogSuccess):
        return result.raw_body.encode("utf-8"), 200
    return encode_json(result.to_dict()), 200


def envelope_response(result: QueryResult) -> Response:
    body, status_code = to_envelope(result)
    return Response(content=body, status_code=status_code, media_type=JSON_MEDIA_TYPE)


def error_response(status_code: int, message: str) -> GatewayJSONResponse:
    return GatewayJSONResponse(status_code=status_code, content={"error": message})
