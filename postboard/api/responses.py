"""Response Encoder — OperationResult → Starlette Response.

Invariants:
    - A body is serialized as JSON with Content-Type application/json
    - No body → empty response (no Content-Type, zero-length)
"""

from fastapi import Response
from fastapi.responses import JSONResponse

from postboard.core.domain_types import OperationResult


def encode_result(result: OperationResult) -> Response:
    if result.body is None:
        return empty_response(result.status_code)
    return JSONResponse(status_code=result.status_code, content=result.body)


def empty_response(status_code: int) -> Response:
    return Response(status_code=status_code)
