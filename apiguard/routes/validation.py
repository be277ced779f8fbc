from typing import Any, Dict

from litestar import Request, Router, post
from litestar.exceptions import NotFoundException
from litestar.response import Response
from litestar.status_codes import HTTP_200_OK, HTTP_400_BAD_REQUEST

from apiguard.models.diagnostics import ValidationResult
from apiguard.utils.request_helper import RequestHelper
from apiguard.utils.validate_request import (
    UnknownRequestKind,
    validate_request_json,
)


def error_body(result: ValidationResult) -> Dict[str, Any]:
    """
    Build an upstream style error body from a rejected result.
    The first diagnostic is promoted to the top level ``error`` object.
    """
    first = result.diagnostics[0]
    return {
        "error": {
            "message": first.message,
            "type": "invalid_request_error",
            "param": first.field,
            "code": first.category,
        },
        "diagnostics": [diagnostic.model_dump() for diagnostic in result.diagnostics],
    }


def to_response(request: Request, kind: str, result: ValidationResult) -> Response:
    if result.valid:
        return Response(
            content={"valid": True, "diagnostics": []},
            status_code=HTTP_200_OK,
        )

    request.logger.info(
        f"Rejected {kind} payload: {len(result.diagnostics)} diagnostic(s), first on '{result.diagnostics[0].field}'"
    )
    return Response(content=error_body(result), status_code=HTTP_400_BAD_REQUEST)


@post("/validate/{kind:str}", status_code=HTTP_200_OK)
async def validate_payload(request: Request, kind: str) -> Response:
    """
    Validate a request body for the given request kind.
    Answers 200 when the payload may be forwarded and 400 with diagnostics otherwise.
    """
    request.logger.info(RequestHelper.request_details(request))
    request.logger.debug(RequestHelper.request_dump(request))

    body = await request.body()

    try:
        result = validate_request_json(kind, body)
    except UnknownRequestKind as e:
        raise NotFoundException(detail=str(e))

    return to_response(request, kind, result)


validation_router = Router(
    path="/v1",
    route_handlers=[validate_payload],
    tags=["Request Validation"],
)
