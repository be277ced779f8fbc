"""
Utility for validating request bodies before they are forwarded upstream.
"""

import json
from typing import Any, Dict, Type, Union

import structlog
from pydantic import BaseModel, ValidationError

from apiguard.models.diagnostics import Diagnostic, ValidationResult, diagnostics_from_error
from apiguard.models.files import CreateFileRequest, ListFilesQuery
from apiguard.models.images import ImageVariationRequest
from apiguard.models.responses import CreateImageResponseRequest, CreateTextResponseRequest

log = structlog.get_logger(__name__)

REQUEST_MODELS: Dict[str, Type[BaseModel]] = {
    "file": CreateFileRequest,
    "list_files": ListFilesQuery,
    "text_response": CreateTextResponseRequest,
    "image_response": CreateImageResponseRequest,
    "image_variation": ImageVariationRequest,
}


class UnknownRequestKind(KeyError):
    """Raised when asked to validate a request kind that has no model."""

    def __init__(self, kind: str):
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"Unknown request kind '{self.kind}'. Expected one of: {', '.join(REQUEST_MODELS)}"


def validate_request(kind: str, payload: Any) -> ValidationResult:
    """
    Validate a decoded request payload against the model for its kind.

    Args:
        kind: Request kind, one of the keys of REQUEST_MODELS
        payload: Decoded JSON body or query parameters

    Returns:
        A ValidationResult holding either the normalized request or the
        diagnostics explaining why it was rejected

    Raises:
        UnknownRequestKind: If kind has no registered model
    """
    if kind not in REQUEST_MODELS:
        raise UnknownRequestKind(kind)

    try:
        model = REQUEST_MODELS[kind].model_validate(payload)
    except ValidationError as e:
        diagnostics = diagnostics_from_error(e)
        log.debug(f"Rejected {kind} request with {len(diagnostics)} diagnostic(s)")
        return ValidationResult(valid=False, diagnostics=diagnostics)

    return ValidationResult(valid=True, request=model.model_dump(exclude_none=True))


def _invalid_body(message: str) -> ValidationResult:
    return ValidationResult(
        valid=False,
        diagnostics=[Diagnostic(field="body", message=message, category="structural_violation")],
    )


def validate_request_json(kind: str, request_json: Union[str, bytes]) -> ValidationResult:
    """
    Validate a raw JSON request body.

    Args:
        kind: Request kind, one of the keys of REQUEST_MODELS
        request_json: JSON text, or the raw body bytes which must be UTF-8

    Returns:
        A ValidationResult; an undecodable or malformed body yields a single
        structural diagnostic on "body"

    Raises:
        UnknownRequestKind: If kind has no registered model
    """
    if kind not in REQUEST_MODELS:
        raise UnknownRequestKind(kind)

    try:
        if isinstance(request_json, bytes):
            request_json = request_json.decode("utf-8")
        payload = json.loads(request_json)
    except UnicodeDecodeError as e:
        return _invalid_body(f"Request body is not valid UTF-8: {str(e)}")
    except (ValueError, RecursionError) as e:
        # RecursionError comes from bodies nested deeper than the parser allows
        return _invalid_body(f"Invalid JSON format: {str(e)}")

    return validate_request(kind, payload)
