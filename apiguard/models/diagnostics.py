"""
Pydantic models for validation outcomes.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from apiguard.validators.rules import Category, RuleViolation

# Pydantic error types grouped by the kind of mistake they describe
TYPE_MISMATCH_ERRORS = {
    "model_type",
    "model_attributes_type",
    "dict_type",
    "list_type",
    "string_type",
    "int_type",
    "int_parsing",
    "float_type",
    "float_parsing",
    "bool_type",
    "bool_parsing",
}

STRUCTURAL_ERRORS = {"missing", "extra_forbidden", "json_invalid"}


class Diagnostic(BaseModel):
    """A single reason a payload was rejected."""

    field: str
    message: str
    category: Category
    suggestion: Optional[str] = None


class ValidationResult(BaseModel):
    """Outcome of validating one request payload."""

    valid: bool
    diagnostics: List[Diagnostic] = Field(default_factory=list)
    # Normalized request, only present when valid
    request: Optional[Dict[str, Any]] = None

    def errors_for(self, field: str) -> List[Diagnostic]:
        """Diagnostics attributed to field or to anything nested below it."""
        return [
            diagnostic
            for diagnostic in self.diagnostics
            if diagnostic.field == field or diagnostic.field.startswith(f"{field}.")
        ]


def _format_location(location) -> str:
    return ".".join(str(part) for part in location) or "body"


def _categorize(error_type: str) -> Category:
    if error_type in TYPE_MISMATCH_ERRORS:
        return "type_mismatch"
    if error_type in STRUCTURAL_ERRORS:
        return "structural_violation"
    return "domain_violation"


def diagnostics_from_error(exc: ValidationError) -> List[Diagnostic]:
    """Convert a pydantic ValidationError into diagnostics."""
    diagnostics = []

    for error in exc.errors():
        location = tuple(error["loc"])
        violation = (error.get("ctx") or {}).get("error")

        if isinstance(violation, RuleViolation):
            diagnostics.append(
                Diagnostic(
                    field=_format_location(location + violation.location),
                    message=violation.message,
                    category=violation.category,
                    suggestion=violation.suggestion,
                )
            )
            continue

        diagnostics.append(
            Diagnostic(
                field=_format_location(location),
                message=error["msg"],
                category=_categorize(error["type"]),
            )
        )

    return diagnostics
