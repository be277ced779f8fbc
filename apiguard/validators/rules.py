"""
Predicate + message rules and the engine that applies them to fields.

A field declares its rules explicitly, for example::

    purpose: Annotated[FilePurpose, BeforeValidator(enforce(PURPOSE_RULE))]

``enforce`` evaluates the rules in order and raises ``RuleViolation`` for the
first one whose predicate fails. Pydantic collects the violation as a
``value_error`` and keeps the exception in the error context, which is where
the diagnostics builder reads the category and suggestion back.
"""

from typing import Any, Callable, Literal, NamedTuple, Optional, Tuple, Union

import structlog

log = structlog.get_logger()

Category = Literal[
    "type_mismatch",
    "domain_violation",
    "structural_violation",
    "cross_field_inconsistency",
]

FALLBACK_MESSAGE = "Invalid value."


class RuleViolation(ValueError):
    """A field value failed a rule. Carries the diagnostic details."""

    def __init__(
        self,
        message: str,
        category: Category = "domain_violation",
        suggestion: Optional[str] = None,
        location: Tuple[Union[int, str], ...] = (),
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.suggestion = suggestion
        # Path below the field the validator is attached to, e.g. (0,) for tools[0]
        self.location = location


def _safe_call(func: Callable[..., Any], *args: Any, default: Any = None) -> Any:
    # Diagnostics are best effort and must never mask the original failure
    try:
        return func(*args)
    except Exception:
        log.warning(f"Diagnostic builder {getattr(func, '__name__', func)} failed", exc_info=True)
        return default


class Rule(NamedTuple):
    """A predicate with the message, category and optional suggestion for its failure."""

    predicate: Callable[[Any], bool]
    message: Union[str, Callable[[Any], str]]
    category: Union[Category, Callable[[Any], Category]] = "domain_violation"
    suggest: Optional[Callable[[Any], Optional[str]]] = None

    def check(self, value: Any) -> Optional[RuleViolation]:
        """Return a violation for value, or None when the predicate holds."""
        if self.predicate(value):
            return None

        if callable(self.message):
            message = _safe_call(self.message, value, default=FALLBACK_MESSAGE)
        else:
            message = self.message

        if callable(self.category):
            category = _safe_call(self.category, value, default="domain_violation")
        else:
            category = self.category

        suggestion = _safe_call(self.suggest, value) if self.suggest else None

        return RuleViolation(message, category=category, suggestion=suggestion)


def enforce(*rules: Rule) -> Callable[[Any], Any]:
    """Build a pydantic validator function that applies rules in order."""

    def _validate(value: Any) -> Any:
        for rule in rules:
            violation = rule.check(value)
            if violation is not None:
                raise violation
        return value

    return _validate
