"""Form validation — per-field rules, one merged result.

Usage::

    from regform.config import STRICT_POLICY
    from regform.validation import validate, full_name, email, country

    result = validate(form, {
        "fullName": full_name(STRICT_POLICY),
        "email": email(STRICT_POLICY),
        "country": country(["Brasil", "Chile"]),
    }, STRICT_POLICY.messages)
    if not result:
        return render_form(form, errors=result.errors)
    # result.data has cleaned values
"""

import logging
from collections.abc import Mapping
from typing import Any

from regform.messages import ErrorCode, MessageCatalog
from regform.validation.result import Checked, FieldError, ValidationResult
from regform.validation.rules import (
    FieldRule,
    birth_date,
    comments,
    country,
    email,
    full_name,
    normalize_full_name,
)

__all__ = [
    "Checked",
    "FieldError",
    "FieldRule",
    "ValidationResult",
    "birth_date",
    "comments",
    "country",
    "email",
    "full_name",
    "normalize_full_name",
    "validate",
]

logger = logging.getLogger("regform.validation")


def validate(
    data: Mapping[str, Any],
    rules: Mapping[str, FieldRule],
    messages: MessageCatalog,
) -> ValidationResult:
    """Validate data against a table of field rules.

    Args:
        data: Any mapping of field names to raw values. Missing keys are
            passed to their rule as ``None``.
        rules: A mapping of field names to rule callables. Each rule
            returns a ``Checked`` carrying either the cleaned value or
            a ``FieldError``.
        messages: The catalog used to render error codes into text.

    Returns:
        A ``ValidationResult`` with ``.data`` (cleaned values of the
        fields that passed), ``.errors`` (field -> message) and
        ``.codes`` (field -> ``ErrorCode``).

    Every rule runs; one field failing never stops the others.
    """
    errors: dict[str, str] = {}
    codes: dict[str, ErrorCode] = {}
    cleaned: dict[str, Any] = {}

    for field_name, rule in rules.items():
        outcome = rule(data.get(field_name))
        if outcome.error is not None:
            errors[field_name] = messages.render(field_name, outcome.error.code, outcome.error.params)
            codes[field_name] = outcome.error.code
        else:
            cleaned[field_name] = outcome.value

    if errors:
        logger.debug(
            "validation failed: %s",
            ", ".join(f"{name}={code.value}" for name, code in codes.items()),
        )

    return ValidationResult(data=cleaned, errors=errors, codes=codes)
