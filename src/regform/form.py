"""Registration form validator.

Two ways in:

``FormValidator``: built once with the list of accepted countries and a
policy, then called for every submission::

    validator = FormValidator(["Brasil", "Chile"])
    result = validator.validate({
        "fullName": "Maria José da Silva",
        "email": "maria.jose@example.com",
        "birthDate": "1985-03-22",
        "country": "Brasil",
    })
    result.is_valid  # True

``validate_form`` and ``is_form_valid``: module-level functions using
``STANDARD_POLICY`` and the built-in ``COUNTRIES`` list, no setup step.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import date
from typing import Any, NotRequired, TypedDict

from regform.config import STANDARD_POLICY, STRICT_POLICY, ValidatorPolicy
from regform.errors import ConfigurationError
from regform.tables import COUNTRIES
from regform.validation import (
    FieldRule,
    ValidationResult,
    birth_date,
    comments,
    country,
    email,
    full_name,
    normalize_full_name,
    validate,
)

__all__ = [
    "FormInput",
    "FormValidator",
    "is_form_valid",
    "normalize_full_name",
    "validate_form",
]

logger = logging.getLogger("regform.validation")


class FormInput(TypedDict):
    """Shape of a registration form submission.

    Callers are untyped in practice: any value may arrive in any field,
    and the validator reports a field error instead of failing.
    """

    fullName: str
    email: str
    birthDate: str | date
    country: str
    comments: NotRequired[str | None]


class FormValidator:
    """Validates registration forms against a country whitelist and a policy.

    Stateless after construction: the same instance can validate any
    number of forms, from any number of threads.

    Raises ``ConfigurationError`` at construction when *countries* is not
    a non-empty list or tuple of strings.
    """

    __slots__ = ("_countries", "_policy", "_rules")

    def __init__(
        self,
        countries: Sequence[str],
        policy: ValidatorPolicy = STRICT_POLICY,
        *,
        clock: Callable[[], date] = date.today,
    ) -> None:
        if not isinstance(countries, (list, tuple)) or not countries:
            raise ConfigurationError("Allowed country list is required and must not be empty")
        for entry in countries:
            if not isinstance(entry, str):
                raise ConfigurationError(f"Allowed country list entries must be strings, got {entry!r}")

        self._countries: tuple[str, ...] = tuple(countries)
        self._policy = policy
        self._rules: dict[str, FieldRule] = {
            "fullName": full_name(policy),
            "email": email(policy),
            "birthDate": birth_date(policy, clock),
            "country": country(self._countries),
            "comments": comments(policy),
        }
        logger.debug(
            "form validator ready: %d countries, messages=%s",
            len(self._countries),
            policy.messages.locale,
        )

    @property
    def countries(self) -> tuple[str, ...]:
        """The accepted country names, in configuration order."""
        return self._countries

    @property
    def policy(self) -> ValidatorPolicy:
        return self._policy

    def validate(self, data: Mapping[str, Any]) -> ValidationResult:
        """Run every field rule against *data* and merge the errors."""
        return validate(data, self._rules, self._policy.messages)

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        return self.validate(data).is_valid


# ---------------------------------------------------------------------------
# Module-level variant
# ---------------------------------------------------------------------------

_default_validator = FormValidator(COUNTRIES, STANDARD_POLICY)


def validate_form(data: Mapping[str, Any]) -> dict[str, str]:
    """Validate *data* with ``STANDARD_POLICY``; return field -> message.

    An empty dict means the form is valid.
    """
    return _default_validator.validate(data).errors


def is_form_valid(data: Mapping[str, Any]) -> bool:
    """True when ``validate_form(data)`` reports no errors."""
    return not validate_form(data)
