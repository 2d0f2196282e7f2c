"""Validation result — immutable container for cleaned data or errors."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from regform.messages import ErrorCode


@dataclass(frozen=True, slots=True)
class FieldError:
    """Why a single field failed: a code plus the parameters its message needs."""

    code: ErrorCode
    params: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True, slots=True)
class Checked:
    """Outcome of running one field rule.

    Exactly one of ``value`` (the cleaned value) and ``error`` is
    meaningful: when ``error`` is set the value is ``None``.
    """

    value: Any = None
    error: FieldError | None = None

    @classmethod
    def ok(cls, value: Any) -> "Checked":
        return cls(value=value)

    @classmethod
    def fail(cls, code: ErrorCode, **params: Any) -> "Checked":
        return cls(error=FieldError(code, MappingProxyType(params)))


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating form data against a set of rules.

    ``is_valid`` is True when there are no errors.
    The result is falsy when invalid, so you can write::

        result = validator.validate(form)
        if not result:
            show_errors(result.errors)

    ``data`` contains the cleaned values of every field that passed, such
    as the normalized full name or the parsed birth date.

    ``errors`` maps field names to one message each; ``codes`` carries the
    same keys with the machine-readable ``ErrorCode``::

        {"fullName": "Nome completo deve conter pelo menos nome e sobrenome."}
        {"fullName": ErrorCode.NAME_NEEDS_SURNAME}
    """

    data: dict[str, Any]
    errors: dict[str, str]
    codes: dict[str, ErrorCode] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid
