"""Field rules for the registration form.

Each rule is a callable with the signature::

    def rule(value: object) -> Checked:
        '''Return Checked.ok(cleaned) or Checked.fail(code, **params).'''

Rules are built by factory functions that close over a policy, the same
way parameterized validators close over their limits::

    check = full_name(STRICT_POLICY)
    check("  João   da Silva ")  # Checked(value="João da Silva")
    check("João")                # Checked(error=FieldError(NAME_NEEDS_SURNAME))

Inside a rule the checks run in a fixed order and the first failure wins.
Values of the wrong type are reported as errors, never raised.
"""

import re
from collections.abc import Callable, Sequence
from datetime import date
from typing import TypeAlias

from regform.config import ValidatorPolicy
from regform.messages import ErrorCode
from regform.validation.dates import age_on, parse_date
from regform.validation.result import Checked

FieldRule: TypeAlias = Callable[[object], Checked]


# ---------------------------------------------------------------------------
# Full name
# ---------------------------------------------------------------------------

# ASCII letters plus the Latin-1 Supplement and Latin Extended-A letters
# (× and ÷ excluded).
_LETTERS = "A-Za-zÀ-ÖØ-öø-ſ"
_NAME_CHARS_RE = re.compile(rf"[{_LETTERS}' \-]+")
_LETTER_RE = re.compile(rf"[{_LETTERS}]")


def normalize_full_name(text: str) -> str:
    """Trim *text* and collapse every run of whitespace to a single space.

    This is the form of the name that should be stored and displayed::

        normalize_full_name("  João    da   Silva ")  # "João da Silva"
    """
    return " ".join(text.split())


def full_name(policy: ValidatorPolicy) -> FieldRule:
    """Name and surname, letters only, at least ``min_full_name_length`` chars."""
    min_length = policy.min_full_name_length

    def check(value: object) -> Checked:
        if value is None:
            return Checked.fail(ErrorCode.REQUIRED)
        if not isinstance(value, str):
            return Checked.fail(ErrorCode.NOT_TEXT)

        normalized = normalize_full_name(value)
        if len(normalized) < min_length:
            return Checked.fail(ErrorCode.NAME_TOO_SHORT, min_length=min_length)
        if " " not in normalized:
            return Checked.fail(ErrorCode.NAME_NEEDS_SURNAME)
        if not _NAME_CHARS_RE.fullmatch(normalized):
            return Checked.fail(ErrorCode.NAME_INVALID_CHARS)
        # Rejects names made only of hyphens and apostrophes
        if not _LETTER_RE.search(normalized):
            return Checked.fail(ErrorCode.NAME_NO_LETTERS)
        return Checked.ok(normalized)

    return check


# ---------------------------------------------------------------------------
# Email
# ---------------------------------------------------------------------------

# Structure only: local@domain.tld with no whitespace and a single "@"
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# One alphanumeric label (hyphens inside only) followed by an alphabetic TLD
_PLAUSIBLE_DOMAIN_RE = re.compile(r"[a-zA-Z0-9][a-zA-Z0-9\-]{1,61}[a-zA-Z0-9]\.[a-zA-Z]{2,}")


def email(policy: ValidatorPolicy) -> FieldRule:
    """Well-formed address on a recognised TLD, with typo and provider checks."""
    typo_corrections = policy.typo_corrections
    tlds = policy.tld_allow_list
    common_domains = policy.common_domains
    plausibility_check = policy.email_plausibility_check

    def check(value: object) -> Checked:
        if value is None:
            return Checked.fail(ErrorCode.REQUIRED)
        if not isinstance(value, str):
            return Checked.fail(ErrorCode.NOT_TEXT)

        trimmed = value.strip()
        if not trimmed:
            return Checked.fail(ErrorCode.REQUIRED)
        if not _EMAIL_RE.fullmatch(trimmed):
            return Checked.fail(ErrorCode.EMAIL_INVALID_FORMAT)

        domain = trimmed.rpartition("@")[2]
        lower_domain = domain.lower()

        suggestion = typo_corrections.get(lower_domain)
        if suggestion is not None:
            return Checked.fail(ErrorCode.EMAIL_TYPO, domain=domain, suggestion=suggestion)

        tld = lower_domain.rpartition(".")[2]
        if len(tld) < 2 or tld not in tlds:
            return Checked.fail(ErrorCode.EMAIL_INVALID_TLD)

        if plausibility_check and not (
            lower_domain in common_domains or _PLAUSIBLE_DOMAIN_RE.fullmatch(domain)
        ):
            return Checked.fail(ErrorCode.EMAIL_UNKNOWN_PROVIDER)

        return Checked.ok(trimmed)

    return check


# ---------------------------------------------------------------------------
# Birth date
# ---------------------------------------------------------------------------


def birth_date(policy: ValidatorPolicy, today: Callable[[], date] = date.today) -> FieldRule:
    """A real calendar date, at least ``min_age_years`` ago, not before ``min_birth_year``.

    *today* is called once per check. Today's date and future dates fail
    the age check.
    """
    formats = policy.date_formats
    min_age = policy.min_age_years
    min_year = policy.min_birth_year

    def check(value: object) -> Checked:
        if value is None or (isinstance(value, str) and not value.strip()):
            return Checked.fail(ErrorCode.REQUIRED)

        parsed = parse_date(value, formats)
        if parsed is None:
            return Checked.fail(ErrorCode.DATE_INVALID)
        if age_on(parsed, today()) < min_age:
            return Checked.fail(ErrorCode.DATE_UNDERAGE, min_age=min_age)
        if parsed.year < min_year:
            return Checked.fail(ErrorCode.DATE_TOO_OLD, min_year=min_year)
        return Checked.ok(parsed)

    return check


# ---------------------------------------------------------------------------
# Country
# ---------------------------------------------------------------------------


def country(allowed: Sequence[str]) -> FieldRule:
    """Exact, case-sensitive member of *allowed* after trimming."""
    members = frozenset(allowed)

    def check(value: object) -> Checked:
        if value is None:
            return Checked.fail(ErrorCode.REQUIRED)
        if not isinstance(value, str):
            return Checked.fail(ErrorCode.NOT_TEXT)

        trimmed = value.strip()
        if not trimmed:
            return Checked.fail(ErrorCode.REQUIRED)
        if trimmed not in members:
            return Checked.fail(ErrorCode.COUNTRY_NOT_ALLOWED)
        return Checked.ok(trimmed)

    return check


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


def comments(policy: ValidatorPolicy) -> FieldRule:
    """Optional free text of at most ``max_comments_length`` characters."""
    max_length = policy.max_comments_length

    def check(value: object) -> Checked:
        if value is None:
            return Checked.ok(None)
        if not isinstance(value, str):
            return Checked.fail(ErrorCode.NOT_TEXT)
        if len(value) > max_length:
            return Checked.fail(ErrorCode.COMMENTS_TOO_LONG, max_length=max_length)
        return Checked.ok(value)

    return check
