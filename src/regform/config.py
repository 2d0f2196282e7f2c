"""Validator policy configuration.

ValidatorPolicy is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups. Every rule that differs
between deployments is a field here, so two validators with different
behaviour differ only in their policy, never in code.

Two presets ship with regform::

    STRICT_POLICY    # ISO + DD/MM/YYYY dates, typo and provider checks, Portuguese
    STANDARD_POLICY  # ISO dates only, TLD check only, Spanish

Derive variants with ``dataclasses.replace``::

    policy = replace(STRICT_POLICY, min_age_years=21, messages=ES)
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from regform.errors import ConfigurationError
from regform.messages import ES, PT_BR, MessageCatalog
from regform.tables import COMMON_EMAIL_DOMAINS, COMMON_TLDS, EXTENDED_TLDS, TYPO_DOMAINS


class DateFormat(Enum):
    """Text formats the birth-date rule can parse."""

    ISO = "iso"  # YYYY-MM-DD
    DMY_SLASH = "dmy_slash"  # DD/MM/YYYY


@dataclass(frozen=True, slots=True)
class ValidatorPolicy:
    """Rules and limits applied by a FormValidator. Immutable after creation.

    All fields have the strict defaults. Override what you need::

        policy = ValidatorPolicy(email_plausibility_check=False, min_age_years=16)

    Raises ``ConfigurationError`` when a value makes the policy unusable
    (no date formats, an empty TLD list, non-positive limits).
    """

    # Birth date
    date_formats: tuple[DateFormat, ...] = (DateFormat.ISO, DateFormat.DMY_SLASH)
    min_age_years: int = 18
    min_birth_year: int = 1900

    # Email
    email_plausibility_check: bool = True
    typo_corrections: Mapping[str, str] = field(default_factory=lambda: TYPO_DOMAINS)
    tld_allow_list: frozenset[str] = COMMON_TLDS
    common_domains: frozenset[str] = COMMON_EMAIL_DOMAINS

    # Full name / comments
    min_full_name_length: int = 3
    max_comments_length: int = 300

    # Messages
    messages: MessageCatalog = PT_BR

    def __post_init__(self) -> None:
        if not self.date_formats:
            raise ConfigurationError("ValidatorPolicy.date_formats must name at least one format")
        for fmt in self.date_formats:
            if not isinstance(fmt, DateFormat):
                raise ConfigurationError(f"Unknown date format: {fmt!r}")
        if not self.tld_allow_list:
            raise ConfigurationError("ValidatorPolicy.tld_allow_list must not be empty")
        if self.min_full_name_length < 1:
            raise ConfigurationError("ValidatorPolicy.min_full_name_length must be at least 1")
        if self.max_comments_length < 0:
            raise ConfigurationError("ValidatorPolicy.max_comments_length must not be negative")
        if self.min_age_years < 0:
            raise ConfigurationError("ValidatorPolicy.min_age_years must not be negative")


STRICT_POLICY = ValidatorPolicy()

STANDARD_POLICY = ValidatorPolicy(
    date_formats=(DateFormat.ISO,),
    email_plausibility_check=False,
    typo_corrections=MappingProxyType({}),
    tld_allow_list=EXTENDED_TLDS,
    messages=ES,
)

POLICIES: Mapping[str, ValidatorPolicy] = MappingProxyType({
    "strict": STRICT_POLICY,
    "standard": STANDARD_POLICY,
})
