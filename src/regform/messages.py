"""Error codes and the message catalogs that turn them into text.

Rules never produce text themselves. They report an ``ErrorCode`` plus
the parameters the message needs; a ``MessageCatalog`` renders the
final string for a field. Two catalogs ship with regform:

- ``PT_BR``: Portuguese wording, used by ``STRICT_POLICY``
- ``ES``: Spanish wording, used by ``STANDARD_POLICY``

A catalog can carry per-field overrides, so ``REQUIRED`` reads
"Email é obrigatório." for the email field and "País é obrigatório."
for the country field.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class ErrorCode(Enum):
    """Machine-readable reason a field failed validation."""

    REQUIRED = "required"
    NOT_TEXT = "not_text"
    NAME_TOO_SHORT = "name_too_short"
    NAME_NEEDS_SURNAME = "name_needs_surname"
    NAME_INVALID_CHARS = "name_invalid_chars"
    NAME_NO_LETTERS = "name_no_letters"
    EMAIL_INVALID_FORMAT = "email_invalid_format"
    EMAIL_TYPO = "email_typo"
    EMAIL_INVALID_TLD = "email_invalid_tld"
    EMAIL_UNKNOWN_PROVIDER = "email_unknown_provider"
    DATE_INVALID = "date_invalid"
    DATE_UNDERAGE = "date_underage"
    DATE_TOO_OLD = "date_too_old"
    COUNTRY_NOT_ALLOWED = "country_not_allowed"
    COMMENTS_TOO_LONG = "comments_too_long"
    TASK_TEXT_REQUIRED = "task_text_required"


@dataclass(frozen=True, slots=True)
class MessageCatalog:
    """Message templates for one locale.

    ``templates`` maps every ``ErrorCode`` to a ``str.format`` template.
    ``overrides`` maps ``(field, code)`` pairs to a field-specific
    template that wins over the generic one.
    """

    locale: str
    templates: Mapping[ErrorCode, str]
    overrides: Mapping[tuple[str, ErrorCode], str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def render(self, field_name: str, code: ErrorCode, params: Mapping[str, Any] | None = None) -> str:
        """Return the message for *code* on *field_name*."""
        template = self.overrides.get((field_name, code))
        if template is None:
            template = self.templates[code]
        if params:
            return template.format(**params)
        return template


# ---------------------------------------------------------------------------
# Portuguese
# ---------------------------------------------------------------------------

PT_BR = MessageCatalog(
    locale="pt-BR",
    templates=MappingProxyType({
        ErrorCode.REQUIRED: "Campo obrigatório.",
        ErrorCode.NOT_TEXT: "Valor deve ser texto.",
        ErrorCode.NAME_TOO_SHORT: (
            "Nome completo deve ter no mínimo {min_length} caracteres após normalização."
        ),
        ErrorCode.NAME_NEEDS_SURNAME: "Nome completo deve conter pelo menos nome e sobrenome.",
        ErrorCode.NAME_INVALID_CHARS: (
            "Nome completo contém caracteres inválidos. "
            "Use apenas letras, acentos, hífens, apóstrofos e espaços."
        ),
        ErrorCode.NAME_NO_LETTERS: "Nome deve conter ao menos uma letra válida.",
        ErrorCode.EMAIL_INVALID_FORMAT: "Formato de email inválido.",
        ErrorCode.EMAIL_TYPO: 'Domínio "{domain}" parece incorreto. Você quis dizer: {suggestion}?',
        ErrorCode.EMAIL_INVALID_TLD: "Domínio de email inválido ou TLD não reconhecido.",
        ErrorCode.EMAIL_UNKNOWN_PROVIDER: (
            "Domínio de email não reconhecido ou inválido. Use um provedor real."
        ),
        ErrorCode.DATE_INVALID: "Data de nascimento inválida ou em formato não suportado.",
        ErrorCode.DATE_UNDERAGE: "Você deve ter pelo menos {min_age} anos de idade.",
        ErrorCode.DATE_TOO_OLD: "Data de nascimento muito antiga (antes de {min_year}).",
        ErrorCode.COUNTRY_NOT_ALLOWED: "País não permitido ou inválido.",
        ErrorCode.COMMENTS_TOO_LONG: "Comentários não podem exceder {max_length} caracteres.",
        ErrorCode.TASK_TEXT_REQUIRED: "A tarefa não pode estar vazia.",
    }),
    overrides=MappingProxyType({
        ("fullName", ErrorCode.REQUIRED): "Nome completo é obrigatório.",
        ("fullName", ErrorCode.NOT_TEXT): "Nome completo deve ser uma string.",
        ("email", ErrorCode.REQUIRED): "Email é obrigatório.",
        ("email", ErrorCode.NOT_TEXT): "Email deve ser uma string.",
        ("birthDate", ErrorCode.REQUIRED): "Data de nascimento é obrigatória.",
        ("country", ErrorCode.REQUIRED): "País é obrigatório.",
        ("country", ErrorCode.NOT_TEXT): "País deve ser uma string.",
        ("comments", ErrorCode.NOT_TEXT): "Comentários devem ser texto.",
    }),
)


# ---------------------------------------------------------------------------
# Spanish
# ---------------------------------------------------------------------------

ES = MessageCatalog(
    locale="es",
    templates=MappingProxyType({
        ErrorCode.REQUIRED: "Este campo es obligatorio.",
        ErrorCode.NOT_TEXT: "El valor debe ser texto.",
        ErrorCode.NAME_TOO_SHORT: "El nombre completo debe tener al menos {min_length} caracteres.",
        ErrorCode.NAME_NEEDS_SURNAME: "El nombre completo debe incluir nombre y apellido.",
        ErrorCode.NAME_INVALID_CHARS: (
            "El nombre completo solo puede contener letras, acentos, guiones, "
            "apóstrofes y espacios."
        ),
        ErrorCode.NAME_NO_LETTERS: "El nombre completo debe contener al menos una letra.",
        ErrorCode.EMAIL_INVALID_FORMAT: "El correo electrónico no tiene un formato válido.",
        ErrorCode.EMAIL_TYPO: 'El dominio "{domain}" parece incorrecto. ¿Quisiste decir {suggestion}?',
        ErrorCode.EMAIL_INVALID_TLD: (
            "El dominio del correo electrónico no es válido. "
            "Debe tener un TLD válido (ej: .com, .mx, .org)."
        ),
        ErrorCode.EMAIL_UNKNOWN_PROVIDER: (
            "El dominio del correo electrónico no es reconocido. Usa un proveedor real."
        ),
        ErrorCode.DATE_INVALID: "La fecha de nacimiento no es una fecha válida.",
        ErrorCode.DATE_UNDERAGE: "Debes tener al menos {min_age} años para registrarte.",
        ErrorCode.DATE_TOO_OLD: "La fecha de nacimiento es demasiado antigua (antes de {min_year}).",
        ErrorCode.COUNTRY_NOT_ALLOWED: "Selecciona un país válido de la lista.",
        ErrorCode.COMMENTS_TOO_LONG: "Los comentarios no pueden exceder los {max_length} caracteres.",
        ErrorCode.TASK_TEXT_REQUIRED: "Por favor, escribe una tarea para agregar",
    }),
    overrides=MappingProxyType({
        ("fullName", ErrorCode.REQUIRED): "El nombre completo es obligatorio.",
        ("fullName", ErrorCode.NOT_TEXT): "El nombre completo debe ser texto.",
        ("email", ErrorCode.REQUIRED): "El correo electrónico es obligatorio.",
        ("email", ErrorCode.NOT_TEXT): "El correo electrónico debe ser texto.",
        ("birthDate", ErrorCode.REQUIRED): "La fecha de nacimiento es obligatoria.",
        ("country", ErrorCode.REQUIRED): "Selecciona un país válido de la lista.",
        ("country", ErrorCode.NOT_TEXT): "El país debe ser texto.",
        ("comments", ErrorCode.NOT_TEXT): "Los comentarios deben ser texto.",
    }),
)

CATALOGS: Mapping[str, MessageCatalog] = MappingProxyType({
    PT_BR.locale: PT_BR,
    ES.locale: ES,
})
