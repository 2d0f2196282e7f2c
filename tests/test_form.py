"""Tests for regform.form — FormValidator and the module-level variant."""

import logging
import threading
from dataclasses import replace
from datetime import date

import pytest

from regform.config import STANDARD_POLICY, STRICT_POLICY
from regform.errors import ConfigurationError
from regform.form import FormValidator, is_form_valid, normalize_full_name, validate_form
from regform.messages import ES, ErrorCode

COUNTRIES = [
    "Brasil",
    "Argentina",
    "Chile",
    "México",
    "Estados Unidos",
    "Canadá",
    "Espanha",
    "Portugal",
]

TODAY = date(2024, 6, 15)


def minimal_valid_data() -> dict[str, object]:
    return {
        "fullName": "João da Silva",
        "email": "valid@example.com",
        "birthDate": "1990-01-01",
        "country": "Brasil",
    }


@pytest.fixture
def validator() -> FormValidator:
    return FormValidator(COUNTRIES, clock=lambda: TODAY)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_empty_list(self) -> None:
        with pytest.raises(ConfigurationError, match="must not be empty"):
            FormValidator([])

    def test_none(self) -> None:
        with pytest.raises(ConfigurationError, match="must not be empty"):
            FormValidator(None)  # type: ignore[arg-type]

    def test_bare_string(self) -> None:
        with pytest.raises(ConfigurationError):
            FormValidator("Brasil")

    def test_set(self) -> None:
        with pytest.raises(ConfigurationError):
            FormValidator({"Brasil"})  # type: ignore[arg-type]

    def test_non_string_entry(self) -> None:
        with pytest.raises(ConfigurationError, match="must be strings"):
            FormValidator(["Brasil", 7])  # type: ignore[list-item]

    def test_tuple_accepted(self) -> None:
        assert FormValidator(("Brasil",)).countries == ("Brasil",)

    def test_countries_copied(self) -> None:
        source = ["Brasil"]
        v = FormValidator(source)
        source.append("Chile")
        assert v.countries == ("Brasil",)

    def test_default_policy(self) -> None:
        assert FormValidator(COUNTRIES).policy is STRICT_POLICY


# ---------------------------------------------------------------------------
# Per-field messages through the validator
# ---------------------------------------------------------------------------


class TestFullNameMessages:
    def test_valid_with_accents(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "fullName": "João da Silva Costa e Souza"})
        assert result.is_valid
        assert "fullName" not in result.errors

    def test_numbers(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "fullName": "João 123 Silva"})
        assert not result.is_valid
        assert result.errors["fullName"] == (
            "Nome completo contém caracteres inválidos. "
            "Use apenas letras, acentos, hífens, apóstrofos e espaços."
        )

    def test_normalizes_spaces(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "fullName": "  João    da   Silva  "})
        assert result.is_valid
        assert result.data["fullName"] == "João da Silva"

    def test_too_short(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "fullName": "Jo"})
        assert "mínimo 3 caracteres" in result.errors["fullName"]

    def test_no_surname(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "fullName": "João"})
        assert result.errors["fullName"] == "Nome completo deve conter pelo menos nome e sobrenome."

    def test_no_letters(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "fullName": " - ' - "})
        assert result.errors["fullName"] == "Nome deve conter ao menos uma letra válida."

    def test_not_text(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "fullName": 123})
        assert result.errors["fullName"] == "Nome completo deve ser uma string."


class TestEmailMessages:
    @pytest.mark.parametrize(
        "address",
        ["user@gmail.com", "user@hotmail.com", "user@uol.com.br", "test@protonmail.com"],
    )
    def test_valid(self, validator: FormValidator, address: str) -> None:
        assert validator.validate({**minimal_valid_data(), "email": address}).is_valid

    def test_typo(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "email": "user@gmail.con"})
        assert result.errors["email"] == 'Domínio "gmail.con" parece incorreto. Você quis dizer: gmail.com?'
        assert result.codes["email"] is ErrorCode.EMAIL_TYPO

    def test_invalid_tld(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "email": "user@example.c0m"})
        assert result.errors["email"] == "Domínio de email inválido ou TLD não reconhecido."

    def test_bad_format(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "email": "not-an-email"})
        assert result.errors["email"] == "Formato de email inválido."

    def test_empty(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "email": ""})
        assert result.errors["email"] == "Email é obrigatório."

    def test_unknown_provider(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "email": "user@mail.example.com"})
        assert result.errors["email"] == "Domínio de email não reconhecido ou inválido. Use um provedor real."

    def test_plausibility_can_be_disabled(self) -> None:
        v = FormValidator(COUNTRIES, replace(STRICT_POLICY, email_plausibility_check=False), clock=lambda: TODAY)
        assert v.validate({**minimal_valid_data(), "email": "user@mail.example.com"}).is_valid


class TestBirthDateMessages:
    def test_eighteen_years_and_a_day(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "birthDate": "2006-06-14"})
        assert result.is_valid
        assert result.data["birthDate"] == date(2006, 6, 14)

    def test_slash_format(self, validator: FormValidator) -> None:
        assert validator.validate({**minimal_valid_data(), "birthDate": "15/05/1990"}).is_valid

    def test_future(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "birthDate": date(2024, 6, 16)})
        assert "pelo menos 18 anos" in result.errors["birthDate"]

    def test_seventeen(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "birthDate": date(2007, 6, 15)})
        assert "pelo menos 18 anos" in result.errors["birthDate"]

    def test_invalid_string(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "birthDate": "invalid-date"})
        assert result.errors["birthDate"] == "Data de nascimento inválida ou em formato não suportado."

    def test_too_old(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "birthDate": "1800-01-01"})
        assert result.errors["birthDate"] == "Data de nascimento muito antiga (antes de 1900)."


class TestCountryMessages:
    def test_valid(self, validator: FormValidator) -> None:
        assert validator.validate({**minimal_valid_data(), "country": "Brasil"}).is_valid

    def test_surrounding_spaces(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "country": "  Brasil  "})
        assert result.is_valid
        assert result.data["country"] == "Brasil"

    def test_not_allowed(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "country": "França"})
        assert result.errors["country"] == "País não permitido ou inválido."

    def test_empty(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "country": ""})
        assert result.errors["country"] == "País é obrigatório."


class TestCommentsMessages:
    def test_at_limit(self, validator: FormValidator) -> None:
        assert validator.validate({**minimal_valid_data(), "comments": "a" * 300}).is_valid

    def test_over_limit(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "comments": "a" * 301})
        assert result.errors["comments"] == "Comentários não podem exceder 300 caracteres."

    def test_absent(self, validator: FormValidator) -> None:
        assert validator.validate(minimal_valid_data()).is_valid

    def test_not_text(self, validator: FormValidator) -> None:
        result = validator.validate({**minimal_valid_data(), "comments": 12345})
        assert result.errors["comments"] == "Comentários devem ser texto."


# ---------------------------------------------------------------------------
# Whole-form behaviour
# ---------------------------------------------------------------------------


class TestWholeForm:
    def test_fully_valid(self, validator: FormValidator) -> None:
        result = validator.validate({
            "fullName": "Maria José da Silva",
            "email": "maria.jose@example.com",
            "birthDate": "1985-03-22",
            "country": "Brasil",
            "comments": "Ótimo serviço, recomendo!",
        })
        assert result.is_valid
        assert result.errors == {}
        assert result.codes == {}

    def test_fully_valid_real_clock(self) -> None:
        result = FormValidator(COUNTRIES).validate({
            "fullName": "Maria José da Silva",
            "email": "maria.jose@example.com",
            "birthDate": "1985-03-22",
            "country": "Brasil",
        })
        assert result
        assert result.errors == {}

    def test_accumulates_errors(self) -> None:
        result = FormValidator(COUNTRIES).validate({
            "fullName": "Jo",
            "email": "invalid-email",
            "birthDate": "2020-01-01",
            "country": "",
        })
        assert not result
        assert set(result.errors) == {"fullName", "email", "birthDate", "country"}

    def test_empty_record(self, validator: FormValidator) -> None:
        result = validator.validate({})
        assert set(result.codes) == {"fullName", "email", "birthDate", "country"}
        assert all(code is ErrorCode.REQUIRED for code in result.codes.values())

    def test_errors_and_codes_share_keys(self, validator: FormValidator) -> None:
        result = validator.validate({"fullName": 1, "email": "x", "birthDate": "y", "country": "z"})
        assert result.errors.keys() == result.codes.keys()

    def test_idempotent(self, validator: FormValidator) -> None:
        data = {**minimal_valid_data(), "email": "user@gmail.con"}
        assert validator.validate(data) == validator.validate(data)

    def test_input_not_mutated(self, validator: FormValidator) -> None:
        data = {**minimal_valid_data(), "fullName": "  João   da Silva "}
        validator.validate(data)
        assert data["fullName"] == "  João   da Silva "

    def test_is_valid_shortcut(self, validator: FormValidator) -> None:
        assert validator.is_valid(minimal_valid_data())
        assert not validator.is_valid({})

    def test_failure_logged_without_values(
        self, validator: FormValidator, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="regform.validation"):
            validator.validate({**minimal_valid_data(), "email": "secret@gmail.con"})
        assert "email=email_typo" in caplog.text
        assert "secret" not in caplog.text

    def test_concurrent_use(self, validator: FormValidator) -> None:
        results = []

        def work() -> None:
            for _ in range(50):
                results.append(validator.validate(minimal_valid_data()).is_valid)

        threads = [threading.Thread(target=work) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(results) == 200
        assert all(results)

    def test_custom_messages(self) -> None:
        v = FormValidator(COUNTRIES, replace(STRICT_POLICY, messages=ES))
        result = v.validate({**minimal_valid_data(), "email": ""})
        assert result.errors["email"] == "El correo electrónico es obligatorio."


# ---------------------------------------------------------------------------
# Module-level variant
# ---------------------------------------------------------------------------

VALID_DATA = {
    "fullName": "Juan Pérez",
    "email": "juan@example.com",
    "birthDate": "1990-01-01",
    "country": "México",
    "comments": "Todo bien, gracias.",
}


class TestValidateForm:
    def test_valid(self) -> None:
        assert validate_form(VALID_DATA) == {}
        assert is_form_valid(VALID_DATA)

    def test_multiple_spaces_accepted(self) -> None:
        assert "fullName" not in validate_form({**VALID_DATA, "fullName": "Jose     da     Silva"})

    def test_only_spaces(self) -> None:
        assert "fullName" in validate_form({**VALID_DATA, "fullName": "   "})

    def test_single_padded_name(self) -> None:
        assert "fullName" in validate_form({**VALID_DATA, "fullName": "   Juan   "})

    def test_hyphens_and_apostrophes(self) -> None:
        assert "fullName" not in validate_form({**VALID_DATA, "fullName": "Mary-Jane O'Connor"})

    def test_numbers_in_name(self) -> None:
        assert "fullName" in validate_form({**VALID_DATA, "fullName": "Juan 123 Pérez"})

    @pytest.mark.parametrize(
        "address",
        ["test@gmail", "test@gmail.con", "test@gmail.a", "test@gmail.123"],
    )
    def test_rejected_emails(self, address: str) -> None:
        assert "email" in validate_form({**VALID_DATA, "email": address})

    @pytest.mark.parametrize(
        "address",
        ["test@gmail.com", "test@empresa.mx", "test@mail.google.com"],
    )
    def test_accepted_emails(self, address: str) -> None:
        assert "email" not in validate_form({**VALID_DATA, "email": address})

    def test_spanish_messages(self) -> None:
        errors = validate_form({**VALID_DATA, "email": ""})
        assert errors["email"] == "El correo electrónico es obligatorio."

    def test_builtin_country_list(self) -> None:
        errors = validate_form({**VALID_DATA, "country": "Brazil"})
        assert errors["country"] == "Selecciona un país válido de la lista."

    def test_slash_dates_rejected(self) -> None:
        assert "birthDate" in validate_form({**VALID_DATA, "birthDate": "15/05/1990"})

    def test_comments_limit(self) -> None:
        errors = validate_form({**VALID_DATA, "comments": "x" * 301})
        assert errors["comments"] == "Los comentarios no pueden exceder los 300 caracteres."

    def test_underage(self) -> None:
        errors = validate_form({**VALID_DATA, "birthDate": date.today().isoformat()})
        assert errors["birthDate"] == "Debes tener al menos 18 años para registrarte."


class TestNormalizeReExport:
    def test_normalize(self) -> None:
        assert normalize_full_name("  Ana   Maria ") == "Ana Maria"

    def test_standard_policy_exposed(self) -> None:
        assert STANDARD_POLICY.messages is ES
