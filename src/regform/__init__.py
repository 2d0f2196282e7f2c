"""regform — registration form validation and task lists.

Basic usage::

    from regform import FormValidator

    validator = FormValidator(["Brasil", "Argentina", "Chile"])
    result = validator.validate({
        "fullName": "João   da Silva",
        "email": "joao@gmail.com",
        "birthDate": "15/05/1990",
        "country": "Brasil",
    })
    if not result:
        print(result.errors)
    result.data["fullName"]  # "João da Silva"

No setup (Spanish messages, built-in country list)::

    from regform import validate_form, is_form_valid

    errors = validate_form(record)
"""

__version__ = "0.1.0"
__all__ = [
    "STANDARD_POLICY",
    "STRICT_POLICY",
    "ConfigurationError",
    "DateFormat",
    "ErrorCode",
    "FormValidator",
    "RegformError",
    "Task",
    "TaskError",
    "TaskList",
    "ValidationResult",
    "ValidatorPolicy",
    "is_form_valid",
    "normalize_full_name",
    "validate_form",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import regform`` fast while providing a clean top-level API.
    """
    if name in ("FormValidator", "validate_form", "is_form_valid", "normalize_full_name"):
        from regform import form as _form

        return getattr(_form, name)

    if name in ("ValidatorPolicy", "DateFormat", "STRICT_POLICY", "STANDARD_POLICY"):
        from regform import config as _config

        return getattr(_config, name)

    if name in ("RegformError", "ConfigurationError", "TaskError"):
        from regform import errors as _errors

        return getattr(_errors, name)

    if name == "ErrorCode":
        from regform.messages import ErrorCode

        return ErrorCode

    if name == "ValidationResult":
        from regform.validation.result import ValidationResult

        return ValidationResult

    if name in ("Task", "TaskList"):
        from regform import tasks as _tasks

        return getattr(_tasks, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
