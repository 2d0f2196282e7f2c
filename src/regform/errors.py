"""regform exception hierarchy.

Validation failures are never raised; they come back as data in a
``ValidationResult``. These exceptions cover programmer errors only:
a validator built with a bad country whitelist or policy, or a task
list used with an unknown id.
"""


class RegformError(Exception):
    """Base for all regform-specific errors."""


class ConfigurationError(RegformError):
    """Raised when a validator or policy is misconfigured.

    Detected at construction time, never during ``validate()``.
    """


class TaskError(RegformError):
    """Raised when a task list operation cannot be applied."""
