"""Exceptions raised by story configuration mutators and the request builder."""

from ..models.enums import FieldKind, ValidationFailure


class ConfigurationError(ValueError):
    """Base class for rejected configuration changes."""


class InvalidEnumValue(ConfigurationError):
    """A value outside the field's catalog was offered."""

    def __init__(self, field: FieldKind, value: object):
        self.field = field
        self.value = value
        super().__init__(f"{value!r} is not a valid {field.value} value")


class UnknownSkill(ConfigurationError):
    """A skill flag name outside the fixed set was used."""

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Unknown skill: {name!r}")


class InvalidFlagValue(ConfigurationError):
    """A skill flag was given something other than True or False."""

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(f"Skill {name!r} needs True or False, got {value!r}")


class ConflictsWithPrimary(ConfigurationError):
    """The current primary competence cannot also be secondary."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"{value!r} is already the primary competence")


class FieldNotAvailable(ConfigurationError):
    """The field does not exist in the active form variant."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"{field_name} is only available in the character-driven form")


class RequestValidationError(ConfigurationError):
    """A configuration is not complete enough to submit."""

    def __init__(self, failures: tuple[ValidationFailure, ...]):
        self.failures = failures
        super().__init__("; ".join(failure.message for failure in failures))
