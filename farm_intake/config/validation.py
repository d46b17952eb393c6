"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from .defaults import AppConfig, Location, UserType

BOOLEAN_FIELDS = (
    "special_permission",
    "is_weekend",
    "is_active_user",
    "is_high_priority",
)

ENUM_FIELDS: dict[str, type[Enum]] = {
    "user_type": UserType,
    "location": Location,
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def coerce_enum(enum_cls: type[Enum], value: Any) -> Enum:
    """Resolve an enum member from a member, its name or its value (case-insensitive)."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip()
        for member in enum_cls:
            if key.upper() == member.name or key.lower() == member.value:
                return member
    raise ValueError(f"{value!r} is not a valid {enum_cls.__name__}")


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate a flat mapping of AppConfig field values."""
        errors = []
        known = {f.name for f in fields(AppConfig)}

        for key in config:
            if key not in known:
                errors.append(ValidationError(
                    field=key,
                    message="Unknown configuration field",
                    value=config[key]
                ))

        for name in BOOLEAN_FIELDS:
            if name in config and not isinstance(config[name], bool):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a boolean",
                    value=config[name]
                ))

        for name, enum_cls in ENUM_FIELDS.items():
            if name not in config:
                continue
            try:
                coerce_enum(enum_cls, config[name])
            except ValueError:
                choices = ", ".join(m.name for m in enum_cls)
                errors.append(ValidationError(
                    field=name,
                    message=f"Must be one of: {choices}",
                    value=config[name]
                ))

        return errors
