"""beanprobe error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Lookup
- 4xxx: Argument
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2003

    # Lookup (3xxx)
    GETTER_NOT_FOUND = 3001
    SETTER_NOT_FOUND = 3002

    # Argument (4xxx)
    NOT_A_GETTER = 4001
    INVALID_ACCESSOR_SUFFIX = 4002
    EMPTY_PROPERTY_NAME = 4003
    NOT_A_CLASS = 4004


@dataclass(frozen=True, slots=True)
class BeanProbeError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'GETTER_NOT_FOUND')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class ConfigError(BeanProbeError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class NotFoundError(BeanProbeError):
    """A required accessor does not exist anywhere in the class hierarchy."""

    @classmethod
    def getter(cls, owner: type, property_name: str) -> "NotFoundError":
        return cls(
            code=ErrorCode.GETTER_NOT_FOUND,
            message=f"Getter not found (class: {_qualified_name(owner)}, "
            f"property: {property_name})",
            details={"class": _qualified_name(owner), "property": property_name},
        )

    @classmethod
    def setter(cls, owner: type, getter_name: str, setter_name: str) -> "NotFoundError":
        return cls(
            code=ErrorCode.SETTER_NOT_FOUND,
            message=f"Can not find corresponding setter for getter '{getter_name}' "
            f"(class: {_qualified_name(owner)}, expected: {setter_name})",
            details={
                "class": _qualified_name(owner),
                "getter": getter_name,
                "setter": setter_name,
            },
        )


class InvalidArgumentError(BeanProbeError):
    """An argument violates the accessor naming contract."""

    @classmethod
    def not_a_getter(cls, owner: type, method_name: str) -> "InvalidArgumentError":
        return cls(
            code=ErrorCode.NOT_A_GETTER,
            message=f"Not recognized getter method (class: {_qualified_name(owner)}, "
            f"method: {method_name})",
            details={"class": _qualified_name(owner), "method": method_name},
        )

    @classmethod
    def invalid_suffix(cls, suffix: str, reason: str) -> "InvalidArgumentError":
        return cls(
            code=ErrorCode.INVALID_ACCESSOR_SUFFIX,
            message=f"Invalid accessor suffix '{suffix}': {reason}",
            details={"suffix": suffix, "reason": reason},
        )

    @classmethod
    def empty_name(cls, what: str) -> "InvalidArgumentError":
        return cls(
            code=ErrorCode.EMPTY_PROPERTY_NAME,
            message=f"{what} must not be empty",
            details={"argument": what},
        )

    @classmethod
    def not_a_class(cls, value: Any) -> "InvalidArgumentError":
        return cls(
            code=ErrorCode.NOT_A_CLASS,
            message=f"Expected a class, got {type(value).__name__}: {value!r}",
            details={"value": repr(value)},
        )
