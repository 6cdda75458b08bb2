"""Core module exports."""

from beanprobe.core.errors import (
    BeanProbeError,
    ConfigError,
    ErrorCode,
    InvalidArgumentError,
    NotFoundError,
)
from beanprobe.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "BeanProbeError",
    "ConfigError",
    "ErrorCode",
    "InvalidArgumentError",
    "NotFoundError",
    # Logging
    "configure_logging",
    "get_logger",
]
