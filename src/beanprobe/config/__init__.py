"""Config module exports."""

from beanprobe.config.loader import load_config
from beanprobe.config.models import (
    BeanProbeConfig,
    ConventionsConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "BeanProbeConfig",
    "ConventionsConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
