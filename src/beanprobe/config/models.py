"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (BEANPROBE__SECTION__KEY)
3. Explicit YAML file passed to load_config()
4. Global YAML (~/.config/beanprobe/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    BEANPROBE__<SECTION>__<KEY>=<VALUE>

Examples:
    BEANPROBE__LOGGING__LEVEL=DEBUG
    BEANPROBE__CONVENTIONS__REQUIRE_GETTER_RETURN=true
    BEANPROBE__CONVENTIONS__GETTER_PREFIXES='["get", "is", "has"]'
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        BEANPROBE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG traces every accessor resolution.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ConventionsConfig(BaseModel):
    """Accessor naming conventions.

    Env vars:
        BEANPROBE__CONVENTIONS__GETTER_PREFIXES: JSON list, lookup order
        BEANPROBE__CONVENTIONS__SETTER_PREFIX: Setter name prefix
        BEANPROBE__CONVENTIONS__REQUIRE_GETTER_RETURN: Reject getters returning None
    """

    model_config = ConfigDict(frozen=True)

    getter_prefixes: tuple[str, ...] = Field(
        default=("get", "is"),
        description="Getter name prefixes. Earlier prefixes win when looking up a getter "
        "and when stripping a getter name back to its property name.",
    )
    setter_prefix: str = Field(
        default="set",
        description="Setter name prefix.",
    )
    require_getter_return: bool = Field(
        default=False,
        description="Reject getters whose declared return type is None. "
        "Unannotated getters are still accepted.",
    )

    @field_validator("getter_prefixes")
    @classmethod
    def validate_getter_prefixes(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("At least one getter prefix is required")
        for prefix in v:
            if not prefix.isidentifier():
                raise ValueError(f"Getter prefix must be an identifier: {prefix!r}")
        if len(set(v)) != len(v):
            raise ValueError(f"Getter prefixes must be unique: {list(v)}")
        return v

    @field_validator("setter_prefix")
    @classmethod
    def validate_setter_prefix(cls, v: str) -> str:
        if not v.isidentifier():
            raise ValueError(f"Setter prefix must be an identifier: {v!r}")
        return v


class BeanProbeConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    conventions: ConventionsConfig = Field(default_factory=ConventionsConfig)
