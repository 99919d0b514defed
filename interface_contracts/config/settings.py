"""
Pydantic settings model for interface_contracts.

The only environment input the package consumes is the test-mode signal: when
the configured environment variable names a test environment, bindings are
installed writable so test code can substitute stubs.

Example:
    >>> from interface_contracts.config import ContractSettings, is_test_mode
    >>>
    >>> settings = ContractSettings(environment="test")
    >>> is_test_mode(settings)
    True
"""

from __future__ import annotations

import os
from typing import Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..logging import get_logger

__all__ = [
    "DEFAULT_ENV_VAR",
    "ContractSettings",
    "is_test_mode",
]

DEFAULT_ENV_VAR = "INTERFACE_CONTRACTS_ENV"

logger = get_logger(__name__)


class ContractSettings(BaseModel):
    """Runtime settings for binding and logging behaviour.

    Attributes:
        environment: Name of the hosting environment (``"test"`` enables test mode)
        env_var: Environment variable consulted by :meth:`from_env`
        test_values: Environment names treated as test mode (case-insensitive)
        log_level: Level applied to the package logger by :meth:`apply_log_level`
    """

    environment: str = Field(
        default="production", description="Hosting environment name"
    )
    env_var: str = Field(
        default=DEFAULT_ENV_VAR,
        min_length=1,
        description="Environment variable carrying the environment name",
    )
    test_values: Tuple[str, ...] = Field(
        default=("test",),
        description="Environment names that enable writable bindings",
    )
    log_level: str = Field(default="WARNING", description="Package log level")

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    @field_validator("test_values")
    @classmethod
    def _normalize_test_values(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(value.strip().lower() for value in v)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        env_var: str = DEFAULT_ENV_VAR,
    ) -> "ContractSettings":
        """Build settings from the process environment (or ``environ``)."""
        source = os.environ if environ is None else environ
        data = {"env_var": env_var}
        value = source.get(env_var)
        if value is not None:
            data["environment"] = value
        log_level = source.get("INTERFACE_CONTRACTS_LOG_LEVEL")
        if log_level:
            data["log_level"] = log_level
        return cls(**data)

    @property
    def test_mode(self) -> bool:
        return self.environment.strip().lower() in self.test_values

    def apply_log_level(self) -> None:
        get_logger().setLevel(self.log_level)


def is_test_mode(settings: Optional[ContractSettings] = None) -> bool:
    """Return True when bindings should be installed writable.

    Without explicit settings the environment is read afresh on every call.
    A failure to read the signal means "not test mode" and is never raised.
    """
    try:
        if settings is None:
            settings = ContractSettings.from_env()
        return settings.test_mode
    except Exception as exc:
        logger.debug("Test-mode signal unreadable, assuming strict mode: %s", exc)
        return False
