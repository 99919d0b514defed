"""Configuration package: pydantic settings and test-mode resolution."""

from .settings import DEFAULT_ENV_VAR, ContractSettings, is_test_mode

__all__ = [
    "DEFAULT_ENV_VAR",
    "ContractSettings",
    "is_test_mode",
]
