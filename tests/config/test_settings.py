"""Tests for the pydantic settings model and test-mode resolution."""

import logging

import pytest
from pydantic import ValidationError

from interface_contracts.config import DEFAULT_ENV_VAR, ContractSettings, is_test_mode
from interface_contracts.core.registry import BindingMode, resolve_binding_mode


class TestContractSettings:
    def test_defaults(self):
        settings = ContractSettings()

        assert settings.environment == "production"
        assert settings.env_var == DEFAULT_ENV_VAR
        assert settings.test_values == ("test",)
        assert settings.log_level == "WARNING"
        assert settings.test_mode is False

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            ContractSettings(unknown=True)

    def test_validates_log_level_on_assignment(self):
        settings = ContractSettings(log_level="debug")
        assert settings.log_level == "DEBUG"

        with pytest.raises(ValidationError):
            settings.log_level = "LOUD"

    def test_test_values_are_case_insensitive(self):
        settings = ContractSettings(environment=" Testing ", test_values=("TESTING",))
        assert settings.test_mode is True

    def test_from_explicit_mapping(self):
        settings = ContractSettings.from_env(
            {DEFAULT_ENV_VAR: "test", "INTERFACE_CONTRACTS_LOG_LEVEL": "info"}
        )

        assert settings.environment == "test"
        assert settings.log_level == "INFO"
        assert settings.test_mode

    def test_from_env_with_custom_variable(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "test")

        settings = ContractSettings.from_env(env_var="APP_ENV")

        assert settings.env_var == "APP_ENV"
        assert settings.test_mode

    def test_missing_variable_keeps_default(self):
        assert ContractSettings.from_env({}).environment == "production"

    def test_apply_log_level(self):
        package_logger = logging.getLogger("interface_contracts")
        previous = package_logger.level
        try:
            ContractSettings(log_level="ERROR").apply_log_level()
            assert package_logger.level == logging.ERROR
        finally:
            package_logger.setLevel(previous)


class TestIsTestMode:
    def test_reads_process_environment(self, monkeypatch):
        assert is_test_mode() is False
        monkeypatch.setenv(DEFAULT_ENV_VAR, "test")
        assert is_test_mode() is True

    def test_explicit_settings_skip_environment(self, testing_environment):
        assert is_test_mode(ContractSettings(environment="production")) is False

    def test_unreadable_signal_means_strict(self, monkeypatch, caplog):
        def _broken(cls, *args, **kwargs):
            raise OSError("no environment")

        monkeypatch.setattr(ContractSettings, "from_env", classmethod(_broken))
        caplog.set_level(logging.DEBUG, logger="interface_contracts")

        assert is_test_mode() is False
        assert "assuming strict mode" in caplog.text


class TestResolveBindingMode:
    def test_explicit_mode_is_returned(self, testing_environment):
        assert resolve_binding_mode(BindingMode.STRICT) is BindingMode.STRICT
        assert resolve_binding_mode("test") is BindingMode.TEST

    def test_environment_is_consulted_when_omitted(self, monkeypatch):
        assert resolve_binding_mode() is BindingMode.STRICT
        monkeypatch.setenv(DEFAULT_ENV_VAR, "test")
        assert resolve_binding_mode() is BindingMode.TEST
