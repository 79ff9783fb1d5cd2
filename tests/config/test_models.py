"""Tests for config models — defaults and sparse overrides."""

import pytest
from pydantic import ValidationError

from recurring.config.models import LoggingConfig, RecurringConfig


class TestLoggingConfig:
    def test_defaults(self) -> None:
        cfg = LoggingConfig()
        assert cfg.verbose is False
        assert cfg.log_json is False

    def test_frozen(self) -> None:
        cfg = LoggingConfig(verbose=True)
        with pytest.raises(ValidationError):
            cfg.verbose = False  # type: ignore[misc]


class TestRecurringConfig:
    def test_full_defaults(self) -> None:
        cfg = RecurringConfig()
        assert cfg.logging == LoggingConfig()

    def test_sparse_override(self) -> None:
        cfg = RecurringConfig.model_validate({"logging": {"log_json": True}})
        assert cfg.logging.log_json is True
        assert cfg.logging.verbose is False  # default preserved

    def test_rejects_bad_value(self) -> None:
        with pytest.raises(ValidationError):
            RecurringConfig.model_validate({"logging": {"verbose": "sometimes"}})
