"""Tests for shared error classes."""
from __future__ import annotations

import pytest

from src.shared.errors import AppError, ConfigurationError


class TestAppError:
    def test_detail(self):
        err = AppError(detail="something broke")
        assert err.detail == "something broke"

    def test_str_is_detail(self):
        assert str(AppError(detail="human readable")) == "human readable"

    def test_inherits_from_exception(self):
        assert isinstance(AppError(detail="test"), Exception)


class TestConfigurationError:
    def test_default_detail(self):
        assert ConfigurationError().detail == "Configuration error"

    def test_custom_detail(self):
        err = ConfigurationError(detail="Requirements must be a mapping")
        assert err.detail == "Requirements must be a mapping"

    def test_inherits_from_app_error(self):
        assert issubclass(ConfigurationError, AppError)

    def test_catchable_as_app_error(self):
        with pytest.raises(AppError):
            raise ConfigurationError()
