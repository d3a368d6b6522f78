"""Tests for config models: defaults and overrides."""

import pytest
from pydantic import ValidationError

from fieldrules.config.models import RulesConfig


class TestRulesConfig:
    def test_defaults(self) -> None:
        cfg = RulesConfig()
        assert cfg.legacy_required_with is False
        assert cfg.log_redefinitions is True

    def test_override(self) -> None:
        cfg = RulesConfig.model_validate({"legacy_required_with": True})
        assert cfg.legacy_required_with is True
        assert cfg.log_redefinitions is True  # default preserved

    def test_frozen(self) -> None:
        cfg = RulesConfig()
        with pytest.raises(ValidationError):
            cfg.legacy_required_with = True  # type: ignore[misc]
