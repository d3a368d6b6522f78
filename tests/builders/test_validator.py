"""Tests for the Validator facade."""

from __future__ import annotations

from fieldrules.builders.field import FieldRules
from fieldrules.builders.ruleset import Rules
from fieldrules.builders.validator import Validator
from fieldrules.config.models import RulesConfig


class TestValidator:
    def test_for_returns_empty_field_rules(self) -> None:
        rules = Validator.for_("name")
        assert isinstance(rules, FieldRules)
        assert rules.field == "name"
        assert rules.rules == ()

    def test_for_passes_config(self) -> None:
        cfg = RulesConfig(legacy_required_with=True)
        assert Validator.for_("x", config=cfg).required_with(["y"]).rules == ("required_withy",)

    def test_make_returns_rules(self) -> None:
        made = Validator.make(Validator.for_("a").required())
        assert isinstance(made, Rules)
        assert made.to_dict() == {"a": ["required"]}

    def test_email_constants(self) -> None:
        rules = Validator.for_("email").email([Validator.EMAIL_RFC, Validator.EMAIL_DNS])
        assert rules.rules == ("email:rfc,dns",)
        assert Validator.EMAIL_STRICT == "strict"
        assert Validator.EMAIL_SPOOF == "spoof"
        assert Validator.EMAIL_FILTER == "filter"
