"""Tests for Rules aggregation."""

from __future__ import annotations

import pytest

from fieldrules.builders.field import FieldRules
from fieldrules.builders.ruleset import Rules


class TestRules:
    def test_empty(self) -> None:
        rules = Rules()
        assert rules.to_dict() == {}
        assert len(rules) == 0

    def test_collects_fields(self) -> None:
        rules = Rules(
            FieldRules("age").required().integer(),
            FieldRules("name").string(),
        )
        assert rules.to_dict() == {"age": ["required", "integer"], "name": ["string"]}
        assert rules.fields == ["age", "name"]
        assert "age" in rules
        assert "email" not in rules
        assert list(rules) == ["age", "name"]

    def test_empty_field_rules_kept(self) -> None:
        assert Rules(FieldRules("notes")).to_dict() == {"notes": []}

    def test_last_write_wins(self) -> None:
        rules = Rules(FieldRules("a").required(), FieldRules("a").numeric())
        assert rules.to_dict() == {"a": ["numeric"]}

    def test_redefinition_keeps_first_position(self) -> None:
        rules = Rules(FieldRules("a"), FieldRules("b"), FieldRules("a").required())
        assert rules.fields == ["a", "b"]

    def test_snapshot_isolated_from_builder(self) -> None:
        builder = FieldRules("age").required()
        rules = Rules(builder)
        builder.numeric()
        assert rules.to_dict() == {"age": ["required"]}

    def test_to_dict_returns_fresh_copies(self) -> None:
        rules = Rules(FieldRules("age").required())
        first = rules.to_dict()
        first["age"].append("numeric")
        first["other"] = []
        assert rules.to_dict() == {"age": ["required"]}

    @pytest.mark.parametrize("bad", ["age", None, {"age": ["required"]}, object()])
    def test_rejects_non_field_rules(self, bad: object) -> None:
        with pytest.raises(TypeError, match="must be FieldRules"):
            Rules(FieldRules("ok"), bad)  # type: ignore[arg-type]

    def test_error_names_position(self) -> None:
        with pytest.raises(TypeError, match="Argument 1"):
            Rules(FieldRules("ok"), 5)  # type: ignore[arg-type]

    def test_repr(self) -> None:
        assert repr(Rules(FieldRules("a").required())) == "Rules({'a': ['required']})"
