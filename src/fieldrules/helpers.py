"""Convenience entry points.

``field`` starts a rule list, ``rules`` turns a set of them into the plain
mapping handed to the validation engine::

    rules(
        field("age").required().numeric().between(1, 10),
        field("name").required().string().max(255),
    )
    # {"age": ["required", "numeric", "between:1,10"],
    #  "name": ["required", "string", "max:255"]}
"""

from __future__ import annotations

from fieldrules.builders.field import FieldRules
from fieldrules.builders.validator import Validator
from fieldrules.config.models import RulesConfig


def rules(*fields: FieldRules, config: RulesConfig | None = None) -> dict[str, list[str]]:
    """Aggregate *fields* and return the ``{field: [token, ...]}`` mapping.

    Raises:
        TypeError: If any argument is not a :class:`FieldRules`.
    """
    return Validator.make(*fields, config=config).to_dict()


def field(name: str, *, config: RulesConfig | None = None) -> FieldRules:
    """Start an empty rule list for the field *name*."""
    return Validator.for_(name, config=config)
