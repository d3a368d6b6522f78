"""fieldrules: fluent builder for declarative validation rule strings."""

from __future__ import annotations

from fieldrules.builders.field import FieldRules
from fieldrules.builders.ruleset import Rules
from fieldrules.builders.validator import Validator
from fieldrules.domain.types import EmailValidation
from fieldrules.helpers import field, rules

__version__ = "0.1.0"

__all__ = [
    "EmailValidation",
    "FieldRules",
    "Rules",
    "Validator",
    "field",
    "rules",
]
