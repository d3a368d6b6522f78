"""Validator: static facade over the rule builders."""

from __future__ import annotations

from fieldrules.builders.field import FieldRules
from fieldrules.builders.ruleset import Rules
from fieldrules.config.models import RulesConfig
from fieldrules.domain.types import EmailValidation


class Validator:
    """Namespace for building rules without naming the builder classes."""

    EMAIL_RFC = EmailValidation.RFC
    EMAIL_STRICT = EmailValidation.STRICT
    EMAIL_DNS = EmailValidation.DNS
    EMAIL_SPOOF = EmailValidation.SPOOF
    EMAIL_FILTER = EmailValidation.FILTER

    @staticmethod
    def make(*fields: FieldRules, config: RulesConfig | None = None) -> Rules:
        """Aggregate *fields* into a :class:`Rules`."""
        return Rules(*fields, config=config)

    @staticmethod
    def for_(name: str, *, config: RulesConfig | None = None) -> FieldRules:
        """Start an empty :class:`FieldRules` for *name*."""
        return FieldRules(name, config=config)
