"""Rules: write-once aggregation of FieldRules into one mapping.

INVARIANT: every key is the ``field`` of a FieldRules given at construction.
When two share a field name the later one wins; tokens are never merged.
Token lists are snapshotted at construction, so later calls on a
FieldRules do not leak into an existing Rules.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from fieldrules.builders.field import FieldRules
from fieldrules.config.models import RulesConfig

logger = logging.getLogger(__name__)


class Rules:
    """Field name to rule-token mapping, consumable by the validation engine.

    Usage::

        Rules(
            FieldRules("age").required().integer(),
            FieldRules("email").required().email(["rfc", "dns"]),
        ).to_dict()
    """

    __slots__ = ("_rules",)

    def __init__(self, *fields: FieldRules, config: RulesConfig | None = None) -> None:
        cfg = config if config is not None else RulesConfig()
        collected: dict[str, tuple[str, ...]] = {}
        for position, item in enumerate(fields):
            if not isinstance(item, FieldRules):
                msg = f"Argument {position} must be FieldRules, got {type(item).__name__}"
                raise TypeError(msg)
            if cfg.log_redefinitions and item.field in collected:
                logger.debug(
                    "Field %s redefined; replacing %d rule(s) with %d",
                    item.field,
                    len(collected[item.field]),
                    len(item),
                )
            collected[item.field] = item.rules
        self._rules = collected

    @property
    def fields(self) -> list[str]:
        """Field names in the order they were first defined."""
        return list(self._rules)

    def to_dict(self) -> dict[str, list[str]]:
        """Return a fresh ``{field: [token, ...]}`` dict."""
        return {name: list(tokens) for name, tokens in self._rules.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"Rules({self.to_dict()!r})"
