"""Pydantic configuration models with code-baked defaults.

There are no config files or environment variables: callers construct
a :class:`RulesConfig` directly and pass it to the builders.
"""

from __future__ import annotations

from pydantic import BaseModel


class RulesConfig(BaseModel):
    """Builder behaviour switches, frozen after construction.

    Attributes:
        legacy_required_with: Emit ``required_with*`` tokens without the
            colon separator (``"required_witha,b"``), matching rule sets
            produced by older releases.
        log_redefinitions: Emit a debug record when the aggregator replaces
            the rules of a field that was already defined.
    """

    model_config = {"frozen": True}

    legacy_required_with: bool = False
    log_redefinitions: bool = True
