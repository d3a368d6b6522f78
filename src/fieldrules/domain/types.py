"""Enumerations shared by the rule builders."""

from __future__ import annotations

from enum import StrEnum


class EmailValidation(StrEnum):
    """Validation styles accepted by the ``email`` rule."""

    RFC = "rfc"
    STRICT = "strict"
    DNS = "dns"
    SPOOF = "spoof"
    FILTER = "filter"
