"""Rule token grammar.

A token is either *bare* (``"required"``) or *parameterized*
(``"between:1,10"``): the rule name, a colon, then the arguments
comma-joined in declaration order.

INVARIANT: arguments are never escaped. A comma inside an argument
produces an ambiguous token; callers must not pass one.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

ARGUMENT_SEPARATOR = ","
NAME_SEPARATOR = ":"


def format_argument(value: object) -> str:
    """Render a single rule argument as it appears inside a token.

    Examples:
        >>> format_argument(10)
        '10'
        >>> format_argument(2.0)
        '2'
        >>> format_argument(1.5)
        '1.5'
        >>> format_argument(True)
        'true'
    """
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def join_arguments(values: Iterable[object]) -> str:
    """Comma-join rendered arguments, preserving order."""
    return ARGUMENT_SEPARATOR.join(format_argument(v) for v in values)


def bare(name: str) -> str:
    """Return the token for a rule that takes no arguments."""
    return name


def parameterized(name: str, values: Iterable[object]) -> str:
    """Return ``name:arg1,arg2,...``.

    The colon is always emitted, even when *values* is empty, so
    ``parameterized("in", [])`` yields ``"in:"``.
    """
    return f"{name}{NAME_SEPARATOR}{join_arguments(values)}"


def as_list(values: str | Iterable[object]) -> list[object]:
    """Normalize a set-valued parameter to an ordered list.

    A single string counts as one value rather than a sequence of characters.
    """
    if isinstance(values, str):
        return [values]
    return list(values)
