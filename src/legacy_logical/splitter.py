"""Shorthand value splitter.

Breaks a CSS value such as ``1px calc(1px + 2px) 3px !important`` into its
space-separated components, keeping parenthesized function calls whole:

    >>> split_values("1px calc(1px + 2px) 3px !important")
    SplitValue(tokens=['1px', 'calc(1px + 2px)', '3px'], important=True)
"""

from __future__ import annotations

import re
from typing import NamedTuple

__all__ = ["SplitValue", "split_values", "strip_important"]

# Trailing ``!important`` marker, whitespace tolerant.
_IMPORTANT_RE = re.compile(
    r"""
    ^(?P<base>.*?)          # the value proper
    \s*!\s*important\s*$    # the marker, possibly spaced out
    """,
    re.VERBOSE | re.IGNORECASE | re.DOTALL,
)


class SplitValue(NamedTuple):
    tokens: list[str | int | float]
    important: bool


def strip_important(value: str | int | float) -> tuple[str | int | float, bool]:
    """Return *value* without its ``!important`` marker, and whether it had one."""
    if not isinstance(value, str):
        return value, False
    match = _IMPORTANT_RE.match(value)
    if match is None:
        return value, False
    return match.group("base"), True


def split_values(value: str | int | float) -> SplitValue:
    """Split a shorthand value into component tokens plus its importance flag.

    Numbers come back as a single untouched token.  A group opened by a
    token containing ``(`` only closes on a token containing ``)`` alone, so
    tokens inside a group that never returns to depth zero are not flushed
    and do not appear in the result.
    """
    base, important = strip_important(value)
    if not isinstance(base, str):
        return SplitValue([base], False)

    tokens: list[str | int | float] = []
    pending: list[str] = []
    depth = 0
    for item in base.split():
        if "(" in item:
            pending.append(item)
            depth += item.count("(")
        elif ")" in item:
            pending.append(item)
            depth -= item.count(")")
            if depth == 0:
                tokens.append(" ".join(pending))
                pending = []
        elif depth > 0:
            pending.append(item)
        else:
            tokens.append(item)
    return SplitValue(tokens, important)
