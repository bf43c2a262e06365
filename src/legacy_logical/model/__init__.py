"""Model layer -- public type re-exports."""

from legacy_logical.model.rules import Arity, Distributed, LogicalRule, Whole
from legacy_logical.model.style import (
    SKIP_CHECK_KEY,
    StyleMapping,
    StyleValue,
    WrappedValue,
    is_plain_value,
    wrap_important,
)

__all__ = [
    # rules
    "Arity",
    "Whole",
    "Distributed",
    "LogicalRule",
    # style
    "StyleMapping",
    "StyleValue",
    "WrappedValue",
    "SKIP_CHECK_KEY",
    "is_plain_value",
    "wrap_important",
]
