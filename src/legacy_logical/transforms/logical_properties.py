"""Logical property transform: rewrites logical properties as physical ones."""

from __future__ import annotations

import logging
from typing import Mapping

from legacy_logical.model.rules import Arity, LogicalRule, Whole
from legacy_logical.model.style import StyleMapping, WrappedValue, is_plain_value, wrap_important
from legacy_logical.splitter import split_values, strip_important
from legacy_logical.table import LOGICAL_PROPERTIES

logger = logging.getLogger(__name__)


def _pick(
    tokens: list[str | int | float],
    index: int,
    arity: Arity,
    fallback: str | int | float,
) -> str | int | float:
    """Choose the shorthand component for target *index*.

    Follows the CSS 1/2/3/4-value convention: a missing component falls back
    to the opposite side (four-value form only), then to the first component.
    """
    if index < len(tokens):
        return tokens[index]
    if arity is Arity.FOUR and index >= 2 and index - 2 < len(tokens):
        return tokens[index - 2]
    if tokens:
        return tokens[0]
    return fallback


def expand(rule: LogicalRule, value: str | int | float) -> dict[str, WrappedValue]:
    """Expand one logical declaration into its physical declarations."""
    base, important = strip_important(value)
    if isinstance(rule, Whole) or rule.arity is Arity.ONE:
        return {target: wrap_important(base, important) for target in rule.targets}

    tokens, important = split_values(value)
    return {
        target: wrap_important(_pick(tokens, i, rule.arity, base), important)
        for i, target in enumerate(rule.targets)
    }


class LegacyLogicalPropertiesTransform:
    """Convert logical properties to their legacy physical equivalents.

    ``marginBlockStart`` becomes ``marginTop``, ``inset`` becomes ``top``,
    ``right``, ``bottom`` and ``left``, and so on for inset, margin, padding,
    border and border radius.  Expanded values are wrapped in
    :class:`WrappedValue` so later stages leave them alone.  Keys that are
    not logical properties, and values that are neither strings nor numbers,
    are copied unchanged.
    """

    def __init__(self, table: Mapping[str, LogicalRule] = LOGICAL_PROPERTIES) -> None:
        self.table = table

    def visit(self, style: StyleMapping) -> dict:
        result: dict = {}
        for key, value in style.items():
            rule = self.table.get(key)
            if rule is None or not is_plain_value(value):
                result[key] = value
                continue
            expanded = expand(rule, value)
            logger.debug("Expanded %s=%r into %s", key, value, ", ".join(expanded))
            result.update(expanded)
        return result
