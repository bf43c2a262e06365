"""Render a Stylesheet back to CSS text or to a JSON-ready structure."""

from __future__ import annotations

from typing import Any

from legacy_logical.model.style import WrappedValue
from legacy_logical.stylesheet.model import StyleRule, Stylesheet
from legacy_logical.stylesheet.names import to_kebab_case

__all__ = ["serialize_rule", "serialize_stylesheet", "stylesheet_to_dict"]


def _css_value(value: Any) -> str:
    if isinstance(value, WrappedValue):
        value = value.value
    return str(value)


def serialize_rule(rule: StyleRule, indent: str = "  ") -> str:
    """Render one rule as a CSS block, one declaration per line."""
    lines = [f"{rule.selector} {{"]
    for name, value in rule.declarations.items():
        lines.append(f"{indent}{to_kebab_case(name)}: {_css_value(value)};")
    lines.append("}")
    return "\n".join(lines)


def serialize_stylesheet(stylesheet: Stylesheet, indent: str = "  ") -> str:
    """Render *stylesheet* as CSS text, rules separated by a blank line."""
    return "\n\n".join(serialize_rule(rule, indent) for rule in stylesheet.rules)


def stylesheet_to_dict(stylesheet: Stylesheet) -> dict[str, dict[str, Any]]:
    """Selector -> style object, with wrapped values in their dict form."""
    result: dict[str, dict[str, Any]] = {}
    for rule in stylesheet.rules:
        block = result.setdefault(rule.selector, {})
        for name, value in rule.declarations.items():
            block[name] = value.to_dict() if isinstance(value, WrappedValue) else value
    return result
