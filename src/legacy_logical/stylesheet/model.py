"""Stylesheet model: StyleRule and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StyleRule:
    """A single rule pairing a raw selector with its declaration block.

    Declaration names use the style-object (camelCase) convention.
    """

    selector: str  # kept verbatim, e.g. ".card > .title:hover"
    declarations: dict[str, Any]


@dataclass(frozen=True)
class Stylesheet:
    """A collection of style rules in source order."""

    rules: list[StyleRule]
