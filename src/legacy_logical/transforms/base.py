"""Base protocol for style transforms."""

from __future__ import annotations

from typing import Protocol

from legacy_logical.model.style import StyleMapping


class Transform(Protocol):
    """A style-mapping to style-mapping transformation stage."""

    def visit(self, style: StyleMapping) -> dict: ...
