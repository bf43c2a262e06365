"""Capability table: the logical properties this package knows how to expand.

The table is plain data so callers can introspect what is supported without
running the transform.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from legacy_logical.model.rules import Distributed, LogicalRule, Whole

__all__ = ["LOGICAL_PROPERTIES", "supported_properties", "lookup"]


def _box(prefix: str) -> dict[str, LogicalRule]:
    """Block/inline rules for a box property (``margin``, ``padding``)."""
    return {
        f"{prefix}Block": Distributed((f"{prefix}Top", f"{prefix}Bottom")),
        f"{prefix}BlockStart": Distributed((f"{prefix}Top",)),
        f"{prefix}BlockEnd": Distributed((f"{prefix}Bottom",)),
        f"{prefix}Inline": Distributed((f"{prefix}Left", f"{prefix}Right")),
        f"{prefix}InlineStart": Distributed((f"{prefix}Left",)),
        f"{prefix}InlineEnd": Distributed((f"{prefix}Right",)),
    }


def _border_side(suffix: str, kind: type[Whole] | type[Distributed]) -> dict[str, LogicalRule]:
    """Block/inline rules for ``border`` or one of its longhand families."""
    return {
        f"borderBlock{suffix}": kind((f"borderTop{suffix}", f"borderBottom{suffix}")),
        f"borderBlockStart{suffix}": kind((f"borderTop{suffix}",)),
        f"borderBlockEnd{suffix}": kind((f"borderBottom{suffix}",)),
        f"borderInline{suffix}": kind((f"borderLeft{suffix}", f"borderRight{suffix}")),
        f"borderInlineStart{suffix}": kind((f"borderLeft{suffix}",)),
        f"borderInlineEnd{suffix}": kind((f"borderRight{suffix}",)),
    }


_TABLE: dict[str, LogicalRule] = {
    # Inset
    "inset": Distributed(("top", "right", "bottom", "left")),
    "insetBlock": Distributed(("top", "bottom")),
    "insetBlockStart": Distributed(("top",)),
    "insetBlockEnd": Distributed(("bottom",)),
    "insetInline": Distributed(("left", "right")),
    "insetInlineStart": Distributed(("left",)),
    "insetInlineEnd": Distributed(("right",)),
    # Margin, padding
    **_box("margin"),
    **_box("padding"),
    # Border (compound value, never split)
    **_border_side("", Whole),
    # Border width, style, color
    **_border_side("Width", Distributed),
    **_border_side("Style", Distributed),
    **_border_side("Color", Distributed),
    # Border radius
    "borderStartStartRadius": Distributed(("borderTopLeftRadius",)),
    "borderStartEndRadius": Distributed(("borderTopRightRadius",)),
    "borderEndStartRadius": Distributed(("borderBottomLeftRadius",)),
    "borderEndEndRadius": Distributed(("borderBottomRightRadius",)),
}

LOGICAL_PROPERTIES: Mapping[str, LogicalRule] = MappingProxyType(_TABLE)


def lookup(name: str) -> LogicalRule | None:
    """Return the rule for logical property *name*, or None if unknown."""
    return LOGICAL_PROPERTIES.get(name)


def supported_properties() -> list[str]:
    """Sorted names of every logical property in the table."""
    return sorted(LOGICAL_PROPERTIES)
