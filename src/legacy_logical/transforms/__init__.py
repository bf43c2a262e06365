from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Iterable

from legacy_logical.model.style import StyleMapping
from legacy_logical.transforms.base import Transform
from legacy_logical.transforms.logical_properties import LegacyLogicalPropertiesTransform

if TYPE_CHECKING:
    from legacy_logical.stylesheet.model import Stylesheet

logger = logging.getLogger(__name__)

BUILTIN_TRANSFORMS: list[Transform] = [
    LegacyLogicalPropertiesTransform(),
]


def apply_transforms(
    style: StyleMapping, custom_transforms: Iterable[Transform] | None = None
) -> dict:
    """Run all built-in transforms (and any custom ones) over *style*."""
    transforms = list(BUILTIN_TRANSFORMS)
    if custom_transforms:
        transforms.extend(custom_transforms)
    result = dict(style)
    for t in transforms:
        logger.debug("Running %s", type(t).__name__)
        result = t.visit(result)
    return result


def transform_stylesheet(
    stylesheet: "Stylesheet", custom_transforms: Iterable[Transform] | None = None
) -> "Stylesheet":
    """Apply :func:`apply_transforms` to the declaration block of every rule."""
    custom = list(custom_transforms or [])
    rules = [
        replace(rule, declarations=apply_transforms(rule.declarations, custom))
        for rule in stylesheet.rules
    ]
    return replace(stylesheet, rules=rules)


__all__ = [
    "Transform",
    "BUILTIN_TRANSFORMS",
    "LegacyLogicalPropertiesTransform",
    "apply_transforms",
    "transform_stylesheet",
]
