"""Conversion between CSS (kebab-case) and style-object (camelCase) names."""

from __future__ import annotations

import re

_DASH_LETTER_RE = re.compile(r"-([a-z])")
_UPPER_RE = re.compile(r"[A-Z]")


def to_camel_case(name: str) -> str:
    """``margin-block-start`` -> ``marginBlockStart``.

    Custom properties (``--brand-color``) are returned unchanged.  A leading
    vendor dash becomes a capital (``-webkit-box`` -> ``WebkitBox``).
    """
    if name.startswith("--"):
        return name
    return _DASH_LETTER_RE.sub(lambda m: m.group(1).upper(), name.lower())


def to_kebab_case(name: str) -> str:
    """``borderTopLeftRadius`` -> ``border-top-left-radius``."""
    if name.startswith("--"):
        return name
    return _UPPER_RE.sub(lambda m: "-" + m.group(0).lower(), name)
