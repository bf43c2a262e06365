"""Style model: style mappings and finalized (wrapped) values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

StyleValue = Union[str, int, float, "WrappedValue"]
# Values of unrecognized keys may be anything (nested blocks, lists, None).
StyleMapping = Mapping[str, Any]

SKIP_CHECK_KEY = "_skip_check_"


@dataclass(frozen=True)
class WrappedValue:
    """A value that downstream stages must not validate or transform again.

    Attributes:
        value: The final CSS value, with ``!important`` already appended when
            the source declaration carried it.
        skip_check: Always True; marks the value as finalized.
    """

    value: str | int | float
    skip_check: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Render in the style-object form ``{"_skip_check_": True, "value": ...}``."""
        return {SKIP_CHECK_KEY: self.skip_check, "value": self.value}

    def __str__(self) -> str:
        return str(self.value)


def is_plain_value(value: object) -> bool:
    """True for the value types the expander understands: str, int and float."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float))


def wrap_important(value: str | int | float, important: bool) -> WrappedValue:
    """Finalize *value*, appending ``!important`` when *important* is set."""
    if important:
        return WrappedValue(value=f"{value} !important")
    return WrappedValue(value=value)
