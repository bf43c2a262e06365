"""Rule model: how one logical property fans out to physical properties."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Arity(Enum):
    """Number of physical properties a logical property expands into."""

    ONE = 1
    TWO = 2
    FOUR = 4

    @classmethod
    def of(cls, count: int) -> "Arity":
        try:
            return cls(count)
        except ValueError:
            raise ValueError(
                f"Logical property rules target 1, 2 or 4 properties, got {count}"
            ) from None


@dataclass(frozen=True)
class _Rule:
    targets: tuple[str, ...]

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable tuple.
        object.__setattr__(self, "targets", tuple(self.targets))
        Arity.of(len(self.targets))

    @property
    def arity(self) -> Arity:
        return Arity.of(len(self.targets))


@dataclass(frozen=True)
class Whole(_Rule):
    """Every target receives the unsplit original value (e.g. ``borderBlock``).

    Used for shorthands such as ``border`` whose grammar mixes width, style and
    color and therefore cannot be distributed by whitespace.
    """


@dataclass(frozen=True)
class Distributed(_Rule):
    """Targets receive the space-separated components of the value by position."""


LogicalRule = Union[Whole, Distributed]
