from __future__ import annotations

from dataclasses import dataclass

OUTPUT_FORMATS = ("css", "json")


@dataclass(frozen=True)
class LegacyLogicalConfig:
    output_format: str = "css"  # one of OUTPUT_FORMATS
    indent: str = "  "
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {self.output_format!r}")
