"""Table configuration."""

from __future__ import annotations

from dataclasses import dataclass

from tablewrap.text import DEFAULT_TAB_WIDTH


@dataclass
class TableConfig:
    """Layout settings shared by every cell of a table."""

    tab_width: int = DEFAULT_TAB_WIDTH
    padding_left: int = 0
    padding_right: int = 0

    def __post_init__(self) -> None:
        for name in ("tab_width", "padding_left", "padding_right"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    @property
    def horizontal_padding(self) -> int:
        return self.padding_left + self.padding_right
