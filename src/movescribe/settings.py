"""User-configurable notation settings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from movescribe.core.enums import Family, NotationStyle
from movescribe.core.errors import UnknownStyle

_DEFAULT_STYLE: dict[Family, NotationStyle] = {
    Family.CHESS: NotationStyle.SAN,
    Family.SHOGI: NotationStyle.USI,
    Family.XIANGQI: NotationStyle.WXF,
}


@dataclass
class NotationSettings:
    """All settings read by the transcript renderer."""

    style: NotationStyle = NotationStyle.SAN
    placeholder: str = "?"  # token shown for a move that cannot be rendered
    with_dots: bool = True

    def __post_init__(self) -> None:
        try:
            self.style = NotationStyle(self.style)
        except ValueError:
            raise UnknownStyle(f"Unknown notation style: {self.style!r}") from None

    @classmethod
    def for_family(cls, family: Family) -> NotationSettings:
        """Defaults with the customary style of *family*."""
        return cls(style=_DEFAULT_STYLE[family])

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> NotationSettings:
        """Build settings from a config mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
