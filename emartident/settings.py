"""Application-wide appearance settings shared by every window."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

_MAX_RADIUS = 255


@dataclass(frozen=True)
class CornerRadius:
    """Per-corner rounding of a window frame, in whole pixels (0-255)."""

    nw: int = 0
    ne: int = 0
    sw: int = 0
    se: int = 0

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"corner {item.name!r} must be an integer")
            if not 0 <= value <= _MAX_RADIUS:
                raise ValueError(
                    f"corner {item.name!r} must be between 0 and {_MAX_RADIUS}, got {value}"
                )

    @classmethod
    def uniform(cls, radius: int) -> CornerRadius:
        """Return a radius with the same rounding on all four corners."""
        return cls(radius, radius, radius, radius)


def _default_rounding() -> CornerRadius:
    return CornerRadius(nw=8, ne=8, sw=16, se=24)


@dataclass
class AppSettings:
    """Settings every window is drawn with."""

    global_rounding: CornerRadius = field(default_factory=_default_rounding)