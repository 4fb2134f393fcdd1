"""Scratchpads: floating windows summoned onto the current workspace."""

from __future__ import annotations

from dataclasses import dataclass

from tilewm.size import Size
from tilewm.xyhw import Xyhw


@dataclass
class ScratchPad:
    """A configured scratchpad; position and size are relative to the workspace."""

    name: str
    value: str
    x: Size | None = None
    y: Size | None = None
    height: Size | None = None
    width: Size | None = None

    def xyhw(self, area: Xyhw) -> Xyhw:
        """Position and size of the scratchpad within ``area``."""
        return Xyhw(
            x=area.x + sane_dimension(self.x, 0.25, area.w),
            y=area.y + sane_dimension(self.y, 0.25, area.h),
            h=sane_dimension(self.height, 0.50, area.h),
            w=sane_dimension(self.width, 0.50, area.w),
        )


def sane_dimension(config_value: Size | None, default_ratio: float, max_pixel: int) -> int:
    """Resolve a configured size, falling back to ``default_ratio`` when out of range."""
    if config_value is not None:
        if config_value.is_ratio and 0.0 <= config_value.value <= 1.0:
            return config_value.into_absolute(max_pixel)
        if not config_value.is_ratio and 0 <= config_value.value <= max_pixel:
            return int(config_value.value)
    return Size.ratio(default_ratio).into_absolute(max_pixel)