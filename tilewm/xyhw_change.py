"""Partial updates to a rectangle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tilewm.xyhw import Xyhw

if TYPE_CHECKING:
    from tilewm.window import Window

# The order in which fields are applied; later limits clamp earlier sizes.
_ORDER = ("x", "y", "w", "h", "minw", "maxw", "minh", "maxh")


@dataclass
class XyhwChange:
    """Fields to change on an ``Xyhw``; None leaves a field as it is."""

    x: int | None = None
    y: int | None = None
    h: int | None = None
    w: int | None = None
    minw: int | None = None
    maxw: int | None = None
    minh: int | None = None
    maxh: int | None = None

    @classmethod
    def from_xyhw(cls, xyhw: Xyhw) -> "XyhwChange":
        return cls(**{name: getattr(xyhw, name) for name in _ORDER})

    def update(self, xyhw: Xyhw) -> bool:
        """Apply the change in place; return whether anything differed."""
        changed = False
        for name in _ORDER:
            value = getattr(self, name)
            if value is not None and getattr(xyhw, name) != value:
                setattr(xyhw, name, value)
                changed = True
        return changed

    def update_window_floating(self, window: "Window") -> bool:
        """Apply the change to a floating window's geometry."""
        if not window.floating():
            return False
        current = window.calculated_xyhw()
        changed = self.update(current)
        window.set_floating_exact(current)
        return changed

    def update_window_strut(self, window: "Window") -> bool:
        """Apply the change to the window's strut, creating one if it has none."""
        changed = window.strut is None
        strut = Xyhw() if window.strut is None else window.strut.copy()
        changed = self.update(strut) or changed
        window.strut = strut
        return changed