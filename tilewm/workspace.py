"""Workspaces: the areas of the screen that display a tag."""

from __future__ import annotations

from typing import Iterable

from tilewm.screen import BBox
from tilewm.size import Gutter, Margins, Side
from tilewm.window import Window
from tilewm.xyhw import Rect, Xyhw


class Workspace:
    """A division of the screen that shows one tag at a time."""

    def __init__(self, bbox: BBox, id: int) -> None:
        self.tag: int | None = None
        self.margin = Margins.uniform(10)
        self.margin_multiplier = 1.0
        self.gutters: list[Gutter] = []
        self.avoid: list[Xyhw] = []
        self.xyhw = Xyhw(x=bbox.x, y=bbox.y, h=bbox.height, w=bbox.width)
        self._xyhw_avoided = self.xyhw.copy()
        self.id = id

    def __repr__(self) -> str:
        return (
            f"Workspace(id={self.id}, tag={self.tag!r}, "
            f"x={self.xyhw.x}, y={self.xyhw.y})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Workspace):
            return NotImplemented
        return self.id == other.id

    __hash__ = None  # type: ignore[assignment]

    def load_config(self, margin: Margins | None, gutters: Iterable[Gutter]) -> None:
        """Apply the configured margin (none means zero) and gutters."""
        self.margin = margin if margin is not None else Margins.uniform(0)
        self.gutters = self.select_gutters(gutters)

    def select_gutters(self, gutters: Iterable[Gutter]) -> list[Gutter]:
        """Pick one gutter per side; a gutter for this workspace beats a general one."""
        selected: list[Gutter] = []
        for gutter in gutters:
            if gutter.id is not None and gutter.id != self.id:
                continue
            position = next(
                (i for i, g in enumerate(selected) if g.side == gutter.side), None
            )
            if position is None:
                selected.append(gutter)
            elif selected[position].id is None:
                selected[position] = gutter
        return selected

    def show_tag(self, tag: int) -> None:
        self.tag = tag

    def contains_point(self, x: int, y: int) -> bool:
        return self.xyhw.contains_point(x, y)

    def has_tag(self, tag: int) -> bool:
        return self.tag == tag

    def is_displaying(self, window: Window) -> bool:
        """Whether the window's tag is the one shown here."""
        return window.tag is not None and self.has_tag(window.tag)

    def is_managed(self, window: Window) -> bool:
        """Whether this workspace lays out the window."""
        return self.is_displaying(window) and window.is_managed()

    def _gutter(self, side: Side) -> int:
        return next((g.value for g in self.gutters if g.side == side), 0)

    def x(self) -> int:
        left = int(self.margin_multiplier * self.margin.left)
        return self._xyhw_avoided.x + left + self._gutter(Side.LEFT)

    def y(self) -> int:
        top = int(self.margin_multiplier * self.margin.top)
        return self._xyhw_avoided.y + top + self._gutter(Side.TOP)

    def height(self) -> int:
        margins = int(self.margin_multiplier * (self.margin.top + self.margin.bottom))
        gutter = self._gutter(Side.TOP) + self._gutter(Side.BOTTOM)
        return self._xyhw_avoided.h - margins - gutter

    def width(self) -> int:
        margins = int(self.margin_multiplier * (self.margin.left + self.margin.right))
        gutter = self._gutter(Side.LEFT) + self._gutter(Side.RIGHT)
        return self._xyhw_avoided.w - margins - gutter

    def center_halfed(self) -> Xyhw:
        return self._xyhw_avoided.center_halfed()

    def update_avoided_areas(self) -> None:
        """Trim every area in ``avoid`` out of the usable area."""
        area = self.xyhw.copy()
        for avoided in self.avoid:
            area = area.without(avoided)
        self._xyhw_avoided = area

    def rect(self) -> Rect:
        return Rect(x=self.x(), y=self.y(), w=abs(self.width()), h=abs(self.height()))