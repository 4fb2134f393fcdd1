"""Physical screens and their bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tilewm.size import Size
from tilewm.window import WindowHandle

if TYPE_CHECKING:
    from tilewm.dock_area import DockArea


@dataclass
class BBox:
    """Bounding box of a screen."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def add(self, other: "BBox") -> None:
        self.x += other.x
        self.y += other.y
        self.width += other.width
        self.height += other.height


def _default_bbox() -> BBox:
    return BBox(x=0, y=0, width=800, height=600)


@dataclass
class Screen:
    """A screen and the workspace it is assigned to."""

    bbox: BBox = field(default_factory=_default_bbox)
    output: str = ""
    root: WindowHandle = field(default_factory=lambda: WindowHandle.mock(0))
    id: int | None = None
    max_window_width: Size | None = None

    def contains_point(self, x: int, y: int) -> bool:
        box = self.bbox
        return box.x <= x <= box.x + box.width and box.y <= y <= box.y + box.height

    def contains_dock_area(self, dock_area: "DockArea", screens_area: tuple[int, int]) -> bool:
        """Whether a dock reserving ``dock_area`` sits on this screen.

        ``screens_area`` is the (height, width) of all screens together.
        """
        if dock_area.top > 0:
            return self.contains_point(dock_area.top_start_x, dock_area.top)
        if dock_area.bottom > 0:
            return self.contains_point(
                dock_area.bottom_start_x, screens_area[0] - dock_area.bottom
            )
        if dock_area.left > 0:
            return self.contains_point(dock_area.left, dock_area.left_start_y)
        if dock_area.right > 0:
            return self.contains_point(
                screens_area[1] - dock_area.right, dock_area.right_start_y
            )
        return False