"""Window states and types, manager modes and layout names."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

DEFAULT = "Default"
MONOCLE = "Monocle"
MAIN_AND_DECK = "MainAndDeck"
LEFT_WIDER_RIGHT_STACK = "LeftWiderRightStack"
RIGHT_WIDER_LEFT_STACK = "RightWiderLeftStack"
MAIN_AND_VERT_STACK = "MainAndVertStack"
MAIN_AND_HORIZONTAL_STACK = "MainAndHorizontalStack"
GRID_HORIZONTAL = "GridHorizontal"
EVEN_HORIZONTAL = "EvenHorizontal"
EVEN_VERTICAL = "EvenVertical"
FIBONACCI = "Fibonacci"
LEFT_MAIN = "LeftMain"
CENTER_MAIN = "CenterMain"
CENTER_MAIN_BALANCED = "CenterMainBalanced"
CENTER_MAIN_FLUID = "CenterMainFluid"


class WindowState(Enum):
    MODAL = "Modal"
    STICKY = "Sticky"
    MAXIMIZED_VERT = "MaximizedVert"
    MAXIMIZED_HORZ = "MaximizedHorz"
    MAXIMIZED = "Maximized"
    SHADED = "Shaded"
    SKIP_TASKBAR = "SkipTaskbar"
    SKIP_PAGER = "SkipPager"
    HIDDEN = "Hidden"
    FULLSCREEN = "Fullscreen"
    ABOVE = "Above"
    BELOW = "Below"


class WindowType(Enum):
    DESKTOP = "Desktop"
    DOCK = "Dock"
    TOOLBAR = "Toolbar"
    MENU = "Menu"
    UTILITY = "Utility"
    SPLASH = "Splash"
    DIALOG = "Dialog"
    NORMAL = "Normal"


class ModeKind(Enum):
    READY_TO_RESIZE = "ReadyToResize"
    READY_TO_MOVE = "ReadyToMove"
    RESIZING_WINDOW = "ResizingWindow"
    MOVING_WINDOW = "MovingWindow"
    NORMAL = "Normal"


@dataclass(frozen=True)
class Mode:
    """What the manager is doing with the pointer; every kind but NORMAL names a window."""

    kind: ModeKind = ModeKind.NORMAL
    handle: Any = None

    def __post_init__(self) -> None:
        if self.kind is ModeKind.NORMAL and self.handle is not None:
            raise ValueError("the normal mode carries no window handle")
        if self.kind is not ModeKind.NORMAL and self.handle is None:
            raise ValueError(f"mode {self.kind.value} needs a window handle")

    @classmethod
    def normal(cls) -> "Mode":
        return cls(ModeKind.NORMAL)

    def is_normal(self) -> bool:
        return self.kind is ModeKind.NORMAL


class LayoutMode(Enum):
    """Whether layouts are remembered per tag or per workspace."""

    TAG = "Tag"
    WORKSPACE = "Workspace"

    @classmethod
    def default(cls) -> "LayoutMode":
        return cls.TAG


class ParseLayoutError(ValueError):
    def __init__(self, layout: str) -> None:
        super().__init__(f"Could not parse layout: {layout}")
        self.layout = layout