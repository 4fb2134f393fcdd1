"""Focus history for workspaces, tags and windows."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from tilewm.window import Window, WindowHandle
from tilewm.workspace import Workspace


class FocusBehaviour(Enum):
    SLOPPY = "Sloppy"
    CLICK_TO = "ClickTo"
    DRIVEN = "Driven"

    def is_sloppy(self) -> bool:
        return self is FocusBehaviour.SLOPPY

    def is_clickto(self) -> bool:
        return self is FocusBehaviour.CLICK_TO

    def is_driven(self) -> bool:
        return self is FocusBehaviour.DRIVEN


@dataclass
class FocusManager:
    """What has focus now and what had it before; the newest entry is first."""

    behaviour: FocusBehaviour = FocusBehaviour.SLOPPY
    focus_new_windows: bool = False
    sloppy_mouse_follows_focus: bool = False
    workspace_history: deque[int] = field(default_factory=deque)
    window_history: deque[WindowHandle | None] = field(default_factory=deque)
    tag_history: deque[int] = field(default_factory=deque)
    tags_last_window: dict[int, WindowHandle] = field(default_factory=dict)
    last_mouse_position: tuple[int, int] | None = None

    def workspace(self, workspaces: Sequence[Workspace]) -> Workspace | None:
        """The focused workspace, looked up by its index in ``workspaces``."""
        if not self.workspace_history:
            return None
        index = self.workspace_history[0]
        if 0 <= index < len(workspaces):
            return workspaces[index]
        return None

    def tag(self, offset: int) -> int | None:
        """The focused tag for offset 0; larger offsets reach back in history."""
        if 0 <= offset < len(self.tag_history):
            return self.tag_history[offset]
        return None

    def window(self, windows: Sequence[Window]) -> Window | None:
        """The focused window, if one is focused and still present."""
        if not self.window_history:
            return None
        handle = self.window_history[0]
        if handle is None:
            return None
        return next((w for w in windows if w.handle == handle), None)