"""Managed windows and the handles that identify them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from tilewm.kinds import WindowState, WindowType
from tilewm.size import Margins
from tilewm.xyhw import Xyhw

if TYPE_CHECKING:
    from tilewm.workspace import Workspace

log = logging.getLogger(__name__)

_ALWAYS_VISIBLE = (WindowType.MENU, WindowType.SPLASH, WindowType.TOOLBAR)
_UNMANAGED = (WindowType.DESKTOP, WindowType.DOCK)


@dataclass(frozen=True)
class WindowHandle:
    """Identifies a window: either a test handle or a native X window id."""

    value: int
    native: bool = False

    @classmethod
    def mock(cls, value: int) -> "WindowHandle":
        return cls(value, False)

    @classmethod
    def xlib(cls, value: int) -> "WindowHandle":
        return cls(value, True)

    def xlib_handle(self) -> int | None:
        """The native window id, or None for a test handle."""
        return self.value if self.native else None


def _copied(value: Xyhw | None) -> Xyhw | None:
    return None if value is None else value.copy()


class Window:
    """A window known to the manager, with its geometry and state."""

    def __init__(
        self,
        handle: WindowHandle,
        name: str | None = None,
        pid: int | None = None,
    ) -> None:
        self.handle = handle
        self.transient: WindowHandle | None = None
        self.resizable = True
        self.force_float = False
        self.never_focus = False
        self.urgent = False
        self.debugging = False
        self.name = name
        self.legacy_name: str | None = None
        self.pid = pid
        self.window_type = WindowType.NORMAL
        self.tag: int | None = None
        self.border = 1
        self.margin = Margins.uniform(10)
        self.margin_multiplier = 1.0
        self.requested: Xyhw | None = None
        self.normal = Xyhw()
        self.start_loc: Xyhw | None = None
        self.container_size: Xyhw | None = None
        self.strut: Xyhw | None = None
        self.res_name: str | None = None
        self.res_class: str | None = None
        self._visible = False
        self._is_floating = False
        self._floating_offsets: Xyhw | None = None
        self._states: list[WindowState] = []

    def __repr__(self) -> str:
        return (
            f"Window(handle={self.handle!r}, name={self.name!r}, "
            f"type={self.window_type.value}, tag={self.tag!r})"
        )

    # visibility and floating

    def set_visible(self, value: bool) -> None:
        self._visible = value

    def visible(self) -> bool:
        return self._visible or self.window_type in _ALWAYS_VISIBLE

    def set_floating(self, value: bool) -> None:
        if not self._is_floating and value and self._floating_offsets is None:
            # Floating is relative to the normal position.
            self.reset_float_offset()
        self._is_floating = value

    def floating(self) -> bool:
        return self._is_floating or self.must_float()

    def get_floating_offsets(self) -> Xyhw | None:
        return _copied(self._floating_offsets)

    def reset_float_offset(self) -> None:
        offsets = Xyhw()
        offsets.clear_minmax()
        self._floating_offsets = offsets

    def set_floating_offsets(self, value: Xyhw | None) -> None:
        self._floating_offsets = _copied(value)
        if self._floating_offsets is not None:
            self._floating_offsets.clear_minmax()

    def set_floating_exact(self, value: Xyhw) -> None:
        """Float at the given absolute geometry."""
        offsets = value - self.normal
        offsets.clear_minmax()
        self._floating_offsets = offsets

    # states

    def is_fullscreen(self) -> bool:
        return WindowState.FULLSCREEN in self._states

    def is_maximized(self) -> bool:
        return WindowState.MAXIMIZED in self._states

    def is_sticky(self) -> bool:
        return WindowState.STICKY in self._states

    def set_states(self, states: Iterable[WindowState]) -> None:
        self._states = list(states)

    def drop_state(self, state: WindowState) -> None:
        self._states = [s for s in self._states if s != state]

    def has_state(self, state: WindowState) -> bool:
        return state in self._states

    def states(self) -> list[WindowState]:
        return list(self._states)

    # capabilities

    def must_float(self) -> bool:
        return (
            self.force_float
            or self.transient is not None
            or not self.is_managed()
            or self.window_type is WindowType.SPLASH
        )

    def can_move(self) -> bool:
        return self.is_managed()

    def can_resize(self) -> bool:
        return self.resizable and self.is_managed()

    def can_focus(self) -> bool:
        return not self.never_focus and self.is_managed() and self.visible()

    def is_managed(self) -> bool:
        return self.window_type not in _UNMANAGED

    def is_normal(self) -> bool:
        return self.window_type is WindowType.NORMAL

    # geometry

    def apply_margin_multiplier(self, value: float) -> None:
        self.margin_multiplier = abs(value)
        if value < 0:
            log.warning(
                "Negative margin multiplier detected. Will be applied as absolute: %s",
                self.margin_multiplier,
            )

    def _floats_with_offsets(self) -> bool:
        return (
            self.floating()
            and self._floating_offsets is not None
            and not self.is_maximized()
        )

    def _relative(self) -> Xyhw:
        assert self._floating_offsets is not None
        return self.normal + self._floating_offsets

    def _limit(self, value: int, requested_min: int | None) -> int:
        limit = 100
        if requested_min is not None and requested_min > 0 and self.floating():
            limit = requested_min
        if value < limit and self.is_managed():
            return limit
        return value

    def width(self) -> int:
        if self.is_fullscreen():
            value = self.normal.w
        elif self._floats_with_offsets():
            value = self._relative().w - self.border * 2
        else:
            margins = int((self.margin.left + self.margin.right) * self.margin_multiplier)
            value = self.normal.w - margins - self.border * 2
        return self._limit(value, None if self.requested is None else self.requested.minw)

    def height(self) -> int:
        if self.is_fullscreen():
            value = self.normal.h
        elif self._floats_with_offsets():
            value = self._relative().h - self.border * 2
        else:
            margins = int((self.margin.top + self.margin.bottom) * self.margin_multiplier)
            value = self.normal.h - margins - self.border * 2
        return self._limit(value, None if self.requested is None else self.requested.minh)

    def effective_border(self) -> int:
        """The border drawn around the window: none while fullscreen."""
        return 0 if self.is_fullscreen() else self.border

    def x(self) -> int:
        if self.is_fullscreen():
            return self.normal.x
        if self._floats_with_offsets():
            return self._relative().x
        return self.normal.x + int(self.margin.left * self.margin_multiplier)

    def y(self) -> int:
        if self.is_fullscreen():
            return self.normal.y
        if self._floats_with_offsets():
            return self._relative().y
        return self.normal.y + int(self.margin.top * self.margin_multiplier)

    def calculated_xyhw(self) -> Xyhw:
        return Xyhw(x=self.x(), y=self.y(), h=self.height(), w=self.width())

    def exact_xyhw(self) -> Xyhw:
        if self.floating() and self._floating_offsets is not None:
            return self._relative()
        return self.normal.copy()

    def contains_point(self, x: int, y: int) -> bool:
        return self.calculated_xyhw().contains_point(x, y)

    # tags

    def set_tag(self, tag: int) -> None:
        self.tag = tag

    def has_tag(self, tag: int) -> bool:
        return self.tag == tag

    def untag(self) -> None:
        self.tag = None

    def snap_to_workspace(self, workspace: "Workspace") -> bool:
        """Stop floating and move onto the workspace's tag, keeping the on-screen position."""
        self.set_floating(False)

        if self.tag != workspace.tag:
            self.tag = workspace.tag
            area = workspace.xyhw

            offset = self.get_floating_offsets() or Xyhw()
            x = offset.x + self.normal.x
            y = offset.y + self.normal.y
            offset.x = x - area.x
            offset.y = y - area.y
            self.set_floating_offsets(offset)

            start_loc = _copied(self.start_loc) or Xyhw()
            x = start_loc.x + self.normal.x
            y = start_loc.y + self.normal.y
            start_loc.x = x - area.x
            start_loc.y = y - area.y
            self.start_loc = start_loc
        return True