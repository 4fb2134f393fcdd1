"""A batch of changes reported for a window."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from tilewm.kinds import WindowState, WindowType
from tilewm.size import Margins
from tilewm.window import Window, WindowHandle
from tilewm.xyhw import Xyhw
from tilewm.xyhw_change import XyhwChange


class _Unchanged:
    _instance: "_Unchanged | None" = None

    def __new__(cls) -> "_Unchanged":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNCHANGED"


UNCHANGED: Any = _Unchanged()
"""Marks a field that may be cleared to None as not being changed at all."""


@dataclass
class WindowChange:
    """Changes to apply to the window with ``handle``; unset fields are left alone."""

    handle: WindowHandle
    transient: Any = field(default=UNCHANGED)
    never_focus: bool | None = None
    urgent: bool | None = None
    name: Any = field(default=UNCHANGED)
    window_type: WindowType | None = None
    floating: XyhwChange | None = None
    strut: XyhwChange | None = None
    requested: Xyhw | None = None
    states: list[WindowState] | None = None

    def update(self, window: Window, container: Xyhw | None) -> bool:
        """Apply the changes to ``window``; return whether it needs redrawing.

        When ``container`` is given, a floating change is centred within it.
        """
        changed = False
        if self.transient is not UNCHANGED:
            changed = changed or window.transient is None or window.transient != self.transient
            window.transient = self.transient
        if self.name is not UNCHANGED:
            changed = changed or window.name is None or window.name != self.name
            window.name = self.name
        if self.never_focus is not None:
            changed = changed or window.never_focus != self.never_focus
            window.never_focus = self.never_focus
        if self.urgent is not None:
            changed = changed or window.urgent != self.urgent
            window.urgent = self.urgent
        if self.floating is not None:
            floating_change = replace(self.floating)
            if container is not None:
                # Reposition dialogs and modals.
                xyhw = Xyhw()
                floating_change.update(xyhw)
                xyhw.center_relative(container, window.border)
                floating_change.x = xyhw.x
                floating_change.y = xyhw.y
            changed = floating_change.update_window_floating(window) or changed
        if self.strut is not None:
            changed = self.strut.update_window_strut(window) or changed
        if self.requested is not None:
            window.requested = self.requested.copy()
        if self.window_type is not None:
            changed = changed or window.window_type != self.window_type
            window.window_type = self.window_type
            if not window.is_managed():
                window.border = 0
                window.margin = Margins.uniform(0)
        if self.states is not None:
            changed = True
            window.set_states(self.states)
        return changed