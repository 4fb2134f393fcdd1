"""Plain records describing manager state for status bars and other clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


@dataclass
class Viewport:
    """A workspace as seen from outside: where it is and which tag it shows."""

    id: int
    output: str
    tag: str
    h: int
    w: int
    x: int
    y: int
    layout: str


@dataclass
class ManagerState:
    """A snapshot of the manager's state, keyed by tag labels."""

    window_title: str | None = None
    desktop_names: list[str] = field(default_factory=list)
    viewports: list[Viewport] = field(default_factory=list)
    active_desktop: list[str] = field(default_factory=list)
    working_tags: list[str] = field(default_factory=list)
    urgent_tags: list[str] = field(default_factory=list)


@dataclass
class TagsForWorkspace:
    """How one tag relates to one workspace."""

    name: str
    index: int
    mine: bool
    visible: bool
    focused: bool
    urgent: bool
    busy: bool


@dataclass
class DisplayWorkspace:
    """A workspace with the status of every tag from its point of view."""

    id: int
    output: str
    h: int
    w: int
    x: int
    y: int
    layout: str
    index: int
    tags: list[TagsForWorkspace] = field(default_factory=list)


@dataclass
class DisplayState:
    """State arranged for display: the focused window's title and every workspace."""

    window_title: str
    workspaces: list[DisplayWorkspace] = field(default_factory=list)

    @classmethod
    def from_manager_state(cls, state: ManagerState) -> "DisplayState":
        visible = [viewport.tag for viewport in state.viewports]
        workspaces = [
            _display_workspace(state, visible, viewport, index)
            for index, viewport in enumerate(state.viewports)
        ]
        return cls(
            window_title=state.window_title or "",
            workspaces=workspaces,
        )


def _display_workspace(
    state: ManagerState,
    visible: Sequence[str],
    viewport: Viewport,
    ws_index: int,
) -> DisplayWorkspace:
    tags = [
        TagsForWorkspace(
            name=name,
            index=index,
            mine=viewport.tag == name,
            visible=name in visible,
            focused=name in state.active_desktop,
            urgent=name in state.urgent_tags,
            busy=name in state.working_tags,
        )
        for index, name in enumerate(state.desktop_names)
    ]
    return DisplayWorkspace(
        id=viewport.id,
        output=viewport.output,
        h=viewport.h,
        w=viewport.w,
        x=viewport.x,
        y=viewport.y,
        layout=viewport.layout,
        index=ws_index,
        tags=tags,
    )