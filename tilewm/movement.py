"""Dragging and resizing floating windows with the pointer."""

from __future__ import annotations

from typing import Sequence

from tilewm.window import Window
from tilewm.workspace import Workspace
from tilewm.xyhw import Xyhw

SNAP_DISTANCE = 10
"""How close, in pixels, a window edge must be to a workspace edge to snap."""


def move_window(window: Window, offset_x: int, offset_y: int) -> None:
    """Move the window's floating position by the offset from where the drag started."""
    offset = window.get_floating_offsets() or Xyhw()
    start = window.start_loc or Xyhw()
    offset.x = start.x + offset_x
    offset.y = start.y + offset_y
    window.set_floating_offsets(offset)


def snap_to_workspace(window: Window, workspaces: Sequence[Workspace]) -> bool:
    """Snap the window into the workspace under its centre if it is near an edge."""
    loc = window.calculated_xyhw()
    x, y = loc.center()
    workspace = next((ws for ws in workspaces if ws.contains_point(x, y)), None)
    if workspace is None:
        return False
    return should_snap(window, workspace, loc)


def should_snap(window: Window, workspace: Workspace, loc: Xyhw) -> bool:
    """Snap when the window may tile and one of its sides is close to the workspace's."""
    if window.must_float():
        return False
    win_left = loc.x
    win_right = win_left + window.width()
    win_top = loc.y
    win_bottom = win_top + window.height()
    ws_left = workspace.x()
    ws_right = ws_left + workspace.width()
    ws_top = workspace.y()
    ws_bottom = ws_top + workspace.height()
    distances = (
        win_top - ws_top,
        win_bottom - ws_bottom,
        win_left - ws_left,
        win_right - ws_right,
    )
    if any(abs(d) < SNAP_DISTANCE for d in distances):
        return window.snap_to_workspace(workspace)
    return False


def handle_window_move(
    window: Window,
    workspaces: Sequence[Workspace],
    offset_x: int,
    offset_y: int,
    disable_snap: bool,
) -> bool:
    """Move the window; return whether it snapped, so the stacking order needs sorting."""
    move_window(window, offset_x, offset_y)
    if disable_snap:
        return False
    return snap_to_workspace(window, workspaces)


def resize_window(window: Window, offset_w: int, offset_h: int) -> None:
    """Float the window and resize it by the offset from its size when the drag started."""
    window.set_floating(True)
    offset = window.get_floating_offsets() or Xyhw()
    start = window.start_loc or Xyhw()
    offset.w = start.w + offset_w
    offset.h = start.h + offset_h
    window.set_floating_offsets(offset)