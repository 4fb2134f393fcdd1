# tilewm

Data models for a tiling window manager: rectangles with size limits,
windows, workspaces, tags, screens, dock areas, scratchpads and focus
history, plus the logic that moves, resizes and snaps floating windows.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `tilewm.xyhw` | `Xyhw`, a rectangle with min/max width and height limits, and the plain `Rect` |
| `tilewm.size` | `Size` (pixels or a ratio), `Margins`, `Side`, `Gutter` |
| `tilewm.kinds` | `WindowState`, `WindowType`, `ModeKind`, `Mode`, `LayoutMode`, `ParseLayoutError` and the layout name constants (`MONOCLE`, `MAIN_AND_DECK`, ...) |
| `tilewm.window` | `WindowHandle` and `Window` |
| `tilewm.xyhw_change` | `XyhwChange`, a partial update to an `Xyhw` |
| `tilewm.window_change` | `WindowChange`, a batch of updates to a `Window` |
| `tilewm.workspace` | `Workspace`, an area of a screen that shows one tag |
| `tilewm.screen` | `BBox` and `Screen` |
| `tilewm.dock_area` | `DockArea`, the space a panel reserves along a screen edge |
| `tilewm.scratchpad` | `ScratchPad` and `sane_dimension` |
| `tilewm.tag` | `Tag` and the `Tags` list |
| `tilewm.focus_manager` | `FocusBehaviour` and `FocusManager` |
| `tilewm.dto` | `ManagerState`, `Viewport`, and `DisplayState` built from it for status bars |
| `tilewm.movement` | `move_window`, `resize_window`, `snap_to_workspace`, `should_snap`, `handle_window_move` |

## Examples

### Tags and windows

```python
from tilewm.tag import Tags
from tilewm.window import Window, WindowHandle

tags = Tags()
home = tags.add_new("home")        # 1
code = tags.add_new("code")        # 2
nsp = tags.add_new_hidden("NSP")   # hidden tags count down from 2**64 - 1
tags.add_new_hidden("NSP")         # None: hidden labels are unique

window = Window(WindowHandle.mock(1), name="terminal")
window.set_tag(home)
assert window.has_tag(home)
```

Normal tags are numbered 1, 2, 3, ... without gaps; `Tags.all()` lists the
normal tags followed by the hidden ones, and `Tags.get(tag_id)` finds either.

### Rectangles

```python
from tilewm.xyhw import Xyhw

screen = Xyhw(x=0, y=0, w=1000, h=1000)
panel = Xyhw(w=100, h=10)
usable = screen.without(panel)     # x=0, y=10, w=1000, h=990
usable.center()                    # (500, 505)
```

Setting `x`, `y`, `w`, `h` or any limit on an `Xyhw` clamps the width and
height back into `minw..maxw` and `minh..maxh`.

### Workspaces

```python
from tilewm.screen import BBox
from tilewm.size import Gutter, Margins, Side
from tilewm.workspace import Workspace

workspace = Workspace(BBox(x=0, y=0, width=1920, height=1080), 1)
workspace.show_tag(home)
workspace.load_config(Margins.uniform(5), [Gutter(Side.TOP, 20)])
workspace.rect()                   # the area windows are laid out in
```

A workspace's `x()`, `y()`, `width()` and `height()` take away its margins
(scaled by `margin_multiplier`), its gutters, and any areas listed in
`avoid` once `update_avoided_areas()` has been called.

### Moving and resizing floating windows

```python
from tilewm.movement import handle_window_move, resize_window

resize_window(window, 50, 20)      # float, and grow from the size at drag start
snapped = handle_window_move(window, [workspace], 10, 10, disable_snap=False)
```

Offsets are applied relative to `window.start_loc`. After a move, if the
window may tile (`must_float()` is false) and one of its edges is within ten
pixels of the matching edge of the workspace under its centre, it stops
floating and takes that workspace's tag; `handle_window_move` then returns
True so the caller can re-sort its stacking order.

## What this package does not do

It keeps the state a window manager reasons about and does the geometry for
it, and nothing more. It does not connect to a display server, draw anything,
read configuration files, run an event loop, or apply tiling layouts: the
layout names in `tilewm.kinds` are plain strings, and placing tiled windows
inside `Workspace.rect()` is left to the caller. There is no command to run.

Warnings and errors (a negative margin multiplier, a duplicate hidden tag
label) are reported through the standard `logging` module.