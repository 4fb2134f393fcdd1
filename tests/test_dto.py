import pytest

from tilewm.dto import DisplayState, ManagerState, Viewport


def _viewport(id, tag, output="HDMI-1", layout="MainAndVertStack"):
    return Viewport(id=id, output=output, tag=tag, h=600, w=800, x=0, y=0, layout=layout)


@pytest.fixture
def manager_state():
    return ManagerState(
        window_title=None,
        desktop_names=["1", "2", "3"],
        viewports=[_viewport(1, "1", "HDMI-1"), _viewport(2, "2", "DP-1", "Monocle")],
        active_desktop=["1"],
        working_tags=["1", "3"],
        urgent_tags=["3"],
    )


def test_missing_title_becomes_empty(manager_state):
    display = DisplayState.from_manager_state(manager_state)
    assert display.window_title == ""


def test_title_is_kept(manager_state):
    manager_state.window_title = "term"
    display = DisplayState.from_manager_state(manager_state)
    assert display.window_title == "term"


def test_one_workspace_per_viewport(manager_state):
    display = DisplayState.from_manager_state(manager_state)
    assert [ws.index for ws in display.workspaces] == [0, 1]
    assert [ws.id for ws in display.workspaces] == [1, 2]
    assert [ws.output for ws in display.workspaces] == ["HDMI-1", "DP-1"]
    assert [ws.layout for ws in display.workspaces] == ["MainAndVertStack", "Monocle"]


def test_geometry_is_copied(manager_state):
    display = DisplayState.from_manager_state(manager_state)
    ws = display.workspaces[0]
    assert (ws.x, ws.y, ws.w, ws.h) == (0, 0, 800, 600)


def test_tags_are_listed_in_order(manager_state):
    display = DisplayState.from_manager_state(manager_state)
    for ws in display.workspaces:
        assert [t.name for t in ws.tags] == ["1", "2", "3"]
        assert [t.index for t in ws.tags] == [0, 1, 2]


def test_mine_marks_the_shown_tag(manager_state):
    display = DisplayState.from_manager_state(manager_state)
    assert [t.mine for t in display.workspaces[0].tags] == [True, False, False]
    assert [t.mine for t in display.workspaces[1].tags] == [False, True, False]


def test_visible_focused_urgent_busy(manager_state):
    display = DisplayState.from_manager_state(manager_state)
    tags = display.workspaces[1].tags
    assert [t.visible for t in tags] == [True, True, False]
    assert [t.focused for t in tags] == [True, False, False]
    assert [t.urgent for t in tags] == [False, False, True]
    assert [t.busy for t in tags] == [True, False, True]


def test_no_viewports_gives_no_workspaces():
    display = DisplayState.from_manager_state(ManagerState(desktop_names=["1"]))
    assert display.workspaces == []