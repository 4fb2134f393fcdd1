from types import SimpleNamespace

from tilewm.kinds import WindowState, WindowType
from tilewm.window import Window, WindowHandle
from tilewm.xyhw import Xyhw


def make_window(handle: int = 1) -> Window:
    return Window(WindowHandle.mock(handle), None, None)


def test_should_be_able_to_tag_a_window():
    subject = make_window()
    subject.set_tag(1)
    assert subject.has_tag(1), "was unable to tag the window"


def test_should_be_able_to_untag_a_window():
    subject = make_window()
    subject.set_tag(1)
    subject.untag()
    assert not subject.has_tag(1), "was unable to untag the window"


def test_handle_xlib_value():
    assert WindowHandle.mock(3).xlib_handle() is None
    assert WindowHandle.xlib(42).xlib_handle() == 42
    assert WindowHandle.mock(3) == WindowHandle.mock(3)
    assert WindowHandle.mock(3) != WindowHandle.xlib(3)


def test_visibility():
    window = make_window()
    assert window.visible() is False
    window.set_visible(True)
    assert window.visible() is True
    menu = make_window(2)
    menu.window_type = WindowType.MENU
    assert menu.visible() is True


def test_can_focus_requires_visibility():
    window = make_window()
    assert window.can_focus() is False
    window.set_visible(True)
    assert window.can_focus() is True
    window.never_focus = True
    assert window.can_focus() is False


def test_set_floating_resets_offsets():
    window = make_window()
    assert window.get_floating_offsets() is None
    window.set_floating(True)
    assert window.floating() is True
    assert window.get_floating_offsets() == Xyhw()


def test_dock_must_float_and_cannot_resize():
    dock = make_window()
    dock.window_type = WindowType.DOCK
    assert dock.is_managed() is False
    assert dock.must_float() is True
    assert dock.floating() is True
    assert dock.can_resize() is False
    assert dock.can_move() is False


def test_transient_must_float():
    window = make_window()
    window.transient = WindowHandle.mock(9)
    assert window.must_float() is True


def test_tiled_geometry_applies_margins_and_border():
    window = make_window()
    window.normal = Xyhw(x=0, y=0, w=1000, h=800)
    assert window.width() == 978
    assert window.height() == 778
    assert window.x() == 10
    assert window.y() == 10


def test_managed_window_has_minimum_size():
    window = make_window()
    window.normal = Xyhw(w=50, h=50)
    assert window.width() == 100
    assert window.height() == 100


def test_unmanaged_window_has_no_minimum_size():
    dock = make_window()
    dock.window_type = WindowType.DOCK
    dock.normal = Xyhw(w=50, h=50)
    assert dock.width() == 28
    assert dock.height() == 28


def test_fullscreen_uses_normal_geometry_and_no_border():
    window = make_window()
    window.normal = Xyhw(x=5, y=6, w=1000, h=800)
    window.set_states([WindowState.FULLSCREEN])
    assert window.width() == 1000
    assert window.height() == 800
    assert window.x() == 5
    assert window.effective_border() == 0


def test_floating_geometry_uses_offsets():
    window = make_window()
    window.normal = Xyhw(x=0, y=0, w=1000, h=800)
    window.set_floating(True)
    window.set_floating_offsets(Xyhw(x=5, y=6, w=-500, h=-400))
    assert window.x() == 5
    assert window.y() == 6
    assert window.width() == 498
    assert window.height() == 398


def test_set_floating_exact_round_trips_through_exact_xyhw():
    window = make_window()
    window.normal = Xyhw(x=10, y=10, w=100, h=100)
    window.set_floating(True)
    target = Xyhw(x=20, y=30, w=200, h=300)
    window.set_floating_exact(target)
    assert window.exact_xyhw() == target


def test_floating_offsets_are_copies():
    window = make_window()
    window.set_floating(True)
    offsets = window.get_floating_offsets()
    offsets.x = 77
    assert window.get_floating_offsets().x == 0


def test_negative_margin_multiplier_is_made_absolute():
    window = make_window()
    window.apply_margin_multiplier(-2.0)
    assert window.margin_multiplier == 2.0


def test_states_management():
    window = make_window()
    window.set_states([WindowState.MAXIMIZED, WindowState.STICKY])
    assert window.is_maximized() and window.is_sticky()
    states = window.states()
    states.clear()
    assert window.has_state(WindowState.STICKY)
    window.drop_state(WindowState.STICKY)
    assert window.states() == [WindowState.MAXIMIZED]


def test_contains_point():
    window = make_window()
    window.normal = Xyhw(x=0, y=0, w=1000, h=800)
    assert window.contains_point(500, 400)
    assert not window.contains_point(5, 5)


def test_snap_to_workspace_moves_to_new_tag():
    window = make_window()
    window.set_tag(1)
    window.normal = Xyhw(x=100, y=50, w=300, h=300)
    window.set_floating(True)
    window.set_floating_offsets(None)
    workspace = SimpleNamespace(tag=2, xyhw=Xyhw(x=1000, y=0, w=800, h=600))
    assert window.snap_to_workspace(workspace) is True
    assert window.tag == 2
    assert window._is_floating is False
    offsets = window.get_floating_offsets()
    assert (offsets.x, offsets.y) == (-900, 50)
    assert (window.start_loc.x, window.start_loc.y) == (-900, 50)


def test_snap_to_workspace_same_tag_keeps_offsets():
    window = make_window()
    window.set_tag(2)
    workspace = SimpleNamespace(tag=2, xyhw=Xyhw(x=1000, y=0, w=800, h=600))
    assert window.snap_to_workspace(workspace) is True
    assert window.get_floating_offsets() is None
    assert window.start_loc is None