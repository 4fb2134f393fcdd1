from tilewm.dock_area import DockArea
from tilewm.screen import BBox, Screen
from tilewm.window import WindowHandle


def test_default_screen_geometry():
    screen = Screen()
    assert screen.bbox == BBox(x=0, y=0, width=800, height=600)
    assert screen.root == WindowHandle.mock(0)
    assert screen.id is None
    assert screen.output == ""


def test_contains_point_is_inclusive_of_edges():
    screen = Screen()
    assert screen.contains_point(0, 0)
    assert screen.contains_point(800, 600)
    assert not screen.contains_point(801, 0)
    assert not screen.contains_point(0, -1)


def test_bbox_add_with_zero_is_identity():
    box = BBox(x=3, y=4, width=5, height=6)
    box.add(BBox())
    assert box == BBox(x=3, y=4, width=5, height=6)


def test_bbox_add_accumulates_each_field():
    box = BBox(x=1, y=2, width=3, height=4)
    other = BBox(x=1, y=2, width=3, height=4)
    box.add(other)
    assert box == BBox(x=other.x * 2, y=other.y * 2, width=other.width * 2, height=other.height * 2)


def test_contains_top_dock():
    dock = DockArea(top=20, top_start_x=10, top_end_x=200)
    assert Screen().contains_dock_area(dock, (600, 800))
    other = Screen(bbox=BBox(x=1000, y=0, width=800, height=600))
    assert not other.contains_dock_area(dock, (600, 1800))


def test_contains_bottom_dock():
    dock = DockArea(bottom=20, bottom_start_x=10)
    assert Screen().contains_dock_area(dock, (600, 800))
    assert not Screen().contains_dock_area(dock, (2000, 800))


def test_contains_side_docks():
    left = DockArea(left=20, left_start_y=10)
    right = DockArea(right=20, right_start_y=10)
    assert Screen().contains_dock_area(left, (600, 800))
    assert Screen().contains_dock_area(right, (600, 800))
    assert not Screen().contains_dock_area(right, (600, 2000))


def test_empty_dock_is_nowhere():
    assert not Screen().contains_dock_area(DockArea(), (600, 800))