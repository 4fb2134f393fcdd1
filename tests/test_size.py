import pytest

from tilewm.size import Gutter, Margins, Side, Size


def test_pixel_size_is_returned_unchanged():
    assert Size.pixel(37).into_absolute(1000) == 37


@pytest.mark.parametrize("whole", [0, 1, 599, 800, 1920])
def test_full_ratio_is_the_whole(whole):
    assert Size.ratio(1.0).into_absolute(whole) == whole


@pytest.mark.parametrize("whole", [1, 800, 1920])
def test_zero_ratio_is_zero(whole):
    assert Size.ratio(0.0).into_absolute(whole) == 0


@pytest.mark.parametrize("whole", [3, 801, 1921])
def test_ratio_never_exceeds_whole(whole):
    assert 0 <= Size.ratio(0.5).into_absolute(whole) <= whole


def test_ratio_and_pixel_are_distinct():
    assert Size.ratio(1.0) != Size.pixel(1)


def test_uniform_margins():
    margins = Margins.uniform(10)
    assert (margins.top, margins.right, margins.bottom, margins.left) == (10, 10, 10, 10)


def test_margins_from_pair():
    margins = Margins.from_pair(4, 7)
    assert margins == Margins(top=4, right=7, bottom=4, left=7)


def test_margins_from_triple():
    margins = Margins.from_triple(1, 2, 3)
    assert margins == Margins(top=1, right=2, bottom=3, left=2)


def test_negative_margins_rejected():
    with pytest.raises(ValueError):
        Margins.uniform(-1)


def test_gutter_default():
    assert Gutter() == Gutter(side=Side.TOP, value=0, id=None)


def test_gutter_holds_values():
    gutter = Gutter(Side.LEFT, 12, 2)
    assert (gutter.side, gutter.value, gutter.id) == (Side.LEFT, 12, 2)