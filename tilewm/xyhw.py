"""Rectangles with size limits, used for window and workspace geometry."""

from __future__ import annotations

from dataclasses import dataclass

UNBOUNDED_MIN = -999_999_999
UNBOUNDED_MAX = 999_999_999

_FIELDS = ("x", "y", "h", "w", "minw", "maxw", "minh", "maxh")


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


@dataclass(frozen=True)
class Rect:
    """A plain rectangle with an unsigned width and height."""

    x: int
    y: int
    w: int
    h: int


def _limited(name: str) -> property:
    attr = "_" + name

    def fget(self: "Xyhw") -> int:
        return getattr(self, attr)

    def fset(self: "Xyhw", value: int) -> None:
        setattr(self, attr, value)
        self.update_limits()

    return property(fget, fset, doc=f"The {name} value; setting it re-applies the size limits.")


class Xyhw:
    """Position, size and min/max size limits of a rectangle; x and y from the top left."""

    __slots__ = tuple("_" + name for name in _FIELDS)

    x = _limited("x")
    y = _limited("y")
    h = _limited("h")
    w = _limited("w")
    minw = _limited("minw")
    maxw = _limited("maxw")
    minh = _limited("minh")
    maxh = _limited("maxh")

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        h: int = 0,
        w: int = 0,
        minw: int = UNBOUNDED_MIN,
        maxw: int = UNBOUNDED_MAX,
        minh: int = UNBOUNDED_MIN,
        maxh: int = UNBOUNDED_MAX,
    ) -> None:
        self._x = x
        self._y = y
        self._h = h
        self._w = w
        self._minw = minw
        self._maxw = maxw
        self._minh = minh
        self._maxh = maxh
        self.update_limits()

    @classmethod
    def _raw(cls, **values: int) -> "Xyhw":
        """Build without applying the size limits."""
        obj = cls.__new__(cls)
        for name in _FIELDS:
            setattr(obj, "_" + name, values[name])
        return obj

    def _values(self) -> dict[str, int]:
        return {name: getattr(self, "_" + name) for name in _FIELDS}

    def copy(self) -> "Xyhw":
        return self._raw(**self._values())

    @classmethod
    def from_rect(cls, rect: Rect) -> "Xyhw":
        return cls(x=rect.x, y=rect.y, w=rect.w, h=rect.h)

    def to_rect(self) -> Rect:
        return Rect(x=self._x, y=self._y, w=abs(self._w), h=abs(self._h))

    def update_limits(self) -> None:
        """Clamp width and height into their min/max range."""
        if self._h > self._maxh:
            self._h = self._maxh
        if self._w > self._maxw:
            self._w = self._maxw
        if self._h < self._minh:
            self._h = self._minh
        if self._w < self._minw:
            self._w = self._minw

    def clear_minmax(self) -> None:
        self._minw = UNBOUNDED_MIN
        self._maxw = UNBOUNDED_MAX
        self._minh = UNBOUNDED_MIN
        self._maxh = UNBOUNDED_MAX
        self.update_limits()

    def contains_point(self, x: int, y: int) -> bool:
        max_x = self._x + self._w
        max_y = self._y + self._h
        return self._x <= x <= max_x and self._y <= y <= max_y

    def contains_xyhw(self, other: "Xyhw") -> bool:
        return self.contains_point(other.x, other.y) and self.contains_point(
            other.x + other.w, other.y + other.h
        )

    def volume(self) -> int:
        mask = (1 << 64) - 1
        return ((self._h & mask) * (self._w & mask)) & mask

    def without(self, other: "Xyhw") -> "Xyhw":
        """Trim ``other`` out of this rectangle so that they no longer overlap."""
        result = self.copy()
        if other.w > other.h:
            # horizontal trim
            if other.y > self._y + _trunc_div(self._h, 2):
                bottom_over = (result._y + result._h) - other.y
                if bottom_over > 0:
                    result._h -= bottom_over
            else:
                top_over = (other.y + other.h) - result._y
                if top_over > 0:
                    result._y += top_over
                    result._h -= top_over
        else:
            # vertical trim
            left_over = (other.x + other.w) - result._x
            if other.x > self._x + _trunc_div(self._w, 2):
                right_over = (result._x + result._w) - other.x
                if right_over > 0:
                    result._w -= right_over
            elif left_over > 0:
                result._x += left_over
                result._w -= left_over
        return result

    def center_halfed(self) -> "Xyhw":
        return Xyhw(
            x=self._x + _trunc_div(self._w, 2) - _trunc_div(self._w, 4),
            y=self._y + _trunc_div(self._h, 2) - _trunc_div(self._h, 4),
            h=_trunc_div(self._h, 2),
            w=_trunc_div(self._w, 2),
        )

    def center_relative(self, outer: "Xyhw", border: int) -> None:
        """Move this rectangle to the centre of ``outer``."""
        self._x = outer.x + _trunc_div(outer.w, 2) - _trunc_div(self._w, 2) - border
        self._y = outer.y + _trunc_div(outer.h, 2) - _trunc_div(self._h, 2) - border

    def center(self) -> tuple[int, int]:
        return (self._x + _trunc_div(self._w, 2), self._y + _trunc_div(self._h, 2))

    def _combine(self, other: "Xyhw", sign: int) -> "Xyhw":
        return self._raw(
            x=self._x + sign * other.x,
            y=self._y + sign * other.y,
            w=self._w + sign * other.w,
            h=self._h + sign * other.h,
            minw=max(self._minw, other.minw),
            maxw=min(self._maxw, other.maxw),
            minh=max(self._minh, other.minh),
            maxh=min(self._maxh, other.maxh),
        )

    def __add__(self, other: "Xyhw") -> "Xyhw":
        if not isinstance(other, Xyhw):
            return NotImplemented
        return self._combine(other, 1)

    def __sub__(self, other: "Xyhw") -> "Xyhw":
        if not isinstance(other, Xyhw):
            return NotImplemented
        return self._combine(other, -1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Xyhw):
            return NotImplemented
        return self._values() == other._values()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value}" for name, value in self._values().items())
        return f"Xyhw({fields})"