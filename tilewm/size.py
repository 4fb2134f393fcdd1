"""Sizes, margins and gutters."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Size:
    """Either an absolute pixel value or a ratio of some whole."""

    value: float
    is_ratio: bool = False

    @classmethod
    def pixel(cls, value: int) -> "Size":
        return cls(int(value), False)

    @classmethod
    def ratio(cls, value: float) -> "Size":
        return cls(_f32(float(value)), True)

    def into_absolute(self, whole: int) -> int:
        """Pixels are returned as is; a ratio is multiplied by ``whole`` and floored."""
        if not self.is_ratio:
            return int(self.value)
        return math.floor(_f32(_f32(float(whole)) * self.value))


@dataclass(frozen=True)
class Margins:
    top: int
    right: int
    bottom: int
    left: int

    def __post_init__(self) -> None:
        for side in (self.top, self.right, self.bottom, self.left):
            if side < 0:
                raise ValueError(f"margins cannot be negative: {side}")

    @classmethod
    def uniform(cls, size: int) -> "Margins":
        return cls(top=size, right=size, bottom=size, left=size)

    @classmethod
    def from_pair(cls, top_and_bottom: int, left_and_right: int) -> "Margins":
        return cls(
            top=top_and_bottom,
            right=left_and_right,
            bottom=top_and_bottom,
            left=left_and_right,
        )

    @classmethod
    def from_triple(cls, top: int, left_and_right: int, bottom: int) -> "Margins":
        return cls(top=top, right=left_and_right, bottom=bottom, left=left_and_right)


class Side(Enum):
    TOP = "Top"
    BOTTOM = "Bottom"
    LEFT = "Left"
    RIGHT = "Right"


@dataclass(frozen=True)
class Gutter:
    """Extra space kept free on one side of a workspace, optionally for one workspace id."""

    side: Side = Side.TOP
    value: int = 0
    id: int | None = None