"""Pixel regions of the game window that hold the team gold and grub counters."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from .game_types import TeamType


@dataclass(frozen=True)
class Rect:
    """A rectangle; OCR regions store their width in ``right`` and height in ``bottom``."""

    left: int
    top: int
    right: int
    bottom: int


@dataclass
class TeamObjectiveValues:
    money: float = 0.0
    grubs: int = 0


class OCRDetectionMode(IntEnum):
    WESTERN_RAYFILL = 0
    WESTERN_SPANFLOOD = 1
    KOREAN = 2


class LetterColor(IntEnum):
    GREEN = 0
    BLUE = 1
    RED = 2


class OCRPixelData:
    """32-bit pixels of one OCR region, stored row by row as in the bitmap memory."""

    def __init__(self, rect: Rect, pixels: Sequence[int] | None = None):
        if rect.right < 0 or rect.bottom < 0:
            raise ValueError("region width and height must not be negative")
        self.rect = rect
        size = rect.right * rect.bottom
        if pixels is None:
            self._pixels = [0] * size
        else:
            if len(pixels) != size:
                raise ValueError(f"expected {size} pixels, got {len(pixels)}")
            self._pixels = [p & 0xFFFFFFFF for p in pixels]

    @property
    def width(self) -> int:
        return self.rect.right

    @property
    def height(self) -> int:
        return self.rect.bottom

    @property
    def pixels(self) -> tuple[int, ...]:
        return tuple(self._pixels)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.width + x

    def pixel(self, x: int, y: int) -> int:
        """The stored 32-bit value at memory row ``y``, column ``x``."""
        return self._pixels[self._index(x, y)]

    def set_pixel(self, x: int, y: int, color: int) -> None:
        self._pixels[self._index(x, y)] = color & 0xFFFFFFFF

    def copy(self) -> OCRPixelData:
        return OCRPixelData(self.rect, self._pixels)


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _scaled_rect(
    window_rect: Rect, x_start: float, x_end: float, y_start: float, y_end: float
) -> Rect:
    width = _f32(float(window_rect.right - window_rect.left))
    height = _f32(float(window_rect.bottom - window_rect.top))
    left = _f32(width * _f32(x_start))
    region_width = _f32(_f32(width * _f32(x_end)) - left)
    top = _f32(height * _f32(y_start))
    region_height = _f32(_f32(height * _f32(y_end)) - top)
    return Rect(int(left), int(top), int(region_width), int(region_height))


def blue_money_rect(window_rect: Rect) -> Rect:
    return _scaled_rect(window_rect, 0.4175, 0.4475, 0.015, 0.035)


def red_money_rect(window_rect: Rect) -> Rect:
    return _scaled_rect(window_rect, 0.5775, 0.6075, 0.015, 0.035)


def blue_grubs_rect(window_rect: Rect) -> Rect:
    return _scaled_rect(window_rect, 0.3453, 0.3753, 0.017, 0.035)


def red_grubs_rect(window_rect: Rect) -> Rect:
    return _scaled_rect(window_rect, 0.65, 0.68, 0.017, 0.035)


class TeamOCRPixelData:
    """The money and grubs regions of one team for a given window size."""

    def __init__(self, window_rect: Rect, team_type: TeamType):
        self.team_type = team_type
        self.money: OCRPixelData
        self.grubs: OCRPixelData
        self.on_window_resize(window_rect)

    def on_window_resize(self, window_rect: Rect) -> None:
        """Recreate both regions for the new window size."""
        if self.team_type == TeamType.BLUE:
            money_rect, grubs_rect = blue_money_rect(window_rect), blue_grubs_rect(window_rect)
        else:
            money_rect, grubs_rect = red_money_rect(window_rect), red_grubs_rect(window_rect)
        self.money = OCRPixelData(money_rect)
        self.grubs = OCRPixelData(grubs_rect)