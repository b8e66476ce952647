"""Writes an OCR region to a BMP file, optionally marking the detected letters."""

from __future__ import annotations

import os
import struct
from enum import IntEnum

from .bounding_box import LetterBoundingBox, LetterBoundingBoxScanner, is_valid_color_at
from .game_types import TeamType
from .ocr_pixels import LetterColor, OCRDetectionMode, OCRPixelData

MARK_COLOR = 0xFFFF00
_RGB_MASK = 0xFFFFFF
_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_RGBQUAD_SIZE = 4
_BI_RGB = 0


class ImageDumpType(IntEnum):
    PLAIN = 0
    WITH_BOUNDING_BOXES_ONLY = 1
    WITH_FILL_ONLY = 2
    WITH_BOUNDING_BOX_AND_FILL = 3


def _color_bits(bits_per_pixel: int) -> int:
    for limit in (1, 4, 8, 16, 24):
        if bits_per_pixel <= limit:
            return limit
    return 32


def _image_size(width: int, height: int, bits_per_pixel: int) -> int:
    return ((width * _color_bits(bits_per_pixel) + 31) & ~31) // 8 * height


def bitmap_headers(width: int, height: int, bits_per_pixel: int = 32) -> bytes:
    """The file header, info header and zeroed colour table of an uncompressed BMP."""
    if width < 0 or height < 0:
        raise ValueError("bitmap width and height must not be negative")
    if bits_per_pixel < 1:
        raise ValueError("bits per pixel must be positive")
    color_bits = _color_bits(bits_per_pixel)
    colors_used = 1 << color_bits if color_bits < 24 else 0
    size_image = _image_size(width, height, bits_per_pixel)
    table_size = colors_used * _RGBQUAD_SIZE
    offset = _FILE_HEADER.size + _INFO_HEADER.size + table_size
    file_header = _FILE_HEADER.pack(b"BM", offset + size_image, 0, 0, offset)
    info_header = _INFO_HEADER.pack(
        _INFO_HEADER.size,
        width,
        height,
        1,
        bits_per_pixel & 0xFFFF,
        _BI_RGB,
        size_image,
        0,
        0,
        colors_used,
        0,
    )
    return file_header + info_header + bytes(table_size)


def _display_color(pixel_data: OCRPixelData, x: int, y: int) -> int:
    row = pixel_data.height - y - 1
    if 0 <= x < pixel_data.width and 0 <= row < pixel_data.height:
        return pixel_data.pixel(x, row) & _RGB_MASK
    return 0


def _draw(pixel_data: OCRPixelData, color: int, x: int, y: int) -> None:
    row = pixel_data.height - y - 1
    if 0 <= x < pixel_data.width and 0 <= row < pixel_data.height:
        pixel_data.set_pixel(x, row, color)


class OCRImageDumper:
    """Renders a team's OCR region with its letters boxed or filled."""

    def __init__(self, pixel_data: OCRPixelData, team_type: TeamType):
        self.pixel_data = pixel_data
        self.team_type = team_type

    @property
    def _letter_color(self) -> LetterColor:
        return LetterColor.BLUE if self.team_type == TeamType.BLUE else LetterColor.RED

    def render(self, dump_type: ImageDumpType) -> OCRPixelData:
        """A copy of the region with the letters marked as ``dump_type`` asks."""
        copy = self.pixel_data.copy()
        if dump_type not in (ImageDumpType.WITH_FILL_ONLY, ImageDumpType.WITH_BOUNDING_BOXES_ONLY):
            return copy
        scanner = LetterBoundingBoxScanner(copy, self._letter_color)
        boxes = scanner.detect_bounding_boxes(OCRDetectionMode.WESTERN_RAYFILL)
        for box in boxes:
            if dump_type == ImageDumpType.WITH_FILL_ONLY:
                self._span_fill(copy, scanner.find_first_valid_pixel_inside(box))
            else:
                self._draw_bounding_box(copy, box)
        return copy

    def dump_image(self, output_path: str | os.PathLike[str], dump_type: ImageDumpType) -> None:
        """Write the rendered region as a 32-bit BMP file."""
        rendered = self.render(dump_type)
        width, height = rendered.width, rendered.height
        size_image = _image_size(width, height, 32)
        pixels = rendered.pixels
        data = struct.pack(f"<{len(pixels)}I", *pixels)[:size_image]
        with open(output_path, "wb") as handle:
            handle.write(bitmap_headers(width, height, 32))
            handle.write(data)

    def _span_fill(self, pixel_data: OCRPixelData, seed: tuple[int, int] | None) -> None:
        if seed is None:
            return
        seed_x, seed_y = seed
        if not (0 <= seed_x < pixel_data.width and 0 <= seed_y < pixel_data.height):
            return
        letter_color = self._letter_color

        def inside(x: int, y: int) -> bool:
            already_set = (_display_color(pixel_data, x, y) & MARK_COLOR) == MARK_COLOR
            return not already_set and is_valid_color_at(pixel_data, letter_color, x, y)

        stack = [(seed_x, seed_y, seed_x, 1), (seed_x, seed_y - 1, seed_x, -1)]
        while stack:
            cur_left, cur_top, cur_right, direction = stack.pop()
            x = cur_left
            if inside(x, cur_top):
                while inside(x - 1, cur_top):
                    x -= 1
                    _draw(pixel_data, MARK_COLOR, x, cur_top)
                if x < cur_left:
                    stack.append((x, cur_top - direction, cur_left - 1, -direction))
            while cur_left <= cur_right:
                while inside(cur_left, cur_top):
                    _draw(pixel_data, MARK_COLOR, cur_left, cur_top)
                    cur_left += 1
                if cur_left > x:
                    stack.append((x, cur_top + direction, cur_left - 1, direction))
                if cur_left - 1 > cur_right:
                    stack.append((cur_right, cur_top - direction, cur_left - 1, -direction))
                cur_left += 1
                while cur_left < cur_right and not inside(cur_left, cur_top):
                    cur_left += 1
                x = cur_left

    @staticmethod
    def _draw_bounding_box(pixel_data: OCRPixelData, box: LetterBoundingBox) -> None:
        for x in range(box.left, box.right):
            for y in range(box.top, box.bottom):
                _draw(pixel_data, MARK_COLOR, x, y)