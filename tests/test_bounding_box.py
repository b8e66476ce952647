import pytest

from liveoverlay.bounding_box import (
    LetterBoundingBox,
    LetterBoundingBoxScanner,
    is_valid_color,
    is_valid_color_at,
    pixel_value,
)
from liveoverlay.ocr_pixels import LetterColor, OCRDetectionMode, OCRPixelData, Rect

COLORS = {".": 0x000000, "B": 0x0000FF, "G": 0x00FF00, "R": 0xFF0000}

EMPTY = ["........", "........", "........", "........", "........"]
ONE_BLOB = ["........", "..BB....", "..BB....", "..BB....", "........"]
TWO_BLOBS = ["........", "..BB.BB.", "..BB.BB.", "..BB.BB.", "........"]
RED_BLOB = [row.replace("B", "R") for row in ONE_BLOB]

# Blob extents as drawn above: (left, top, right, bottom), rows counted from the top.
FIRST_BLOB = (2, 1, 3, 3)
SECOND_BLOB = (5, 1, 6, 3)


def make_pixels(rows):
    """Build pixel data from rows drawn top first; memory holds the bottom row first."""
    height, width = len(rows), len(rows[0])
    pixels = [COLORS[ch] for row in reversed(rows) for ch in row]
    return OCRPixelData(Rect(0, 0, width, height), pixels)


def with_margin(extent):
    left, top, right, bottom = extent
    return Rect(left - 1, top - 1, right + 1, bottom + 1)


def test_pixel_value_of_single_channel():
    assert pixel_value(0x0000FF) == 0xFF
    assert pixel_value(0) == 0


@pytest.mark.parametrize("color", [0x123456, 0xFFFFFF, 0x0000FF, 0x808080])
def test_pixel_value_ignores_alpha(color):
    assert pixel_value(color | 0xFF000000) == pixel_value(color)


@pytest.mark.parametrize(
    "color, dominant, expected",
    [
        (0x0000FF, LetterColor.BLUE, True),
        (0x00FF00, LetterColor.GREEN, True),
        (0xFF0000, LetterColor.RED, True),
        (0x0000FF, LetterColor.RED, False),
        (0xFF0000, LetterColor.BLUE, False),
        (0x00FF00, LetterColor.BLUE, False),
        (0x808080, LetterColor.BLUE, False),
        (0x808080, LetterColor.GREEN, False),
        (0x808080, LetterColor.RED, False),
    ],
)
def test_is_valid_color(color, dominant, expected):
    assert is_valid_color(color, pixel_value(color), dominant) is expected


def test_is_valid_color_needs_minimum_value():
    assert is_valid_color(0x0000FF, 0x9F, LetterColor.BLUE) is False
    assert is_valid_color(0x0000FF, 0xA0, LetterColor.BLUE) is True


def test_is_valid_color_at_counts_rows_from_top():
    rows = ["B..", "...", "..."]
    data = make_pixels(rows)
    assert is_valid_color_at(data, LetterColor.BLUE, 0, 0) is True
    assert is_valid_color_at(data, LetterColor.BLUE, 0, 2) is False
    assert data.pixel(0, data.height - 1) == COLORS["B"]


def test_is_valid_color_at_outside_region_is_false():
    data = make_pixels(["BBB", "BBB"])
    assert is_valid_color_at(data, LetterColor.BLUE, -1, 0) is False
    assert is_valid_color_at(data, LetterColor.BLUE, data.width, 0) is False
    assert is_valid_color_at(data, LetterColor.BLUE, 0, data.height) is False


def test_fresh_box_is_empty_and_invalid():
    box = LetterBoundingBox(make_pixels(EMPTY), LetterColor.BLUE)
    assert box.box == Rect(0, 0, 0, 0)
    assert box.is_valid is False
    assert box.detection_mode == OCRDetectionMode.WESTERN_RAYFILL


def test_box_width_and_height_follow_edges():
    box = LetterBoundingBox(make_pixels(EMPTY), LetterColor.BLUE)
    box.left, box.top, box.right, box.bottom = 2, 1, 6, 4
    assert box.width == box.right - box.left
    assert box.height == box.bottom - box.top
    assert box.is_valid is True


def test_override_x_keeps_sum_of_edges():
    box = LetterBoundingBox(make_pixels(EMPTY), LetterColor.BLUE)
    box.left, box.top, box.right, box.bottom = 2, 1, 6, 4
    before = box.left + box.right
    box.override_x(5)
    assert box.left == 5
    assert box.left + box.right == before


@pytest.mark.parametrize(
    "mode", [OCRDetectionMode.WESTERN_RAYFILL, OCRDetectionMode.KOREAN, OCRDetectionMode.WESTERN_SPANFLOOD]
)
def test_empty_region_has_no_boxes(mode):
    scanner = LetterBoundingBoxScanner(make_pixels(EMPTY), LetterColor.BLUE)
    assert scanner.detect_bounding_boxes(mode) == []


@pytest.mark.parametrize("mode", [OCRDetectionMode.WESTERN_RAYFILL, OCRDetectionMode.KOREAN])
def test_single_blob_gets_one_pixel_margin(mode):
    scanner = LetterBoundingBoxScanner(make_pixels(ONE_BLOB), LetterColor.BLUE)
    boxes = scanner.detect_bounding_boxes(mode)
    assert [box.box for box in boxes] == [with_margin(FIRST_BLOB)]


@pytest.mark.parametrize("mode", [OCRDetectionMode.WESTERN_RAYFILL, OCRDetectionMode.KOREAN])
def test_two_blobs_are_found_left_to_right(mode):
    scanner = LetterBoundingBoxScanner(make_pixels(TWO_BLOBS), LetterColor.BLUE)
    boxes = scanner.detect_bounding_boxes(mode)
    assert [box.box for box in boxes] == [with_margin(FIRST_BLOB), with_margin(SECOND_BLOB)]


def test_span_flood_finds_both_blobs():
    scanner = LetterBoundingBoxScanner(make_pixels(TWO_BLOBS), LetterColor.BLUE)
    boxes = scanner.detect_bounding_boxes(OCRDetectionMode.WESTERN_SPANFLOOD)
    assert len(boxes) == 2
    for box, (left, _top, right, _bottom) in zip(boxes, (FIRST_BLOB, SECOND_BLOB)):
        assert box.is_valid
        assert box.left <= left
        assert box.right >= right
    assert boxes[0].right < boxes[1].right


def test_other_colour_is_ignored():
    blue_scanner = LetterBoundingBoxScanner(make_pixels(RED_BLOB), LetterColor.BLUE)
    red_scanner = LetterBoundingBoxScanner(make_pixels(RED_BLOB), LetterColor.RED)
    assert blue_scanner.detect_bounding_boxes(OCRDetectionMode.WESTERN_RAYFILL) == []
    boxes = red_scanner.detect_bounding_boxes(OCRDetectionMode.WESTERN_RAYFILL)
    assert [box.box for box in boxes] == [with_margin(FIRST_BLOB)]


def test_korean_fill_joins_diagonal_pixels():
    rows = ["B..", ".B.", "..B"]
    scanner = LetterBoundingBoxScanner(make_pixels(rows), LetterColor.BLUE)
    boxes = scanner.detect_bounding_boxes(OCRDetectionMode.KOREAN)
    assert len(boxes) == 1
    box = boxes[0]
    assert box.left <= 0 and box.top <= 0
    assert box.right >= 2 and box.bottom >= 2


def test_letter_on_left_edge():
    data = make_pixels(["B.", "B.", "B."])
    scanner = LetterBoundingBoxScanner(data, LetterColor.BLUE)
    assert scanner.detect_bounding_boxes(OCRDetectionMode.WESTERN_RAYFILL) == []
    boxes = scanner.detect_bounding_boxes(OCRDetectionMode.KOREAN)
    assert len(boxes) == 1
    assert boxes[0].left == 0


def test_converted_box_uses_memory_rows():
    scanner = LetterBoundingBoxScanner(make_pixels(ONE_BLOB), LetterColor.BLUE)
    (box,) = scanner.detect_bounding_boxes(OCRDetectionMode.WESTERN_RAYFILL)
    assert box.converted_box == Rect(1, 4, 4, 0)


def test_first_valid_pixel_inside_box():
    data = make_pixels(ONE_BLOB)
    scanner = LetterBoundingBoxScanner(data, LetterColor.BLUE)
    (box,) = scanner.detect_bounding_boxes(OCRDetectionMode.WESTERN_RAYFILL)
    found = scanner.find_first_valid_pixel_inside(box)
    assert found is not None
    x, y = found
    assert y == data.height // 2
    assert box.left <= x <= box.right
    assert is_valid_color_at(data, LetterColor.BLUE, x, y)


def test_first_valid_pixel_missing_in_empty_region():
    data = make_pixels(EMPTY)
    scanner = LetterBoundingBoxScanner(data, LetterColor.BLUE)
    assert scanner.find_first_valid_pixel_inside(LetterBoundingBox(data, LetterColor.BLUE)) is None


def test_first_valid_pixel_missing_for_negative_left():
    data = make_pixels(ONE_BLOB)
    scanner = LetterBoundingBoxScanner(data, LetterColor.BLUE)
    box = LetterBoundingBox(data, LetterColor.BLUE)
    box.left = -1
    assert scanner.find_first_valid_pixel_inside(box) is None