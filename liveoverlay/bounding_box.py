"""Bounding boxes of coloured letters and digits inside an OCR region.

Coordinates given to the boxes count rows from the top of the region, while
the pixel memory stores the bottom row first. Pixels outside the region read
as black and never match a letter colour.
"""

from __future__ import annotations

from collections import deque

from .ocr_pixels import LetterColor, OCRDetectionMode, OCRPixelData, Rect

_MIN_PIXEL_VALUE = 0xA0
_MIN_DOMINANT_CHANNEL = 0x90
_RGB_MASK = 0xFFFFFF
_UINT32 = 0xFFFFFFFF

# Channel indices (low byte first) of the dominant channel and the two others.
_CHANNEL_ORDER = {
    LetterColor.BLUE: (0, 1, 2),
    LetterColor.GREEN: (1, 2, 0),
    LetterColor.RED: (2, 1, 0),
}


def pixel_value(color: int) -> int:
    """The sum of the three colour channels of a pixel; alpha is ignored."""
    return ((color >> 16) & 0xFF) + ((color >> 8) & 0xFF) + (color & 0xFF)


def is_valid_color(color: int, value: int, dominant_color: LetterColor) -> bool:
    """True when ``color`` is bright enough and clearly dominated by ``dominant_color``."""
    if value < _MIN_PIXEL_VALUE:
        return False
    order = _CHANNEL_ORDER.get(dominant_color)
    if order is None:
        return False
    channels = (color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF)
    main, first, second = (channels[index] for index in order)
    return (
        main > first + second
        and main > _MIN_DOMINANT_CHANNEL
        and (first < main // 2 or second < main // 2)
    )


def _memory_color(pixel_data: OCRPixelData, x: int, row: int) -> int:
    if 0 <= x < pixel_data.width and 0 <= row < pixel_data.height:
        return pixel_data.pixel(x, row) & _RGB_MASK
    return 0


def _display_color(pixel_data: OCRPixelData, x: int, y: int) -> int:
    return _memory_color(pixel_data, x, pixel_data.height - y - 1)


def is_valid_color_at(pixel_data: OCRPixelData, dominant_color: LetterColor, x: int, y: int) -> bool:
    """Whether the pixel at column ``x``, row ``y`` from the top has the letter colour."""
    color = _display_color(pixel_data, x, y)
    return is_valid_color(color, pixel_value(color), dominant_color)


class LetterBoundingBox:
    """The box around one letter, in coordinates counted from the top of the region."""

    def __init__(self, pixel_data: OCRPixelData, dominant_color: LetterColor):
        self.pixel_data = pixel_data
        self.dominant_color = dominant_color
        self.detection_mode = OCRDetectionMode.WESTERN_RAYFILL
        self.left = 0
        self.top = 0
        self.right = 0
        self.bottom = 0

    def _set(self, left: int, top: int, right: int, bottom: int) -> None:
        self.left, self.top, self.right, self.bottom = left, top, right, bottom

    @property
    def box(self) -> Rect:
        return Rect(self.left, self.top, self.right, self.bottom)

    def override_x(self, x: int) -> None:
        """Move the left edge to ``x``, shifting the right edge the opposite way."""
        self.right -= x - self.left
        self.left = x

    @property
    def converted_box(self) -> Rect:
        """The box with its top and bottom given as rows of the pixel memory."""
        height = self.pixel_data.height
        return Rect(self.left, height - self.top - 1, self.right, height - self.bottom - 1)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def is_valid(self) -> bool:
        return self.left >= 0 and self.top >= 0 and self.right >= 1 and self.bottom >= 1

    def __repr__(self) -> str:
        return f"LetterBoundingBox({self.box!r})"


class LetterBoundingBoxScanner:
    """Finds the letters of one colour in an OCR region, from left to right."""

    def __init__(self, pixel_data: OCRPixelData, dominant_color: LetterColor):
        self.pixel_data = pixel_data
        self.dominant_color = dominant_color

    # Pixel access -------------------------------------------------------

    def _valid(self, color: int) -> bool:
        return is_valid_color(color, pixel_value(color), self.dominant_color)

    def _valid_memory(self, x: int, row: int) -> bool:
        return self._valid(_memory_color(self.pixel_data, x, row))

    def _valid_display(self, x: int, y: int) -> bool:
        return self._valid(_display_color(self.pixel_data, x, y))

    def _connected_left(self, x: int, row: int) -> bool:
        above = row - 1 if row > 0 else 0
        return (
            (row > 0 and self._valid_memory(x - 1, above))
            or self._valid_memory(x - 1, row)
            or self._valid_memory(x - 1, row + 1)
        )

    def _connected_right(self, x: int, row: int) -> bool:
        return (
            (row > 0 and self._valid_memory(x + 1, row - 1))
            or self._valid_memory(x + 1, row)
            or self._valid_memory(x + 1, row + 1)
        )

    # Public interface ---------------------------------------------------

    def detect_bounding_boxes(self, detection_mode: OCRDetectionMode) -> list[LetterBoundingBox]:
        """All letter boxes, each search starting right of the previous box."""
        boxes = []
        x_start = 0
        while True:
            box = self._cast(detection_mode, x_start)
            if not box.is_valid:
                break
            x_start = box.right + 1
            boxes.append(box)
        return boxes

    def find_first_valid_pixel_inside(self, box: LetterBoundingBox) -> tuple[int, int] | None:
        """The first letter pixel on the middle row from the box's left edge, or None."""
        if box.left < 0:
            return None
        probe = LetterBoundingBox(self.pixel_data, self.dominant_color)
        if self._cast_center_ray(probe, box.left):
            return probe.left, probe.top
        return None

    # Detection ----------------------------------------------------------

    def _cast(self, detection_mode: OCRDetectionMode, x_start: int) -> LetterBoundingBox:
        box = LetterBoundingBox(self.pixel_data, self.dominant_color)
        if detection_mode == OCRDetectionMode.WESTERN_RAYFILL:
            self._ray_fill(box, x_start)
        elif detection_mode == OCRDetectionMode.KOREAN:
            if self._cast_center_ray(box, x_start):
                self._quad_fill(box)
        elif self._cast_center_ray(box, x_start):
            self._span_fill(box)
        return box

    def _cast_center_ray(self, box: LetterBoundingBox, x_start: int) -> bool:
        row = self.pixel_data.height // 2
        for x in range(x_start, self.pixel_data.width):
            if self._valid_display(x, row):
                box._set(x, row, x, row + 1)
                return True
        return False

    def _ray_fill(self, box: LetterBoundingBox, x_start: int) -> None:
        self._find_lower(box, x_start)
        self._find_upper(box, x_start)
        self._find_center(box)
        box._set(box.left - 1, box.top - 1, box.right + 1, box.bottom + 1)

    def _find_lower(self, box: LetterBoundingBox, x_start: int) -> None:
        width, height = self.pixel_data.width, self.pixel_data.height
        hit = next(
            (
                (x, row)
                for row in range(height)
                for x in range(x_start, width)
                if self._valid_memory(x, row)
            ),
            None,
        )
        if hit is None:
            box._set(0, 0, 0, 0)
            return
        x, row = hit
        y = height - row - 1
        box._set(x, y, x, y)
        self._cast_upper_left_from_lower(box, x_start)
        self._cast_right_from_lower(box)
        self._cast_upper_right_from_lower(box)

    def _cast_upper_left_from_lower(self, box: LetterBoundingBox, x_start: int) -> None:
        height = self.pixel_data.height
        start_row = height - box.top - 1
        for row in range(start_row + 1, height):
            for x in range(box.left - 1, x_start, -1):
                if not self._valid_memory(x, row):
                    break
                box.left = x
                box.top = height - row - 1

    def _cast_right_from_lower(self, box: LetterBoundingBox) -> None:
        for x in range(box.left + 1, self.pixel_data.width):
            if not self._valid_display(x, box.bottom):
                break
            if x > box.right:
                box.right = x

    def _cast_upper_right_from_lower(self, box: LetterBoundingBox) -> None:
        width, height = self.pixel_data.width, self.pixel_data.height
        start_row = height - box.top - 1
        for row in range(start_row + 1, height):
            for x in range(box.right + 1, width):
                if not self._valid_memory(x, row) or not self._connected_left(x, row):
                    break
                box.right = x
                box.top = height - row - 1

    def _find_upper(self, box: LetterBoundingBox, x_start: int) -> None:
        height = self.pixel_data.height
        lowest_row = height - box.top - 1
        for row in range(height - 1, lowest_row - 1, -1):
            for x in range(x_start, box.right):
                if self._valid_memory(x, row) and self._connected_right(x, row):
                    box.top = height - row - 1
                    if x < box.left:
                        box.left = x
                    self._cast_right_from_upper(box)
                    return

    def _cast_right_from_upper(self, box: LetterBoundingBox) -> None:
        height = self.pixel_data.height
        for x in range(box.left + 1, self.pixel_data.width):
            if not self._valid_memory(x, height - box.top - 1):
                break
            if x > box.right:
                box.right = x

    def _find_center(self, box: LetterBoundingBox) -> None:
        # The row is taken as a memory row, matching how the left edge was widened originally.
        center_row = ((box.bottom - box.top) & _UINT32) // 2
        initial = box.left
        for x in range(initial - 1, max(initial - 4, 0) - 1, -1):
            if not self._valid_memory(x, center_row):
                return
            box.left = x

    def _span_fill(self, box: LetterBoundingBox) -> None:
        filled: set[tuple[int, int]] = set()

        def inside(x: int, y: int) -> bool:
            return (x, y) not in filled and self._valid_display(x, y)

        stack = [
            (box.left, box.top, box.left, 1),
            (box.left, box.top - 1, box.left, -1),
        ]
        left, top, right, bottom = box.left, box.top, 0, 0
        while stack:
            cur_left, cur_top, cur_right, direction = stack.pop()
            x = cur_left
            if inside(x, cur_top):
                while inside(x - 1, cur_top):
                    x -= 1
                    filled.add((x, cur_top))
                if x < cur_left:
                    stack.append((x, cur_top - direction, cur_left - 1, -direction))
            left = min(left, cur_left, x)
            top = min(top, cur_top)
            if cur_left > right:
                right = cur_left
            if x > right:
                right = cur_left
            bottom = max(bottom, cur_top)
            while cur_left <= cur_right:
                while inside(cur_left, cur_top):
                    filled.add((cur_left, cur_top))
                    cur_left += 1
                if cur_left > x:
                    stack.append((x, cur_top + direction, cur_left - 1, direction))
                if cur_left - 1 > cur_right:
                    stack.append((cur_right, cur_top - direction, cur_left - 1, -direction))
                cur_left += 1
                while cur_left < cur_right and not inside(cur_left, cur_top):
                    cur_left += 1
                x = cur_left
            left = min(left, cur_left)
            top = min(top, cur_top)
            right = max(right, cur_left)
            bottom = max(bottom, cur_top)
        box._set(max(0, left - 1), max(0, top - 1), right - 1, bottom - 1)

    def _quad_fill(self, box: LetterBoundingBox) -> None:
        filled: set[tuple[int, int]] = set()

        def inside(x: int, y: int) -> bool:
            if x < 0 or y < 0:
                return False
            return (x, y) not in filled and self._valid_display(x, y)

        queue = deque([(box.left, box.top)])
        left, top, right, bottom = box.left, box.top, 0, 0
        while queue:
            x, y = queue.popleft()
            if not inside(x, y):
                continue
            filled.add((x, y))
            queue.extend(
                (
                    (x - 1, y),
                    (x - 1, y - 1),
                    (x, y - 1),
                    (x + 1, y - 1),
                    (x + 1, y),
                    (x + 1, y + 1),
                    (x, y + 1),
                    (x - 1, y + 1),
                )
            )
            left = min(left, x)
            top = min(top, y)
            right = max(right, x)
            bottom = max(bottom, y)
        box._set(max(0, left - 1), max(0, top - 1), right + 1, bottom + 1)