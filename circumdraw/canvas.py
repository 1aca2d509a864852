"""An 8-bit grayscale raster and the click-point markers drawn on it."""

from __future__ import annotations

from dataclasses import dataclass, field

from circumdraw.geometry import Point, Rect, is_in_circle

WHITE = 0xFF
BLACK = 0x00


class GrayImage:
    """A top-down 8-bit grayscale image, initially white."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = bytearray([WHITE]) * (width * height)

    def clear(self) -> None:
        """Paint every pixel white."""
        self.pixels[:] = bytes([WHITE]) * len(self.pixels)

    def get(self, x: int, y: int) -> int:
        """Return the value of the pixel at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self.pixels[y * self.width + x]

    def fill_disk(self, cx: int, cy: int, radius: int, value: int) -> None:
        """Set every pixel strictly inside the circle to value, clipping at the edges."""
        x_lo = max(cx - radius, 0)
        x_hi = min(cx + radius, self.width)
        y_lo = max(cy - radius, 0)
        y_hi = min(cy + radius, self.height)
        for y in range(y_lo, y_hi):
            row = y * self.width
            for x in range(x_lo, x_hi):
                if is_in_circle(x, y, cx, cy, radius):
                    self.pixels[row + x] = value

    def to_pgm(self) -> bytes:
        """Encode the image as a binary PGM (P5) file."""
        header = f"P5\n{self.width} {self.height}\n255\n".encode("ascii")
        return header + bytes(self.pixels)


@dataclass
class Marker:
    """A filled circle drawn around a clicked point."""

    radius: int = 20
    click_point: Point = field(default_factory=Point)
    moving: bool = False
    created: bool = False
    x_offset: int = 0
    y_offset: int = 0

    def create(self, area: Rect, point: Point) -> None:
        """Place the marker at a point given relative to the area's origin."""
        self.x_offset = -area.left
        self.y_offset = -area.top
        self.created = True
        self.hold(point)

    def hold(self, point: Point) -> None:
        """Move the marker to the point, shifted by the stored offset."""
        self.click_point = Point(point.x + self.x_offset, point.y + self.y_offset)

    def reset(self) -> None:
        """Return the marker to its unplaced state."""
        self.created = False
        self.moving = False
        self.click_point = Point()

    def contains(self, point: Point) -> bool:
        """Return True if the point falls within the marker's bounding square."""
        local = Point(point.x + self.x_offset, point.y + self.y_offset)
        c = self.click_point
        box = Rect(c.x - self.radius, c.y - self.radius, c.x + self.radius, c.y + self.radius)
        return box.contains(local)

    def draw(self, image: GrayImage) -> None:
        """Draw the marker as a black disk."""
        image.fill_disk(self.click_point.x, self.click_point.y, self.radius, BLACK)