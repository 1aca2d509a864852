"""Drawing board: three click markers and the circle through them."""

from __future__ import annotations

import math
import random

from circumdraw.canvas import BLACK, WHITE, GrayImage, Marker
from circumdraw.geometry import Point, Rect, circumcenter

MAX_MARKERS = 3


class Board:
    """State of the picture area: markers, sizes and the rendered image."""

    def __init__(self, area: Rect, radius: int = 20, border: int = 5) -> None:
        self.area = area
        self.image = GrayImage(area.width, area.height)
        self.markers = [Marker(radius=radius) for _ in range(MAX_MARKERS)]
        self.radius = radius
        self.border = border
        self.count = 0

    def press(self, point: Point) -> None:
        """Start dragging a marker under the point, or place a new one."""
        if not self.area.contains(point):
            return
        for marker in self.markers:
            if marker.created and marker.contains(point):
                marker.moving = True
                return
        if self.count >= MAX_MARKERS:
            return
        self.markers[self.count].create(self.area, point)
        self.count += 1
        self.render()

    def release(self, point: Point) -> None:
        """Stop dragging all markers."""
        if not self.area.contains(point):
            return
        for marker in self.markers:
            marker.moving = False

    def move(self, point: Point) -> None:
        """Move the dragged markers to the point and redraw."""
        for marker in self.markers:
            if marker.moving:
                marker.hold(point)
        self.render()

    def reset(self) -> None:
        """Remove every marker and clear the picture."""
        for marker in self.markers:
            marker.reset()
        self.count = 0
        self.render()

    def randomize(self, rng: random.Random | None = None) -> bool:
        """Move all markers to random positions; only once all are placed."""
        if self.count < MAX_MARKERS:
            return False
        rng = rng or random.Random()
        for marker in self.markers:
            marker.hold(Point(rng.randrange(self.image.width), rng.randrange(self.image.height)))
        self.render()
        return True

    def set_radius(self, radius: int) -> None:
        """Set the radius used for every marker."""
        self.radius = radius
        for marker in self.markers:
            marker.radius = radius

    def set_border(self, border: int) -> None:
        """Set the thickness of the circumscribed circle's edge."""
        self.border = border

    def render(self) -> GrayImage:
        """Redraw the picture and return it."""
        image = self.image
        image.clear()
        if self.count >= MAX_MARKERS:
            p1, p2, p3 = (m.click_point for m in self.markers)
            center = circumcenter(p1, p2, p3)
            distance = int(math.hypot(center.x - p1.x, center.y - p1.y))
            half = int(self.border / 2)
            image.fill_disk(center.x, center.y, distance + half, BLACK)
            image.fill_disk(center.x, center.y, distance - half, WHITE)
        for marker in self.markers[: self.count]:
            if marker.created:
                marker.draw(image)
        return image

    def position_info(self) -> str:
        """Text listing the centre of each marker."""
        return "".join(
            f"X[{i}] : {m.click_point.x}, Y[{i}]: {m.click_point.y}\r\n"
            for i, m in enumerate(self.markers)
        )