"""Core rendering primitives: vectors, rectangles, the view, sprites and animations.

Nothing here talks to a real window. The :class:`Engine` keeps a camera view and
records every object drawn during a frame, so the game logic stays fully testable.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

VIEW_TOP_MIN = -100.0
VIEW_TOP_MAX = 380.0


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __mul__(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vector2":
        """Unit vector with the same direction; a zero vector has none."""
        size = self.length()
        if size == 0:
            raise ValueError("cannot normalise a zero-length vector")
        return Vector2(self.x / size, self.y / size)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def _span(self) -> Tuple[float, float, float, float]:
        min_x, max_x = sorted((self.left, self.right))
        min_y, max_y = sorted((self.top, self.bottom))
        return min_x, max_x, min_y, max_y

    def contains(self, point: Vector2) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        min_x, max_x, min_y, max_y = self._span()
        return min_x <= point.x < max_x and min_y <= point.y < max_y

    def intersects(self, other: "Rect") -> bool:
        """True if the two rectangles overlap by a non-empty area."""
        a_min_x, a_max_x, a_min_y, a_max_y = self._span()
        b_min_x, b_max_x, b_min_y, b_max_y = other._span()
        return (max(a_min_x, b_min_x) < min(a_max_x, b_max_x)
                and max(a_min_y, b_min_y) < min(a_max_y, b_max_y))


class RelativePosition(Enum):
    """Quadrant of a point relative to another one (screen coordinates, y down)."""

    TOP_LEFT = "topleft"
    TOP_RIGHT = "topright"
    BOTTOM_LEFT = "bottomleft"
    BOTTOM_RIGHT = "bottomright"


class Engine:
    """Holds the window size, the camera view and the objects drawn this frame."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.view = Rect(0.0, 0.0, width, height)
        self.drawn: List[object] = []

    def draw(self, drawable: object) -> None:
        """Record an object as drawn in the current frame."""
        self.drawn.append(drawable)

    def clear(self) -> None:
        """Forget everything drawn so far."""
        self.drawn.clear()

    def set_view(self, center_y: float, border_x: float) -> Rect:
        """Follow a vertical position, keeping the top edge inside the level limits."""
        top = center_y - self.height / 2
        top = min(max(top, VIEW_TOP_MIN), VIEW_TOP_MAX)
        self.view = Rect(border_x, top, self.width, self.height)
        return self.view

    def reset_view(self) -> Rect:
        """Return the camera to the window origin."""
        self.view = Rect(0.0, 0.0, self.width, self.height)
        return self.view

    def find_quadrant(self, position1: Vector2, position2: Vector2) -> RelativePosition:
        """Locate ``position2`` relative to ``position1``; ties count as right and top."""
        top = position2.y <= position1.y
        if position2.x >= position1.x:
            return RelativePosition.TOP_RIGHT if top else RelativePosition.BOTTOM_RIGHT
        return RelativePosition.TOP_LEFT if top else RelativePosition.BOTTOM_LEFT


class Sprite:
    """A textured quad with position, origin, scale, rotation and a texture sub-rectangle."""

    def __init__(self, texture_path: Optional[str] = None,
                 texture_size: Tuple[float, float] = (0.0, 0.0)) -> None:
        self.texture_path = texture_path
        self.texture_size = (float(texture_size[0]), float(texture_size[1]))
        self.texture_rect = Rect(0.0, 0.0, *self.texture_size)
        self.position = Vector2()
        self.origin = Vector2()
        self.scale = Vector2(1.0, 1.0)
        self.rotation = 0.0
        self.custom_bounds = Rect()
        self.engine: Optional[Engine] = None

    def set_position(self, x: float, y: float) -> None:
        self.position = Vector2(x, y)

    def set_origin(self, x: float, y: float) -> None:
        self.origin = Vector2(x, y)

    def set_scale(self, x: float, y: float) -> None:
        self.scale = Vector2(x, y)

    def set_rotation(self, angle: float) -> None:
        self.rotation = angle % 360

    def set_texture_rect(self, rect: Rect) -> None:
        self.texture_rect = rect

    def _transform(self, x: float, y: float) -> Tuple[float, float]:
        sx = (x - self.origin.x) * self.scale.x
        sy = (y - self.origin.y) * self.scale.y
        angle = math.radians(self.rotation)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return (sx * cos_a - sy * sin_a + self.position.x,
                sx * sin_a + sy * cos_a + self.position.y)

    def global_bounds(self) -> Rect:
        """Bounding box of the transformed sprite in world coordinates."""
        w = abs(self.texture_rect.width)
        h = abs(self.texture_rect.height)
        corners = [self._transform(x, y) for x, y in ((0, 0), (w, 0), (0, h), (w, h))]
        xs = [c[0] for c in corners]
        ys = [c[1] for c in corners]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def bounds(self) -> Rect:
        """Collision bounds: the global bounds, or the custom size centred on them."""
        glob = self.global_bounds()
        if self.custom_bounds.width == 0.0:
            return glob
        return Rect(
            glob.left + glob.width / 2 - self.custom_bounds.width / 2,
            glob.top + glob.height / 2 - self.custom_bounds.height / 2,
            self.custom_bounds.width,
            self.custom_bounds.height,
        )

    def set_bounds(self, new_scale: float) -> Rect:
        """Shrink the collision box: a value up to 1 scales it, a larger one is a size."""
        glob = self.global_bounds()
        if new_scale <= 1:
            self.custom_bounds = Rect(0.0, 0.0, glob.width * new_scale, glob.height * new_scale)
        else:
            self.custom_bounds = Rect(0.0, 0.0, new_scale, new_scale)
        return self.custom_bounds

    def draw(self) -> Vector2:
        """Draw at the current position."""
        if self.engine is not None:
            self.engine.draw(self)
        return self.position

    def draw_interpolated(self, location: Vector2, previous: Vector2, percent: float) -> Vector2:
        """Draw between the previous and current locations and return where it was drawn."""
        x = (location.x - previous.x) * percent + previous.x
        y = (location.y - previous.y) * percent + previous.y
        self.set_position(x, y)
        if self.engine is not None:
            self.engine.draw(self)
        return Vector2(x, y)


@dataclass
class AnimFrame:
    """One frame of an animation: the texture region and its own duration."""

    rect: Rect
    duration: float = 0.0


@dataclass
class Animation:
    """Steps a sprite's texture rectangle through a list of frames."""

    target: Sprite
    length: int
    loop: bool = False
    frames: List[AnimFrame] = field(default_factory=list)
    progress: float = 0.0
    total_progress: float = 0.0
    total_length: float = 0.0
    current_frame: int = 0

    def add_frame(self, frame: AnimFrame) -> None:
        self.total_length += frame.duration
        self.frames.append(frame)

    def update(self, elapsed: float) -> int:
        """Advance by ``elapsed`` ms; return the time left, or 0 once a one-shot ends."""
        if not self.frames:
            raise RuntimeError("animation has no frames")
        self.progress += elapsed
        self.total_progress += elapsed
        if self.progress >= self.length // len(self.frames):
            self.current_frame += 1
            if self.current_frame >= len(self.frames):
                if not self.loop:
                    self.progress = 0.0
                    return 0
                self.current_frame = 0
            self.target.set_texture_rect(self.frames[self.current_frame].rect)
            self.progress = 0.0
        return int(self.length - self.total_progress)

    def reset(self) -> None:
        self.progress = 0.0
        self.total_progress = 0.0
        self.current_frame = 0


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Cascade(Sprite):
    """A short-lived animated sprite used as a particle effect."""

    def __init__(self, location: Optional[Vector2] = None,
                 clock: Optional[Callable[[], float]] = None) -> None:
        super().__init__()
        if location is not None:
            self.set_position(location.x, location.y)
        self.clock = clock or _monotonic_ms
        self.started = self.clock()
        self.auto_destroy = True
        self.lifetime = 1
        self.pending_delete = False
        self.animation: Optional[Animation] = None

    def remaining_life(self) -> int:
        """Milliseconds left to live; 1 for an effect with unlimited lifetime (-1)."""
        if self.lifetime == -1:
            return 1
        return int(self.lifetime - (self.clock() - self.started))

    def draw(self, delta: float = 0.0) -> Vector2:  # type: ignore[override]
        """Advance the animation, flag the effect for removal when done, and draw it."""
        if self.animation is not None:
            remaining = self.animation.update(delta)
            if (remaining <= 0 and not self.animation.loop
                    and self.remaining_life() != -1):
                self.pending_delete = True
        return super().draw()


def _c_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class FloatingText:
    """A fading label that drifts upwards, such as a damage number."""

    CHARACTER_SIZE = 20
    _GLYPH_WIDTH = 0.6

    def __init__(self, text: str, location: Vector2, lifetime: float, now: int) -> None:
        self.text = text
        self.creation_time = int(now)
        self.death_time = self.creation_time + int(lifetime * 1_000_000) // 1000
        self.bold = True
        self.color = (255, 255, 255, 255)
        width = len(text) * self.CHARACTER_SIZE * self._GLYPH_WIDTH
        self.position = Vector2(location.x - width / 2, location.y)
        self.engine: Optional[Engine] = None

    def opacity(self, now: int) -> int:
        """Alpha channel value for the given time, as an 8-bit colour component."""
        value = _c_div((self.creation_time - int(now)) * 255,
                       self.death_time - self.creation_time)
        return value % 256

    def draw(self, delta: float, now: int) -> Vector2:
        """Update fade and drift, draw, and return the new position."""
        self.color = (255, 255, 255, self.opacity(now))
        self.position = self.position + Vector2(0.0, delta * -0.0085)
        if self.engine is not None:
            self.engine.draw(self)
        return self.position