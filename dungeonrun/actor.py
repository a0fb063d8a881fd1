"""Actors placed in the world, and the controller that steers a pawn."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol

from .engine import Engine, Rect, Sprite, Vector2


class World(Protocol):
    """What an actor needs from the running game."""

    engine: Optional[Engine]

    def time(self) -> int:
        """Game time in milliseconds."""


class ObjectType(Enum):
    """Collision channel of an actor."""

    WORLD_STATIC = "worldstatic"
    PAWN = "pawn"
    POWERUP = "powerup"
    DOOR = "door"
    BLOCKER = "blocker"


@dataclass(frozen=True)
class DebugOverlay:
    """Debug drawing of an actor: its bounding box and drawn location."""

    bounds: Rect
    location: Vector2
    show_coords: bool

    @property
    def label(self) -> str:
        return f"({self.location.x:f}x, {self.location.y:f}y)"

    @property
    def bounds_label(self) -> str:
        b = self.bounds
        return f"({b.left:f}x, {b.top:f}y, {b.width:f}w, {b.height:f}h)"


class Actor:
    """Anything that lives in the level: it has a location, a sprite and a lifespan."""

    def __init__(self, world: Any) -> None:
        self.world = world
        self.location = Vector2()
        self.last_location = Vector2()
        self.current_location = Vector2()
        self.object_type = ObjectType.WORLD_STATIC
        self.asleep = False
        self.debug = False
        self.debug_coords = False
        self.lifespan = -1.0
        self.pending_delete = False
        self.sprite: Optional[Sprite] = None

    @property
    def engine(self) -> Optional[Engine]:
        return getattr(self.world, "engine", None)

    @property
    def interpolated_position(self) -> Vector2:
        """Where the actor was last drawn."""
        return self.current_location

    def _new_sprite(self, path: str) -> Sprite:
        sprite = Sprite(path)
        sprite.engine = self.engine
        return sprite

    def set_location(self, location: Vector2) -> None:
        """Move the actor, remembering the old location for interpolation."""
        self.last_location = self.location
        self.location = location

    def update(self, delta: float) -> None:
        """Flag the actor for removal once its lifespan has run out."""
        if self.lifespan >= 0 and self.world.time() >= self.lifespan:
            self.pending_delete = True

    def draw(self, percent: float, delta: float) -> None:
        """Draw the sprite interpolated between the last and current location."""
        if self.sprite is None:
            return
        if self.asleep:
            self.current_location = self.location
        else:
            self.current_location = self.sprite.draw_interpolated(
                self.location, self.last_location, percent)
        if self.current_location == self.location:
            self.set_location(self.location)
        if not self.debug:
            return
        engine = self.engine
        if engine is not None:
            engine.draw(DebugOverlay(self.bounding_box(), self.current_location,
                                     self.debug_coords))

    def take_damage(self, damage: float, causer: Optional["Actor"], damage_type: str) -> bool:
        """Receive damage; plain actors are unharmed, so nothing is applied."""
        return False

    def on_overlap(self, other: "Actor") -> None:
        """React to overlapping another actor; plain actors ignore it."""

    def set_lifespan(self, seconds: float) -> None:
        """Schedule removal ``seconds`` from the current game time."""
        self.lifespan = self.world.time() + int(seconds * 1_000_000) // 1000

    def bounding_box(self) -> Rect:
        """Collision box of the actor."""
        if self.sprite is None:
            return Rect(self.location.x, self.location.y, 0.0, 0.0)
        return self.sprite.bounds()


class Controller:
    """Steers a pawn by setting its movement direction."""

    def __init__(self, pawn: Any = None) -> None:
        self.pawn = pawn

    def move(self, x: float, y: float) -> None:
        if self.pawn is None:
            raise RuntimeError("controller has no pawn to move")
        self.pawn.direction = Vector2(x, y)