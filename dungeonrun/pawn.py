"""Pawns: actors that move under their own direction, collide, take damage and die."""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Any, Dict, Iterable, Optional

from .actor import Actor, ObjectType
from .engine import AnimFrame, Animation, Rect, Vector2

log = logging.getLogger(__name__)

PAWN_TEXTURE = "./resources/sprites.png"
FRAME_WIDTH = 430.0
FRAME_HEIGHT = 519.0
SPRITE_SCALE = 0.4
WALK_FRONT_FRAMES = 15
WALK_FRONT_FRAME_MS = 1000.0
WALK_LEFT_FRAME_MS = 500.0
TRACE_INSET = 5.0
START_LOCATION = Vector2(250.0, 320.0)

# Upper bound (exclusive, in degrees) of each direction sector and its animation.
_SECTORS = (
    (67.5, "right"),
    (112.5, "up"),
    (247.5, "left"),
    (292.5, "down"),
    (360.0, "right"),
)


class Faction(Enum):
    """Side a pawn fights on."""

    ALLY = "ally"
    ENEMY = "enemy"


def _animation_name(direction: Vector2) -> Optional[str]:
    degrees = math.degrees(math.atan2(-direction.y, direction.x))
    if degrees < 0:
        degrees += 360
    if degrees == 0:
        return "stop"
    for upper, name in _SECTORS:
        if degrees < upper:
            return name
    return None


class Pawn(Actor):
    """A living actor with health, a movement direction and collision handling."""

    def __init__(self, world: Any) -> None:
        super().__init__(world)
        self.texture_file = PAWN_TEXTURE
        self.direction = Vector2()
        self.velocity = Vector2()
        self.max_health = 100.0
        self.health = self.max_health
        self.damage_base = 15.0
        self.damage_multiplier = 0.0
        self.movement_speed = 0.1
        self.faction = Faction.ENEMY
        self.object_type = ObjectType.PAWN
        self.blocked_x: Optional[Actor] = None
        self.blocked_y: Optional[Actor] = None
        self.animation: Optional[Animation] = None
        self.animations: Dict[str, Animation] = {}
        self.movement_trace: Optional[Rect] = None
        self.set_location(START_LOCATION)
        Pawn._prepare_sprite(self)

    def _prepare_sprite(self) -> None:
        w, h = FRAME_WIDTH, FRAME_HEIGHT
        sprite = self._new_sprite(self.texture_file)
        sprite.set_origin(w / 2, h / 2)
        sprite.set_texture_rect(Rect(0, 0, w, h))
        sprite.set_scale(SPRITE_SCALE, SPRITE_SCALE)
        self.sprite = sprite

        front = Animation(sprite, 1)
        for frame in range(WALK_FRONT_FRAMES):
            front.add_frame(AnimFrame(Rect(frame * w, 0, w, h), WALK_FRONT_FRAME_MS))
        self.animations["WALK_FRONT"] = front

        left = Animation(sprite, 1)
        for x in (2, 2, 40, 40):
            left.add_frame(AnimFrame(Rect(x, 59, w, h), WALK_LEFT_FRAME_MS))
        self.animations["WALK_LEFT"] = left

    def _step(self, velocity: Vector2, delta: float) -> Vector2:
        return Vector2(self.location.x + self.movement_speed * velocity.x * delta,
                       self.location.y + self.movement_speed * velocity.y * delta)

    def _update_movement(self, location: Vector2) -> None:
        self.set_location(location)

    def update(self, delta: float) -> None:
        """Move along the current direction, sliding along walls and stopping at blockers."""
        target = self._step(self.direction, delta)
        moving = self.direction.x != 0.0 or self.direction.y != 0.0
        if moving and self.is_alive():
            collide = self.direction_precheck(target, ObjectType.WORLD_STATIC)
            if collide is None:
                self.blocked_x = None
                self.blocked_y = None
                if self.direction_precheck(target, ObjectType.BLOCKER) is None:
                    self._update_movement(target)
            else:
                self._slide(collide, target, delta)
        super().update(delta)

    def _offsets(self, other: Actor) -> tuple:
        return (abs(other.location.x - self.location.x),
                abs(other.location.y - self.location.y))

    def _slide(self, collide: Actor, target: Vector2, delta: float) -> None:
        static = ObjectType.WORLD_STATIC
        ignore = [a for a in (self.blocked_x, self.blocked_y) if a is not None]
        if not ignore:
            collidee = self.direction_precheck(target, static)
        elif len(ignore) == 1:
            axis = 0 if self.blocked_x is not None else 1
            collidee = self.direction_precheck(target, static, ignore, axis)
        else:
            collidee = self.direction_precheck(target, static, ignore, 2)

        vx, vy = self.direction.x, self.direction.y
        if collidee is not None:
            dx, dy = self._offsets(collidee)
            if dx < dy:  # above or below
                if self.blocked_x is not None:
                    if self.blocked_x.location.x != collidee.location.x:
                        vx = vy = 0.0
                        self.blocked_y = collidee
                    else:
                        collidee = self.direction_precheck(target, static, [collide], 0)
                        if (collidee is not None
                                and self.blocked_x.location.x != collidee.location.x):
                            vx = vy = 0.0
                            self.blocked_y = collidee
                else:
                    vy = 0.0
                    self.blocked_y = collidee
                    self.set_location(self.last_location)

        if collidee is not None:
            dx, dy = self._offsets(collidee)
            if dx > dy:  # left or right
                if self.blocked_y is not None:
                    if self.blocked_y.location.y != collide.location.y:
                        vx = vy = 0.0
                        self.blocked_x = collidee
                    else:
                        collidee = self.direction_precheck(target, static, [collidee], 1)
                        if (collidee is not None
                                and self.blocked_y.location.y != collidee.location.y):
                            vx = vy = 0.0
                            self.blocked_x = collidee
                else:
                    vx = 0.0
                    self.blocked_x = collidee
                    self.set_location(self.last_location)

        if self.blocked_x is not None:
            vx = 0.0
        if self.blocked_y is not None:
            vy = 0.0
        self.velocity = Vector2(vx, vy)
        self._update_movement(self._step(self.velocity, delta))

    def choose_animation(self) -> Optional[str]:
        """Pick the animation matching the movement direction and return its name."""
        name = _animation_name(self.direction)
        if name is not None:
            self.animation = self.animations[name]
        return name

    def draw(self, percent: float, delta: float) -> None:
        if self.animation is not None:
            self.animation.update(delta)
        super().draw(percent, delta)
        engine = self.engine
        if self.debug and self.movement_trace is not None and engine is not None:
            engine.draw(self.movement_trace)

    def direction_precheck(self, location: Vector2, object_type: ObjectType,
                           ignore: Optional[Iterable[Actor]] = None,
                           axis: Optional[int] = None) -> Optional[Actor]:
        """Return the first actor of a type that a move to ``location`` would touch."""
        box = self.bounding_box()
        trace = Rect(location.x - box.width / 2 + TRACE_INSET,
                     location.y - box.height / 2 + TRACE_INSET,
                     box.width - 2 * TRACE_INSET,
                     box.height - 2 * TRACE_INSET)
        if self.debug:
            self.movement_trace = trace
        return self.world.box_trace(trace, object_type, list(ignore or ()), axis)

    def take_damage(self, damage: float, causer: Optional[Actor], damage_type: str) -> None:
        """Lose health while alive; die when it runs out."""
        log.debug("Damage taken!")
        if self.health > 0:
            self.health -= damage
            if not self.is_alive():
                self.die()
            else:
                self._apply_hit_effects(damage_type)

    def _apply_hit_effects(self, damage_type: str) -> None:
        log.debug("Applying effect: %s", damage_type)

    def is_alive(self) -> bool:
        return self.health > 0

    def die(self) -> None:
        """Schedule removal at the current game time."""
        self.set_lifespan(0.0)

    def attack(self) -> bool:
        return True