"""Doors that open once a room is cleared, and the base class for traps."""

from __future__ import annotations

from typing import Any, Dict, Optional

from .actor import Actor, ObjectType
from .engine import AnimFrame, Animation, Rect, Vector2

DOOR_TEXTURE = "./resources/maps/tiles/doorspritesheet2.png"
DOOR_OPEN_SOUND = "./resources/audio/door_open.ogg"
DOOR_FRAME_WIDTH = 145.0
DOOR_FRAME_HEIGHT = 166.0
DOOR_ANIMATION_MS = 1200


class Door(Actor):
    """A door sprite that blocks until opened, then plays its opening animation."""

    def __init__(self, world: Any, position: Vector2, is_upper: bool) -> None:
        super().__init__(world)
        self.texture_file = DOOR_TEXTURE
        self.is_open = False
        self.is_upper = is_upper
        self.animation: Optional[Animation] = None
        self._prepare_sprite()
        self.set_location(position)
        self.object_type = ObjectType.WORLD_STATIC

    def _prepare_sprite(self) -> None:
        w, h = DOOR_FRAME_WIDTH, DOOR_FRAME_HEIGHT
        sprite = self._new_sprite(self.texture_file)
        sprite.set_texture_rect(Rect(0, 0, w, h))
        sprite.set_origin(0, h)
        sprite.set_scale(100 / w, 100 / h)
        self.sprite = sprite
        animation = Animation(sprite, DOOR_ANIMATION_MS)
        animation.add_frame(AnimFrame(Rect(0, 0, w, h)))
        animation.add_frame(AnimFrame(Rect(145, 0, w, h)))
        animation.add_frame(AnimFrame(Rect(290, 0, 153, h)))
        self.animation = animation

    def open(self) -> None:
        """Open the door: it becomes passable and plays its sound."""
        self.is_open = True
        self.object_type = ObjectType.DOOR
        audio = getattr(self.world, "audio", None)
        if audio is not None:
            audio.play_sound_2d(DOOR_OPEN_SOUND)

    def draw(self, percent: float, delta: float) -> None:
        super().draw(percent, delta)
        if self.animation is not None and self.is_open:
            self.animation.update(delta)


class Trap(Actor):
    """Base class for traps: damage factor, target, animations and a timer."""

    def __init__(self, world: Any) -> None:
        super().__init__(world)
        self.damage_factor = 0.0
        self.target: Optional[Actor] = None
        self.animation: Optional[Animation] = None
        self.animations: Dict[str, Animation] = {}
        self.timer_start = world.time()

    def elapsed_ms(self) -> int:
        """Milliseconds since the trap's timer was last restarted."""
        return self.world.time() - self.timer_start

    def restart_timer(self) -> int:
        """Restart the timer and return the time that had elapsed."""
        elapsed = self.elapsed_ms()
        self.timer_start = self.world.time()
        return elapsed