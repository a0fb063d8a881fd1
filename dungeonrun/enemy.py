"""Enemies: pawns that can be targeted, show hit numbers and burst when they die."""

from __future__ import annotations

import logging
import random
from typing import Any, List, Optional

from .actor import Actor
from .engine import FloatingText, Vector2
from .pawn import Pawn

log = logging.getLogger(__name__)

TARGET_TEXTURE = "./resources/target.png"
DIE_SOUND = "./resources/audio/enemy_die.ogg"
HIT_SOUND = "./resources/audio/enemy_hit.ogg"
CRIT_THRESHOLD = 85
CRIT_MULTIPLIER = 3
CRIT_LABEL = "Critico!"
HIT_TEXT_LIFETIME = 1.25
HIT_TEXT_RISE = 20.0
MARKER_OFFSET_Y = 10.0
DEATH_EMITTER = 10
HIT_EMITTER = 0
DEATH_BURSTS = 8


class Enemy(Pawn):
    """A hostile pawn with a target marker and floating damage numbers."""

    def __init__(self, world: Any) -> None:
        super().__init__(world)
        self.targeted = False
        self.rng = getattr(world, "rng", None) or random.Random()
        self.hit_texts: List[FloatingText] = []
        marker = self._new_sprite(TARGET_TEXTURE)
        marker.set_scale(1.0, 1.0)
        self.target_marker = marker

    def draw(self, percent: float, delta: float) -> None:
        """Draw the marker when targeted, the enemy, and the hit numbers still alive."""
        if self.targeted:
            offset_x = abs(self.target_marker.texture_rect.width) / 2
            pos = self.interpolated_position
            self.target_marker.set_position(pos.x - offset_x, pos.y - MARKER_OFFSET_Y)
            self.target_marker.draw()
        super().draw(percent, delta)
        now = self.world.time()
        alive = []
        for text in self.hit_texts:
            if now <= text.death_time:
                text.draw(delta, now)
                alive.append(text)
        self.hit_texts = alive

    def die(self) -> None:
        """Spray death particles around the enemy, then schedule its removal."""
        loc = self.location
        for _ in range(DEATH_BURSTS):
            spot = Vector2(loc.x + self.rng.randrange(220) - 110,
                           loc.y + self.rng.randrange(20) - 10)
            self.world.spawn_emitter(DEATH_EMITTER, spot, Vector2(0.0, 0.0))
        super().die()

    def _add_hit_text(self, label: str) -> FloatingText:
        loc = self.location
        spot = Vector2(loc.x + self.rng.randrange(20) - 10, loc.y - HIT_TEXT_RISE)
        text = FloatingText(label, spot, HIT_TEXT_LIFETIME, self.world.time())
        text.engine = self.engine
        self.hit_texts.append(text)
        return text

    def _play(self, path: str) -> None:
        audio = getattr(self.world, "audio", None)
        if audio is not None:
            audio.play_sound_2d(path)

    def take_damage(self, damage: float, causer: Optional[Actor], damage_type: str) -> None:
        """Take a hit, possibly critical for triple damage, while still alive."""
        critic = self.world.player_character.critic
        log.debug("Damage taken!")
        if self.health <= 0:
            return
        if self.rng.randrange(100) > CRIT_THRESHOLD * critic:
            self.health -= damage * CRIT_MULTIPLIER
            self._add_hit_text(CRIT_LABEL)
        else:
            self.health -= damage
            self._add_hit_text(f"+{int(damage)}")

        if not self.is_alive():
            self.die()
            self.toggle_target(False)
            self._play(DIE_SOUND)
        else:
            self.world.spawn_emitter(HIT_EMITTER, self.location, Vector2(0.0, 0.0))
            self._apply_hit_effects(str(int(damage)))
            self._play(HIT_SOUND)

    def _apply_hit_effects(self, damage_type: str) -> None:
        """Enemies show their hit feedback through the floating numbers instead."""

    def toggle_target(self, active: bool) -> None:
        self.targeted = active