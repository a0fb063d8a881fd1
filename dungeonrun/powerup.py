"""Power-ups offered after a room is cleared."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional

from .actor import Actor, ObjectType
from .engine import Sprite, Vector2

POWERUP_SOUND = "./resources/audio/health-improve.ogg"
POWERUP_EMITTER = 2
DIALOG_OFFSET_Y = 50


class PowerUpType(IntEnum):
    HEALTH = 0
    MOVEMENT_SPEED = 1
    ATTACK_SPEED = 2
    ATTACK_MORE = 3
    MORE_DAMAGE = 4
    CRIT_ATTACK = 5


_NAMES = {
    PowerUpType.HEALTH: "Vida max aumentada",
    PowerUpType.MOVEMENT_SPEED: "Mayor movimiento",
    PowerUpType.ATTACK_SPEED: "Mayor cadencia",
    PowerUpType.ATTACK_MORE: "Ataque mejorado",
}


def _is_allied_pawn(actor: Any) -> bool:
    if getattr(actor, "object_type", None) is not ObjectType.PAWN:
        return False
    faction = getattr(actor, "faction", None)
    return getattr(faction, "value", faction) == "ally"


class PowerUp(Actor):
    """A pick-up that improves the player once, then retires every offered power-up."""

    def __init__(self, world: Any, kind: PowerUpType) -> None:
        super().__init__(world)
        self.kind = PowerUpType(kind)
        self.texture_file = f"./resources/powerups/{int(self.kind)}.png"
        self.name = _NAMES.get(self.kind, "")
        self.object_type = ObjectType.POWERUP
        self.active = False
        self.used = False
        self.dialog: Optional[Sprite] = None
        self._prepare_sprite()

    def _prepare_sprite(self) -> None:
        sprite = self._new_sprite(self.texture_file)
        bounds = sprite.global_bounds()
        sprite.set_origin(bounds.width / 2, bounds.height / 2)
        self.sprite = sprite
        dialog = self._new_sprite(f"./resources/powerups/{int(self.kind)}_d.png")
        dbounds = dialog.global_bounds()
        dialog.set_origin(dbounds.width / 2, dbounds.height / 2)
        dialog.set_scale(0.15, 0.15)
        self.dialog = dialog

    def draw(self, percent: float, delta: float) -> None:
        """Draw the power-up and its description only while it is on offer."""
        if not self.active:
            return
        super().draw(percent, delta)
        if self.dialog is not None:
            self.dialog.set_position(self.location.x, self.location.y - DIALOG_OFFSET_Y)
            self.dialog.draw()

    def _apply(self, controller: Any) -> None:
        if self.kind is PowerUpType.HEALTH:
            controller.increase_health()
        elif self.kind is PowerUpType.MOVEMENT_SPEED:
            controller.improve_movement(1.1)
        elif self.kind is PowerUpType.ATTACK_SPEED:
            controller.improve_fire_rate(0.9)
        elif self.kind is PowerUpType.ATTACK_MORE:
            controller.improve_attack()
        elif self.kind is PowerUpType.MORE_DAMAGE:
            controller.modify_damage()
        elif self.kind is PowerUpType.CRIT_ATTACK:
            controller.modify_critic(0.96)

    def on_overlap(self, other: Any) -> None:
        """An allied pawn touching an active power-up takes it."""
        if not (self.active and _is_allied_pawn(other)):
            return
        self._apply(self.world.player_controller)
        for power_up in list(self.world.power_ups):
            power_up.used = True
            power_up.active = False
            power_up.set_lifespan(0.0)
        self.world.spawn_emitter(POWERUP_EMITTER, self.location, Vector2(0.0, 0.0))
        audio = getattr(self.world, "audio", None)
        if audio is not None:
            audio.play_sound_2d(POWERUP_SOUND)