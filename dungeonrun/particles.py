"""Particle effects spawned at a location."""

from __future__ import annotations

from typing import Callable, Optional

from .engine import Cascade, Vector2


class Splinters(Cascade):
    """Wood splinters flying off a hit."""

    def __init__(self, location: Vector2, clock: Optional[Callable[[], float]] = None) -> None:
        super().__init__(location, clock)


class CoinBurst(Cascade):
    """A burst of coins."""

    def __init__(self, location: Vector2, clock: Optional[Callable[[], float]] = None) -> None:
        super().__init__(location, clock)


class PowerUpEffect(Cascade):
    """The glow shown when a power-up is taken."""

    def __init__(self, location: Vector2, clock: Optional[Callable[[], float]] = None) -> None:
        super().__init__(location, clock)


class FireballExplosion(Cascade):
    """A fireball bursting on impact."""

    def __init__(self, location: Vector2, clock: Optional[Callable[[], float]] = None) -> None:
        super().__init__(location, clock)


class PlayerHit(Cascade):
    """The flash shown when the player is hit."""

    def __init__(self, location: Vector2, clock: Optional[Callable[[], float]] = None) -> None:
        super().__init__(location, clock)


class RockExplosion(Cascade):
    """A rock shattering on impact."""

    def __init__(self, location: Vector2, clock: Optional[Callable[[], float]] = None) -> None:
        super().__init__(location, clock)