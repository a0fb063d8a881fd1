"""The concrete enemies: a turret plant, a patrolling skull and an exploding orange."""

from __future__ import annotations

from typing import Any, Sequence, Tuple

from .engine import AnimFrame, Animation, Rect, Vector2
from .enemy import Enemy

THROW_SOUND = "./resources/audio/throw.ogg"

ALMOND = "almendra"
ROCK = "rock"
FIREBALL = "fireball"

ANIMATION_MS = 1500
DEATH_LIFESPAN = 1.5

FrameSpec = Tuple[float, float, float]


class _Stopwatch:
    """Measures elapsed game time since it was started or last restarted."""

    def __init__(self, world: Any) -> None:
        self.world = world
        self.started = world.time()

    def seconds(self) -> float:
        return (self.world.time() - self.started) / 1000.0

    def restart(self) -> None:
        self.started = self.world.time()


class _ScriptedEnemy(Enemy):
    """An enemy with its own sprite sheet, direction-driven animations and death pose."""

    TEXTURE = ""
    FRAME_SIZE: Tuple[float, float] = (0.0, 0.0)
    SCALE = 1.0
    ANIMATION_FRAMES: Sequence[Tuple[str, Sequence[FrameSpec]]] = ()

    def _prepare_sprite(self) -> None:
        w, h = self.FRAME_SIZE
        sprite = self._new_sprite(self.texture_file)
        sprite.set_origin(w / 2, h / 2)
        sprite.set_texture_rect(Rect(0, 0, w, h))
        sprite.set_scale(self.SCALE, self.SCALE)
        self.sprite = sprite
        for name, frames in self.ANIMATION_FRAMES:
            animation = Animation(sprite, ANIMATION_MS, True)
            for x, y, width in frames:
                animation.add_frame(AnimFrame(Rect(x, y, width, h)))
            self.animations.setdefault(name, animation)

    def _set_animation(self) -> None:
        if not self.is_alive():
            return
        try:
            self.choose_animation()
        except KeyError:
            pass  # no animation for this direction: keep the current one

    def draw(self, percent: float, delta: float) -> None:
        self._set_animation()
        super().draw(percent, delta)

    def _fire(self, kind: str, direction: Vector2, location: Vector2) -> None:
        self.world.add_enemy_projectile(kind, direction, location)

    def _play(self, path: str) -> None:
        audio = getattr(self.world, "audio", None)
        if audio is not None:
            audio.play_sound_2d(path)

    def _enter_death_pose(self) -> None:
        self.animation = self.animations["dead"]
        self.set_lifespan(DEATH_LIFESPAN)


class FixedEnemy(_ScriptedEnemy):
    """A plant rooted in place that throws almonds at the player."""

    TEXTURE = "./resources/Planta.png"
    FRAME_SIZE = (376.0, 500.0)
    SCALE = 0.1
    FIRE_INTERVAL = 3.0
    ANIMATION_FRAMES = (
        ("stop", ((0, 0, 376), (0, 500, 376))),
        ("dead", ((0, 1500, 376),)),
    )

    def __init__(self, world: Any) -> None:
        super().__init__(world)
        self.texture_file = self.TEXTURE
        self.set_location(Vector2(100.0, 100.0))
        self.direction = Vector2(0.0, 0.0)
        self.max_health = 100.0
        self.health = self.max_health
        self.damage_base = 15.0
        self.damage_multiplier = 0.0
        self.movement_speed = 0.1
        self.set_location(Vector2(340.0, 520.0))
        self.fire_clock = _Stopwatch(world)
        self._prepare_sprite()

    def update(self, delta: float) -> None:
        super().update(delta)
        if self.is_alive():
            self.attack()

    def attack(self) -> bool:
        """Throw an almond towards the player once the reload time has passed."""
        if self.fire_clock.seconds() > self.FIRE_INTERVAL:
            target = self.world.player_character.location
            direction = (target - self.location).normalized()
            self._fire(ALMOND, direction, self.location)
            self._play(THROW_SOUND)
            self.fire_clock.restart()
        return True

    def die(self) -> None:
        """Switch to the death pose and disappear shortly afterwards."""
        self._enter_death_pose()


class MovingEnemy(_ScriptedEnemy):
    """A skull that patrols between two points, pausing to throw rocks."""

    TEXTURE = "./resources/Calavera2.png"
    FRAME_SIZE = (828.0, 896.0)
    SCALE = 0.07
    MOVE_SECONDS = 3.0
    PAUSE_END_SECONDS = 5.0
    FIRE_INTERVAL = 4.0
    TURN_DISTANCE = 10.0
    _WALK = ((0, 1016, 828), (0, 1912, 828))
    ANIMATION_FRAMES = (
        ("up", _WALK),
        ("right", ((828, 1016, -828), (828, 1912, -828))),
        ("left", _WALK),
        ("down", _WALK),
        ("stop", _WALK),
        ("dead", ((0, 3824, 828),)),
    )

    def __init__(self, world: Any) -> None:
        super().__init__(world)
        self.texture_file = self.TEXTURE
        self.max_health = 100.0
        self.health = self.max_health
        self.damage_base = 15.0
        self.damage_multiplier = 0.0
        self.movement_speed = 0.1
        self.start = Vector2()
        self.end = Vector2()
        self.last_direction = Vector2()
        self.set_location(self.start)
        self.fire_clock = _Stopwatch(world)
        self.pause_clock = _Stopwatch(world)
        self._prepare_sprite()

    def prepare(self, start: Vector2, end: Vector2) -> None:
        """Place the enemy at ``start`` and patrol between ``start`` and ``end``."""
        self.set_location(start)
        self.start = start
        self.end = end

    def linear_move(self, start: Vector2, end: Vector2) -> Vector2:
        """Head along the patrol line, turning back near either end; return the direction."""
        unit = (end - start).normalized()
        here = self.location
        to_end = (end - here).length()
        to_start = (start - here).length()
        if here == start:
            self.direction = unit
        else:
            if to_end < self.TURN_DISTANCE:
                self.direction = -unit
            if to_start < self.TURN_DISTANCE:
                self.direction = unit
        self.last_direction = self.direction
        return self.direction

    def update(self, delta: float) -> None:
        super().update(delta)
        if self.pause_clock.seconds() > self.MOVE_SECONDS:
            self.direction = Vector2(0.0, 0.0)
            if self.is_alive():
                self.attack()
            if self.pause_clock.seconds() > self.PAUSE_END_SECONDS:
                self.pause_clock.restart()
                self.fire_clock.restart()
        else:
            self.direction = self.last_direction
            self.linear_move(self.start, self.end)

    def attack(self) -> bool:
        """Throw a rock towards the player once the reload time has passed."""
        if self.fire_clock.seconds() > self.FIRE_INTERVAL:
            target = self.world.player_character.location
            direction = (target - self.location).normalized()
            self._fire(ROCK, direction, self.location)
            self._play(THROW_SOUND)
            self.fire_clock.restart()
        return True

    def die(self) -> None:
        """Switch to the death pose and disappear shortly afterwards."""
        self._enter_death_pose()


class ExplosionEnemy(_ScriptedEnemy):
    """An orange that wanders at random and bursts fireballs in four diagonals."""

    TEXTURE = "./resources/Naranja.png"
    FRAME_SIZE = (212.0, 235.0)
    SCALE = 0.25
    MOVE_SECONDS = 1.0
    PAUSE_END_SECONDS = 4.0
    TURN_SECONDS = 2.0
    FIRE_INTERVAL = 3.0
    DIRECTIONS = (
        Vector2(0.0, -1.0), Vector2(0.0, 1.0), Vector2(-1.0, 0.0), Vector2(1.0, 0.0),
        Vector2(1.0, 1.0), Vector2(-1.0, 1.0), Vector2(-1.0, -1.0), Vector2(1.0, -1.0),
    )
    FIRE_DIRECTIONS = (
        Vector2(1.0, 1.0), Vector2(-1.0, -1.0), Vector2(-1.0, 1.0), Vector2(1.0, -1.0),
    )
    _WALK = ((0, 0, 212), (0, 235, 212))
    ANIMATION_FRAMES = (
        ("up", _WALK),
        ("right", ((212, 0, -212), (212, 235, -212))),
        ("left", _WALK),
        ("down", _WALK),
        ("dead", ((0, 470, 212),)),
    )

    def __init__(self, world: Any) -> None:
        super().__init__(world)
        self.texture_file = self.TEXTURE
        self.set_location(Vector2(100.0, 100.0))
        self.direction = Vector2(-0.5, -0.5)
        self.max_health = 100.0
        self.health = self.max_health
        self.damage_base = 15.0
        self.damage_multiplier = 0.0
        self.movement_speed = 0.05
        self.set_location(Vector2(340.0, 520.0))
        self.fire_clock = _Stopwatch(world)
        self.turn_clock = _Stopwatch(world)
        self.pause_clock = _Stopwatch(world)
        self._prepare_sprite()

    def update(self, delta: float) -> None:
        super().update(delta)
        if self.pause_clock.seconds() > self.MOVE_SECONDS:
            self.direction = Vector2(0.0, 0.0)
            if self.is_alive():
                self.attack()
            if self.pause_clock.seconds() > self.PAUSE_END_SECONDS:
                self.pause_clock.restart()
                self.fire_clock.restart()
        else:
            self.follow_player()

    def random_direction(self) -> Vector2:
        """One of the eight compass directions, chosen at random."""
        return self.rng.choice(self.DIRECTIONS)

    def follow_player(self) -> None:
        """Pick a new random heading every couple of seconds."""
        if self.turn_clock.seconds() > self.TURN_SECONDS:
            self.direction = self.random_direction()
            self.turn_clock.restart()

    def attack(self) -> bool:
        """Launch four fireballs diagonally once the reload time has passed."""
        if self.fire_clock.seconds() > self.FIRE_INTERVAL:
            for direction in self.FIRE_DIRECTIONS:
                self._fire(FIREBALL, direction, self.location)
            self.fire_clock.restart()
        return True

    def die(self) -> None:
        """Switch to the death pose and disappear shortly afterwards."""
        self._enter_death_pose()