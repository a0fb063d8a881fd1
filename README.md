# dungeonrun

The game logic of a top-down dungeon arcade game, kept apart from any
graphics or audio back end. The world is made of plain Python objects
that can be updated, inspected and tested without a window: drawing only
records what would be drawn, and sounds only track their playback state.

## Modules

- `dungeonrun.engine`: `Vector2` (addition, subtraction, negation,
  scaling, `length()`, `normalized()`), `Rect` (`contains()`,
  `intersects()`), and `Engine`, which holds the window size, a camera
  `view` (`set_view()` clamps its top edge between -100 and 380,
  `reset_view()`), the list of objects `drawn` this frame, and
  `find_quadrant()` returning a `RelativePosition`. Also `Sprite` with
  position, origin, scale, rotation, texture rectangle, `global_bounds()`,
  custom collision `bounds()` / `set_bounds()` and `draw_interpolated()`;
  `Animation` made of `AnimFrame`s; `Cascade`, a short-lived animated
  particle sprite; and `FloatingText`, a fading, rising label.
- `dungeonrun.actor`: the `Actor` base class (location with the previous
  one kept for interpolation, `ObjectType` collision channel, lifespan,
  bounding box, optional debug overlay) and a `Controller` that sets a
  pawn's direction.
- `dungeonrun.pawn`: `Pawn`, an actor with health, a `Faction`, movement
  along its direction with wall sliding and blockers, direction-based
  animation choice, damage and death.
- `dungeonrun.enemy`: `Enemy`, a pawn with a target marker, critical hits
  and floating damage numbers, that spawns particles when hit or killed.
- `dungeonrun.enemies`: `FixedEnemy` (throws almonds at the player),
  `MovingEnemy` (patrols between two points and throws rocks) and
  `ExplosionEnemy` (wanders at random and fires four diagonal fireballs).
- `dungeonrun.powerup`: `PowerUp` pick-ups of each `PowerUpType`; taking
  one applies it through the player controller and retires all the others.
- `dungeonrun.door`: `Door`, which blocks until `open()`, and the `Trap`
  base class with a timer.
- `dungeonrun.particles`: `Cascade` effects `Splinters`, `CoinBurst`,
  `PowerUpEffect`, `FireballExplosion`, `PlayerHit` and `RockExplosion`.
- `dungeonrun.audio`: `AudioManager`, tracking menu music, menu cues and
  a bounded queue of one-shot `SoundHandle`s played at a random pitch
  between 0.75 and 1.25.
- `dungeonrun.hud`: `Hud`, which draws the player's segmented health bar,
  `HealthBar`s above living enemies, the level label and upgrade counters.
- `dungeonrun.menu`: `Menu`, the main menu and the score screen; `update()`
  takes the mouse position and a click flag and answers with a
  `MenuAction`.
- `dungeonrun.tilemap`: `TileMap`, which reads a Tiled `.tmx` file and
  turns its layers into doors, enemies, power-ups and `Placement`s.

## The world object

Actors take a `world` object supplied by the caller. Depending on what is
used, it provides `time()` (game time in milliseconds), `engine`, `audio`,
`rng`, `spawn_emitter(kind, location, velocity)`, `player_character`,
`player_controller`, `power_ups`, `box_trace(rect, object_type, ignore,
axis)` and `add_enemy_projectile(kind, direction, location)`.

## Example

```python
from dungeonrun.engine import (
    AnimFrame, Animation, Engine, Rect, RelativePosition, Sprite, Vector2,
)

engine = Engine(900, 700)
engine.set_view(center_y=400.0, border_x=0.0)

quadrant = engine.find_quadrant(Vector2(0, 0), Vector2(5, -3))
assert quadrant is RelativePosition.TOP_RIGHT

sprite = Sprite("hero.png", (64, 64))
walk = Animation(sprite, 1000, True)
walk.add_frame(AnimFrame(Rect(0, 0, 64, 64)))
walk.add_frame(AnimFrame(Rect(64, 0, 64, 64)))
assert walk.update(600) == 400          # moved to the second frame
assert sprite.texture_rect == Rect(64, 0, 64, 64)
```

## What the package does not do

- It opens no window and renders nothing; `Engine.draw()` only records
  objects, and there is no game loop and no command to start a game.
- It plays no sound; `AudioManager` only keeps playback state.
- `TileMap` does not build wall tiles, spikes, saws, stalkers or bosses;
  it records them as `Placement`s (`PlacementKind.TILE`, `SPIKES`, `SAW`,
  `STALKER`, `BOSS`) for the caller to turn into actors.
- Projectiles are not modelled; enemies hand them to the world through
  `add_enemy_projectile()`.

## Installation

```
pip install .
```

## Running the tests

```
pip install ".[test]"
pytest
```