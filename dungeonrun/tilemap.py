"""Levels read from Tiled map files: walls, doors, traps, enemies and power-ups."""

from __future__ import annotations

import os
import random
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum
from itertools import chain, product, repeat
from typing import Any, Dict, List, Optional

from .actor import Actor, ObjectType
from .door import Door
from .enemies import ExplosionEnemy, FixedEnemy, MovingEnemy
from .enemy import Enemy
from .engine import Sprite, Vector2
from .powerup import PowerUp, PowerUpType

MAPS_DIR = "./resources/maps/"
BACKGROUND_TEXTURE = "./resources/maps/tiles/fondoExterior.png"
FLOOR_TEXTURE = "./resources/maps/tiles/sueloCespedCompleto.png"
BACKGROUND_POSITION = Vector2(-189.0, -100.0)
FLOOR_POSITION = Vector2(0.0, 0.0)

LAYER_WALLS = "pared"
LAYER_BLOCKERS = "blocker"
LAYER_DOORS = "puerta"
LAYER_FIXED_ENEMIES = "enemigos1"
LAYER_MOVING_ENEMIES = "enemigos2"
LAYER_EXPLODING_ENEMIES = "enemigos3"
LAYER_STALKERS = "enemigos4"
LAYER_BOSS = "boss1"
LAYER_FLOOR = "suelo"
LAYER_SPIKES = "pinchos"
LAYER_SAWS = "sierra"
LAYER_POWER_UPS = "mejoras"

PROPERTY_SAW_LENGTH = "LongitudSierra"
PROPERTY_MOVING_END_X = "MovingEnemyFinalPosX"
PROPERTY_MOVING_END_Y = "MovingEnemyFinalPosY"

UPPER_DOOR_ROW_Y = 50
DOOR_OFFSET = 50


class PlacementKind(Enum):
    """Things a map places that are built by other parts of the game."""

    TILE = "tile"
    SPIKES = "spikes"
    SAW = "saw"
    STALKER = "stalker"
    BOSS = "boss"


@dataclass
class Placement:
    """Where and how a map asks for a tile, trap or special enemy."""

    kind: PlacementKind
    location: Vector2
    texture: Optional[str] = None
    size: Vector2 = field(default_factory=Vector2)
    object_type: Optional[ObjectType] = None
    removable: bool = False
    length: float = 0.0


def _int_attr(element: ET.Element, name: str) -> int:
    value = element.get(name)
    if value is None:
        raise ValueError(f"map is missing the {name!r} attribute")
    return int(value)


class TileMap:
    """Reads a level and keeps what it places until the game takes it."""

    def __init__(self, world: Any, name: str, maps_dir: str = MAPS_DIR) -> None:
        self.world = world
        self.name = name
        self.maps_dir = maps_dir
        self.path = os.path.join(maps_dir, name)
        self.rows = 0
        self.columns = 0
        self.tile_width = 0
        self.tile_height = 0
        self.layer_count = 0
        self.properties: Dict[str, str] = {}
        self.tileset_images: List[str] = []
        self.backgrounds: List[Sprite] = []
        self.tiles: List[Placement] = []
        self.doors: List[Door] = []
        self.enemies: List[Any] = []
        self.traps: List[Placement] = []
        self.power_ups: List[PowerUp] = []
        self.rng = getattr(world, "rng", None) or random.Random()
        self.load()

    def _float_property(self, name: str) -> float:
        try:
            return float(self.properties[name])
        except KeyError:
            raise ValueError(f"map has no {name!r} property") from None

    def _texture(self, gid: int) -> str:
        if not 1 <= gid <= len(self.tileset_images):
            raise ValueError(f"tile id {gid} has no tileset image")
        return self.tileset_images[gid - 1]

    def _reset(self) -> None:
        self.properties = {}
        self.tileset_images = []
        self.backgrounds = []
        self.tiles = []
        self.doors = []
        self.enemies = []
        self.traps = []
        self.power_ups = []

    def load(self) -> None:
        """Parse the map file and build everything it places."""
        root = ET.parse(self.path).getroot()
        if root.tag != "map":
            raise ValueError(f"{self.path} is not a map")
        self._reset()
        self.rows = _int_attr(root, "height")
        self.columns = _int_attr(root, "width")
        self.tile_width = _int_attr(root, "tilewidth")
        self.tile_height = _int_attr(root, "tileheight")

        for prop in root.findall("properties/property"):
            self.properties[prop.get("name", "")] = prop.get("value", "")

        for tileset in root.findall("tileset"):
            image = tileset.find("image")
            if image is None or image.get("source") is None:
                raise ValueError("tileset has no image")
            self.tileset_images.append(os.path.join(self.maps_dir, image.get("source")))

        for path, position in ((BACKGROUND_TEXTURE, BACKGROUND_POSITION),
                               (FLOOR_TEXTURE, FLOOR_POSITION)):
            sprite = Sprite(path)
            sprite.set_position(position.x, position.y)
            self.backgrounds.append(sprite)

        layers = root.findall("layer")
        self.layer_count = len(layers)
        for layer in layers:
            self._load_layer(layer)

    def _load_layer(self, layer: ET.Element) -> None:
        name = layer.get("name", "")
        tiles = layer.findall("data/tile")
        if not tiles:
            raise ValueError(f"layer {name!r} has no tiles")
        cells = chain(tiles, repeat(tiles[-1]))
        for (row, column), tile in zip(product(range(self.rows), range(self.columns)), cells):
            gid = tile.get("gid")
            if gid is None:
                continue
            self._place(name, int(gid), row * self.tile_width, column * self.tile_height)

    def _tile(self, gid: int, x: float, y: float, object_type: ObjectType,
              removable: bool) -> Placement:
        return Placement(PlacementKind.TILE, Vector2(float(x), float(y)),
                         texture=self._texture(gid),
                         size=Vector2(float(self.tile_width), float(self.tile_height)),
                         object_type=object_type, removable=removable)

    def _centre(self, pos_x: int, pos_y: int) -> Vector2:
        return Vector2(float(pos_y + self.tile_height // 2),
                       float(pos_x + self.tile_width // 2))

    def _place(self, layer: str, gid: int, pos_x: int, pos_y: int) -> None:
        if layer == LAYER_WALLS:
            self.tiles.append(self._tile(gid, pos_y, pos_x, ObjectType.WORLD_STATIC, False))
        elif layer == LAYER_BLOCKERS:
            self.tiles.append(self._tile(gid, pos_y, pos_x, ObjectType.BLOCKER, False))
        elif layer == LAYER_SPIKES:
            self.traps.append(Placement(PlacementKind.SPIKES,
                                        Vector2(float(pos_y), float(pos_x))))
        elif layer == LAYER_SAWS:
            length = self._float_property(PROPERTY_SAW_LENGTH) * self.tile_width
            self.traps.append(Placement(PlacementKind.SAW,
                                        Vector2(float(pos_y), float(pos_x)), length=length))
        elif layer == LAYER_DOORS:
            self._place_door(gid, pos_x, pos_y)
        elif layer == LAYER_MOVING_ENEMIES:
            end_x = self._float_property(PROPERTY_MOVING_END_X)
            end_y = self._float_property(PROPERTY_MOVING_END_Y)
            enemy = MovingEnemy(self.world)
            half_w, half_h = self.tile_width / 2, self.tile_height / 2
            enemy.prepare(Vector2(pos_y + half_h, pos_x + half_w),
                          Vector2(end_y * self.tile_height + half_h,
                                  end_x * self.tile_width + half_w))
            self.enemies.append(enemy)
        elif layer == LAYER_FIXED_ENEMIES:
            self._spawn(FixedEnemy(self.world), pos_x, pos_y)
        elif layer == LAYER_EXPLODING_ENEMIES:
            self._spawn(ExplosionEnemy(self.world), pos_x, pos_y)
        elif layer == LAYER_STALKERS:
            self.enemies.append(Placement(PlacementKind.STALKER, self._centre(pos_x, pos_y)))
        elif layer == LAYER_BOSS:
            self.enemies.append(Placement(PlacementKind.BOSS, self._centre(pos_x, pos_y)))
        elif layer == LAYER_POWER_UPS:
            self._place_power_up(pos_x, pos_y)

    def _spawn(self, enemy: Enemy, pos_x: int, pos_y: int) -> None:
        enemy.set_location(self._centre(pos_x, pos_y))
        self.enemies.append(enemy)

    def _place_door(self, gid: int, pos_x: int, pos_y: int) -> None:
        upper = pos_x == UPPER_DOOR_ROW_Y
        self.doors.append(Door(self.world,
                               Vector2(float(pos_y), float(pos_x + DOOR_OFFSET)), upper))
        wall_y = pos_x if upper else pos_x - DOOR_OFFSET
        for x in (pos_y, pos_y + DOOR_OFFSET):
            self.tiles.append(self._tile(gid, x, wall_y, ObjectType.WORLD_STATIC, True))

    def _place_power_up(self, pos_x: int, pos_y: int) -> None:
        taken = {power_up.kind for power_up in self.power_ups}
        if len(taken) >= len(PowerUpType):
            raise ValueError("map places more power-ups than there are kinds")
        kind = PowerUpType(self.rng.randrange(len(PowerUpType)))
        while kind in taken:
            kind = PowerUpType(self.rng.randrange(len(PowerUpType)))
        power_up = PowerUp(self.world, kind)
        power_up.set_location(self._centre(pos_x, pos_y))
        self.power_ups.append(power_up)

    def take_actors(self) -> List[Any]:
        """Hand over everything placed, in drawing order, and forget it."""
        actors: List[Any] = [*self.doors, *self.tiles, *self.power_ups,
                             *self.traps, *self.enemies]
        self.doors = []
        self.tiles = []
        self.power_ups = []
        self.traps = []
        self.enemies = []
        return actors

    def render(self) -> List[Sprite]:
        """Draw the background and floor; return what was drawn."""
        engine = getattr(self.world, "engine", None)
        if engine is None:
            raise RuntimeError("the world has no engine to draw on")
        for sprite in self.backgrounds:
            engine.draw(sprite)
        return list(self.backgrounds)