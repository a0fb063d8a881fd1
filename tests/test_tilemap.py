import os
import random
import xml.etree.ElementTree as ET

import pytest

from dungeonrun.actor import ObjectType
from dungeonrun.door import Door
from dungeonrun.enemies import ExplosionEnemy, FixedEnemy, MovingEnemy
from dungeonrun.engine import Vector2
from dungeonrun.powerup import PowerUp
from dungeonrun.tilemap import (
    BACKGROUND_TEXTURE,
    FLOOR_TEXTURE,
    Placement,
    PlacementKind,
    TileMap,
)


class FakeEngine:
    def __init__(self):
        self.drawn = []

    def draw(self, obj):
        self.drawn.append(obj)


class FakeWorld:
    def __init__(self):
        self.engine = FakeEngine()
        self.rng = random.Random(7)
        self.audio = None

    def time(self):
        return 0


def write_map(tmp_path, layers, width=3, height=2, properties=None, root="map"):
    props = ""
    if properties:
        items = "".join(f'<property name="{k}" value="{v}"/>' for k, v in properties.items())
        props = f"<properties>{items}</properties>"
    body = ""
    for name, gids in layers.items():
        tiles = "".join("<tile/>" if g is None else f'<tile gid="{g}"/>' for g in gids)
        body += f'<layer name="{name}"><data>{tiles}</data></layer>'
    xml = (f'<{root} width="{width}" height="{height}" tilewidth="50" tileheight="50">'
           f'{props}<tileset><image source="tiles/wall.png"/></tileset>{body}</{root}>')
    (tmp_path / "level.tmx").write_text(xml)
    return str(tmp_path) + os.sep


def load(tmp_path, layers, **kwargs):
    maps_dir = write_map(tmp_path, layers, **kwargs)
    return TileMap(FakeWorld(), "level.tmx", maps_dir), maps_dir


def test_wall_tile_placed_at_its_cell(tmp_path):
    tilemap, maps_dir = load(tmp_path, {"pared": [None] * 5 + [1]})
    assert len(tilemap.tiles) == 1
    tile = tilemap.tiles[0]
    assert tile.kind is PlacementKind.TILE
    assert tile.location == Vector2(100.0, 50.0)
    assert tile.object_type is ObjectType.WORLD_STATIC
    assert tile.texture == os.path.join(maps_dir, "tiles/wall.png")
    assert tile.removable is False


def test_blocker_layer_uses_blocker_channel(tmp_path):
    tilemap, _ = load(tmp_path, {"blocker": [1, None, 1, None, None, None]})
    assert [t.object_type for t in tilemap.tiles] == [ObjectType.BLOCKER] * 2


def test_map_dimensions_read(tmp_path):
    tilemap, _ = load(tmp_path, {"suelo": [1] * 6})
    assert (tilemap.rows, tilemap.columns) == (2, 3)
    assert (tilemap.tile_width, tilemap.tile_height) == (50, 50)
    assert tilemap.layer_count == 1
    assert tilemap.take_actors() == []


def test_fixed_and_exploding_enemies_centered_in_cell(tmp_path):
    tilemap, _ = load(tmp_path, {
        "enemigos1": [None, 1, None, None, None, None],
        "enemigos3": [None, None, None, 1, None, None],
    })
    fixed, exploding = tilemap.enemies
    assert isinstance(fixed, FixedEnemy)
    assert isinstance(exploding, ExplosionEnemy)
    assert fixed.location == Vector2(75.0, 25.0)
    assert exploding.location.x == fixed.location.x - 50
    assert exploding.location.y == fixed.location.y + 50


def test_moving_enemy_patrols_to_property_end(tmp_path):
    tilemap, _ = load(tmp_path, {"enemigos2": [1, None, None, None, None, None]},
                      properties={"MovingEnemyFinalPosX": "1", "MovingEnemyFinalPosY": "2"})
    (enemy,) = tilemap.enemies
    assert isinstance(enemy, MovingEnemy)
    assert enemy.start == enemy.location
    assert enemy.end.x - enemy.start.x == 100.0
    assert enemy.end.y - enemy.start.y == 50.0


def test_moving_enemy_without_properties_is_an_error(tmp_path):
    with pytest.raises(ValueError):
        load(tmp_path, {"enemigos2": [1, None, None, None, None, None]})


def test_stalker_and_boss_become_placements(tmp_path):
    tilemap, _ = load(tmp_path, {
        "enemigos4": [1, None, None, None, None, None],
        "boss1": [None, None, None, None, None, 1],
    })
    kinds = [e.kind for e in tilemap.enemies]
    assert kinds == [PlacementKind.STALKER, PlacementKind.BOSS]


def test_upper_door_has_two_removable_walls(tmp_path):
    tilemap, _ = load(tmp_path, {"puerta": [None, None, None, None, 1, None]})
    (door,) = tilemap.doors
    assert isinstance(door, Door)
    assert door.is_upper is True
    assert door.location == Vector2(50.0, 100.0)
    assert len(tilemap.tiles) == 2
    assert all(t.removable and t.object_type is ObjectType.WORLD_STATIC
               for t in tilemap.tiles)
    assert {t.location.y for t in tilemap.tiles} == {50.0}


def test_lower_door_walls_sit_above_it(tmp_path):
    tilemap, _ = load(tmp_path, {"puerta": [1, None, None, None, None, None]}, height=1)
    (door,) = tilemap.doors
    assert door.is_upper is False
    assert {t.location.y for t in tilemap.tiles} == {-50.0}


def test_spikes_and_saws(tmp_path):
    tilemap, _ = load(tmp_path, {
        "pinchos": [1, None, None, None, None, None],
        "sierra": [None, None, None, None, None, 1],
    }, properties={"LongitudSierra": "3"})
    spikes, saw = tilemap.traps
    assert spikes.kind is PlacementKind.SPIKES
    assert saw.kind is PlacementKind.SAW
    assert saw.length == 3 * tilemap.tile_width


def test_saw_without_length_is_an_error(tmp_path):
    with pytest.raises(ValueError):
        load(tmp_path, {"sierra": [1, None, None, None, None, None]})


def test_power_ups_have_distinct_kinds(tmp_path):
    tilemap, _ = load(tmp_path, {"mejoras": [1, 1, 1, 1, 1, 1]})
    kinds = [p.kind for p in tilemap.power_ups]
    assert all(isinstance(p, PowerUp) for p in tilemap.power_ups)
    assert len(set(kinds)) == 6


def test_too_many_power_ups_is_an_error(tmp_path):
    with pytest.raises(ValueError):
        load(tmp_path, {"mejoras": [1] * 7}, width=7, height=1)


def test_take_actors_orders_and_empties(tmp_path):
    tilemap, _ = load(tmp_path, {
        "enemigos1": [1, None, None, None, None, None],
        "pinchos": [None, 1, None, None, None, None],
        "mejoras": [None, None, 1, None, None, None],
        "pared": [None, None, None, 1, None, None],
        "puerta": [None, None, None, None, 1, None],
    })
    actors = tilemap.take_actors()
    kinds = [type(a) for a in actors]
    assert kinds[0] is Door
    assert kinds[1:4] == [Placement] * 3
    assert kinds[4] is PowerUp
    assert actors[5].kind is PlacementKind.SPIKES
    assert isinstance(actors[6], FixedEnemy)
    assert tilemap.take_actors() == []


def test_short_layer_repeats_last_tile(tmp_path):
    tilemap, _ = load(tmp_path, {"pared": [None, 1]})
    assert len(tilemap.tiles) == 5


def test_unknown_tile_id_is_an_error(tmp_path):
    with pytest.raises(ValueError):
        load(tmp_path, {"pared": [2, None, None, None, None, None]})


def test_non_map_root_is_an_error(tmp_path):
    maps_dir = write_map(tmp_path, {}, root="world")
    with pytest.raises(ValueError):
        TileMap(FakeWorld(), "level.tmx", maps_dir)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        TileMap(FakeWorld(), "absent.tmx", str(tmp_path) + os.sep)


def test_malformed_file(tmp_path):
    (tmp_path / "bad.tmx").write_text("<map")
    with pytest.raises(ET.ParseError):
        TileMap(FakeWorld(), "bad.tmx", str(tmp_path) + os.sep)


def test_render_draws_background_then_floor(tmp_path):
    maps_dir = write_map(tmp_path, {})
    world = FakeWorld()
    tilemap = TileMap(world, "level.tmx", maps_dir)
    drawn = tilemap.render()
    assert world.engine.drawn == drawn
    assert [s.texture_path for s in drawn] == [BACKGROUND_TEXTURE, FLOOR_TEXTURE]


def test_render_without_engine_is_an_error(tmp_path):
    maps_dir = write_map(tmp_path, {})
    world = FakeWorld()
    tilemap = TileMap(world, "level.tmx", maps_dir)
    world.engine = None
    with pytest.raises(RuntimeError):
        tilemap.render()