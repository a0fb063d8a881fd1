import random

from dungeonrun.actor import ObjectType
from dungeonrun.audio import AudioManager
from dungeonrun.door import DOOR_OPEN_SOUND, Door, Trap
from dungeonrun.engine import Engine, Rect, Vector2


class FakeWorld:
    def __init__(self):
        self.now = 0
        self.engine = Engine(800, 600)
        self.audio = AudioManager(random.Random(1))

    def time(self):
        return self.now


def test_door_starts_closed_and_solid():
    door = Door(FakeWorld(), Vector2(50, 100), True)
    assert door.is_open is False
    assert door.is_upper is True
    assert door.object_type is ObjectType.WORLD_STATIC
    assert door.location == Vector2(50, 100)
    assert door.sprite.texture_rect == Rect(0, 0, 145, 166)


def test_open_changes_channel_and_plays_sound():
    world = FakeWorld()
    door = Door(world, Vector2(0, 0), False)
    door.open()
    assert door.is_open is True
    assert door.object_type is ObjectType.DOOR
    assert world.audio.queue[-1].path == DOOR_OPEN_SOUND


def test_closed_door_does_not_animate():
    door = Door(FakeWorld(), Vector2(0, 0), False)
    door.draw(1.0, 400)
    assert door.animation.total_progress == 0.0


def test_open_door_advances_animation():
    door = Door(FakeWorld(), Vector2(0, 0), False)
    door.open()
    door.draw(1.0, 400)
    assert door.animation.current_frame == 1
    assert door.sprite.texture_rect == Rect(145, 0, 145, 166)


def test_trap_timer_tracks_world_time():
    world = FakeWorld()
    trap = Trap(world)
    world.now += 250
    assert trap.elapsed_ms() == 250
    assert trap.restart_timer() == 250
    assert trap.elapsed_ms() == 0
    assert trap.animations == {}