import pytest

from dungeonrun.engine import AnimFrame, Animation, Engine, Rect, Vector2
from dungeonrun.particles import (
    CoinBurst,
    FireballExplosion,
    PlayerHit,
    PowerUpEffect,
    RockExplosion,
    Splinters,
)

EFFECTS = [Splinters, CoinBurst, PowerUpEffect, FireballExplosion, PlayerHit, RockExplosion]


class Clock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.mark.parametrize("cls", EFFECTS)
def test_effect_is_placed_at_location(cls):
    effect = cls(Vector2(12, 34), Clock())
    assert effect.position == Vector2(12, 34)
    assert effect.pending_delete is False
    assert effect.auto_destroy is True


@pytest.mark.parametrize("cls", EFFECTS)
def test_remaining_life_counts_down(cls):
    clock = Clock()
    effect = cls(Vector2(0, 0), clock)
    effect.lifetime = 500
    assert effect.remaining_life() == 500
    clock.now = 200
    assert effect.remaining_life() == 300


@pytest.mark.parametrize("cls", EFFECTS)
def test_unlimited_lifetime(cls):
    effect = cls(Vector2(0, 0), Clock())
    effect.lifetime = -1
    assert effect.remaining_life() == 1


@pytest.mark.parametrize("cls", EFFECTS)
def test_one_shot_animation_flags_removal(cls):
    engine = Engine(800, 600)
    effect = cls(Vector2(5, 5), Clock())
    effect.engine = engine
    anim = Animation(effect, 100)
    anim.add_frame(AnimFrame(Rect(0, 0, 10, 10)))
    effect.animation = anim
    effect.draw(150)
    assert effect.pending_delete is True
    assert engine.drawn == [effect]


@pytest.mark.parametrize("cls", EFFECTS)
def test_draw_without_animation_keeps_effect(cls):
    effect = cls(Vector2(5, 5), Clock())
    assert effect.draw(1000) == Vector2(5, 5)
    assert effect.pending_delete is False