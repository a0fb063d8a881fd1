"""The in-game heads-up display: health bars, level label and collected upgrades."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .engine import Engine, Rect, Sprite, Vector2
from .powerup import PowerUpType

Color = Tuple[int, int, int, int]

HEALTH_FULL: Color = (0, 204, 102, 255)
HEALTH_HALF: Color = (255, 255, 102, 255)
HEALTH_LOW: Color = (255, 0, 0, 255)
BLACK: Color = (0, 0, 0, 255)
TRANSPARENT: Color = (0, 0, 0, 0)

WINDOW_TEXTURE = "./resources/menu/Windows.png"
NO_UPGRADES_LABEL = "Sin mejoras"

_ICON_X = {
    PowerUpType.HEALTH: 805.0,
    PowerUpType.MOVEMENT_SPEED: 810.0,
    PowerUpType.ATTACK_SPEED: 805.0,
    PowerUpType.ATTACK_MORE: 820.0,
    PowerUpType.MORE_DAMAGE: 820.0,
    PowerUpType.CRIT_ATTACK: 820.0,
}


@dataclass
class HealthBar:
    """A filled or outlined rectangle used for health bars and their borders."""

    size: Vector2
    position: Vector2 = Vector2()
    origin: Vector2 = Vector2()
    fill: Color = TRANSPARENT
    outline: Color = TRANSPARENT
    outline_thickness: float = 0.0


@dataclass
class _Text:
    text: str
    position: Vector2 = Vector2()
    size: int = 20
    color: Color = BLACK


class Hud:
    """Draws the player's segmented health bar, enemy bars and the upgrade panel."""

    BAR_WIDTH = 80.0
    BAR_HEIGHT = 5.0
    BAR_OFFSET_Y = 50.0
    SEGMENT_HEALTH = 25.0
    UPGRADE_SPACING = 40.0

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.percent = 1.0
        self.width = self.BAR_WIDTH
        self.enemy_width = self.BAR_WIDTH
        self.height = self.BAR_HEIGHT
        self.max_health = 0.0
        self.current_health = 0.0
        self.player: Optional[Any] = None

        top = engine.view.top
        self.player_bar = HealthBar(Vector2(self.width, self.height),
                                    position=Vector2(775.0, top + 25.0),
                                    fill=HEALTH_FULL)
        self.enemy_bars: List[HealthBar] = []
        self.segments: List[HealthBar] = []

        self.counts: Dict[PowerUpType, int] = {kind: 0 for kind in PowerUpType}
        self.counter_texts: Dict[PowerUpType, _Text] = {
            kind: _Text("") for kind in PowerUpType
        }
        self.icons: Dict[PowerUpType, Sprite] = {}
        for kind in PowerUpType:
            icon = Sprite(f"./resources/powerups/{int(kind)}.png")
            bounds = icon.global_bounds()
            icon.set_origin(bounds.width / 2, bounds.height / 2)
            self.icons[kind] = icon

        self.window = Sprite(WINDOW_TEXTURE)
        self.window.set_texture_rect(Rect(1504.0, 960.0, 530.0, 717.0))
        self.window.set_scale(0.3, 0.6)
        self.level_text = _Text("")

    def _require_player(self) -> Any:
        if self.player is None:
            raise RuntimeError("the HUD has no player")
        return self.player

    def set_player(self, player: Any) -> None:
        """Attach the player whose health the HUD shows."""
        self.player = player
        self.max_health = player.max_health
        self.set_current_health(player.health)

    def set_current_health(self, health: float) -> None:
        """Update the player bar; negative values keep the previous health."""
        player = self._require_player()
        self.max_health = player.max_health
        if self.max_health <= 0:
            raise ValueError("maximum health must be positive")
        if health >= 0:
            self.current_health = health
        self.percent = self.current_health / self.max_health
        self.player_bar.size = Vector2(self.percent * self.width, self.height)
        self.player_bar.origin = Vector2(self.width / 2, self.height / 2)
        self.player_bar.fill = HEALTH_FULL

    def set_level(self, number: int) -> None:
        self.level_text.text = f"Nivel {number}"

    def add_upgrade(self, kind: PowerUpType) -> None:
        """Count one more upgrade of a kind and refresh every counter label."""
        self.counts[PowerUpType(kind)] += 1
        for key, text in self.counter_texts.items():
            text.text = f"{self.counts[key]}x"

    def reset_upgrades(self) -> None:
        for kind in self.counts:
            self.counts[kind] = 0

    def _build_segments(self, y: float) -> List[HealthBar]:
        count = int(self.max_health / self.SEGMENT_HEALTH)
        if count <= 0:
            return []
        segment_width = self.width / count
        x = self.player_bar.position.x - self.width / 2 + segment_width / 2
        segments = []
        for _ in range(count):
            segments.append(HealthBar(Vector2(segment_width, self.height),
                                      position=Vector2(x, y),
                                      origin=Vector2(segment_width / 2, self.height / 2),
                                      outline=BLACK, outline_thickness=1.0))
            x += segment_width
        return segments

    def draw(self, enemies: Iterable[Any]) -> None:
        """Draw the whole HUD for one frame."""
        player = self._require_player()
        engine = self.engine
        top = engine.view.top

        self.window.set_position(725.0, top + 50.0)
        engine.draw(self.window)
        self.level_text.position = Vector2(760.0, top + 85.0)
        engine.draw(self.level_text)
        self.set_current_health(player.health)

        enemies = list(enemies)
        self.enemy_bars = []
        for enemy in enemies:
            if enemy.health >= 0:
                fraction = enemy.health / enemy.max_health
                self.enemy_bars.append(HealthBar(
                    Vector2(fraction * self.enemy_width, self.height),
                    origin=Vector2(self.enemy_width / 2, self.height / 2),
                    fill=HEALTH_LOW))

        pos = player.interpolated_position
        bar_y = pos.y - self.BAR_OFFSET_Y
        self.player_bar.position = Vector2(pos.x, bar_y)
        engine.draw(self.player_bar)
        self.segments = self._build_segments(bar_y)
        for segment in self.segments:
            engine.draw(segment)

        border = HealthBar(Vector2(self.enemy_width, self.height),
                           origin=Vector2(self.enemy_width / 2, self.height / 2),
                           outline=BLACK, outline_thickness=1.0)
        bars = iter(self.enemy_bars)
        for enemy in enemies:
            if enemy is not None and self.enemy_bars and enemy.is_alive():
                bar = next(bars)
                epos = enemy.interpolated_position
                spot = Vector2(epos.x, epos.y - self.BAR_OFFSET_Y)
                bar.position = spot
                engine.draw(replace(border, position=spot))
                engine.draw(bar)

        self._draw_upgrades(top)

    def _draw_upgrades(self, top: float) -> None:
        engine = self.engine
        row = 0
        for kind in PowerUpType:
            if self.counts[kind] <= 0:
                continue
            offset = self.UPGRADE_SPACING * row + top
            text = self.counter_texts[kind]
            text.position = Vector2(755.0, offset + 130.0)
            engine.draw(text)
            icon = self.icons[kind]
            icon.set_position(_ICON_X[kind], offset + 140.0)
            engine.draw(icon)
            row += 1
        if not any(self.counts.values()):
            engine.draw(_Text(NO_UPGRADES_LABEL, Vector2(745.0, top + 190.0), 15, BLACK))