"""The main menu and the end-of-game score screen, driven by the mouse."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple

from .engine import Engine, Sprite, Vector2

Color = Tuple[int, int, int, int]
WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)

PLAY = "Jugar"
QUIT = "Salir"
RESTART = "Reinicia"
VICTORY_LABEL = "VICTORIA"
DEFEAT_LABEL = "DERROTA"
SCORE_CAPTION = "Puntos"


class MenuAction(Enum):
    """What a menu update asks the game to do."""

    NONE = "none"
    PLAY = "play"
    RESTART = "restart"
    QUIT = "quit"


@dataclass
class _Text:
    text: str
    position: Vector2 = Vector2()
    size: int = 30
    color: Color = WHITE


@dataclass
class _MenuItem:
    normal: Sprite
    selected: Sprite


class Menu:
    """Shows either the main menu or the score screen, with hoverable items."""

    ITEM_SEPARATION = 160.0
    ITEM_TEXTURE_SIZE = (240.0, 80.0)

    def __init__(self, engine: Engine, audio: Any) -> None:
        self.engine = engine
        self.audio = audio
        self.show_main = True
        self.selected = ""
        self.score = 0.0
        self.score_text = _Text("", size=30)
        self.caption_text = _Text("", size=28, color=BLACK)
        self.result_text = _Text("", size=100)
        self._load_items()
        audio.toggle_menu_music()

    def _item_sprite(self, name: str, position: Vector2) -> Sprite:
        sprite = Sprite(f"./resources/menu/{name}.png", self.ITEM_TEXTURE_SIZE)
        bounds = sprite.global_bounds()
        sprite.set_origin(bounds.width / 2, bounds.height / 2)
        sprite.set_position(position.x, position.y)
        return sprite

    def _item(self, name: str, position: Vector2) -> _MenuItem:
        return _MenuItem(self._item_sprite(name, position),
                         self._item_sprite(f"{name}selecc", position))

    def _load_items(self) -> None:
        cx = self.engine.width / 2
        cy = self.engine.height / 2
        sep = self.ITEM_SEPARATION
        play = self._item("jugar", Vector2(cx, cy + sep))
        leave = self._item("salir", Vector2(cx, cy + sep + sep / 2))
        retry = self._item("reintentar", Vector2(cx, cy + sep))
        self.main_items: Dict[str, _MenuItem] = {PLAY: play, QUIT: leave}
        self.score_items: Dict[str, _MenuItem] = {RESTART: retry, QUIT: leave}

        self.background = Sprite("./resources/menu/pantallamenu.png")
        self.score_background = Sprite("./resources/menu/pantallapuntos.png")
        self.logo = Sprite("./resources/menu/logoletras2.png")
        self.logo.set_scale(0.5, 0.5)
        bounds = leave.selected.global_bounds()
        self.logo.set_origin(bounds.width / 2, bounds.height / 2)
        self.logo.set_position(cx - 10.0, 30.0)

    @property
    def items(self) -> Dict[str, _MenuItem]:
        """The selectable items of the screen currently shown."""
        return self.main_items if self.show_main else self.score_items

    def show_scores(self, score: float, victory: bool) -> None:
        """Switch to the score screen and restart the menu music toggle."""
        self.score = score
        self.show_main = False
        cx = self.engine.width / 2
        cy = self.engine.height / 2
        self.score_text.text = str(int(score))
        self.score_text.position = Vector2(cx, cy + 20.0)
        self.caption_text.text = SCORE_CAPTION
        self.caption_text.position = Vector2(cx, cy - 75.0)
        self.result_text.text = VICTORY_LABEL if victory else DEFEAT_LABEL
        self.result_text.position = Vector2(cx, cy - 200.0)
        self.audio.toggle_menu_music()

    def _to_world(self, pixel: Vector2) -> Vector2:
        view = self.engine.view
        return Vector2(view.left + pixel.x * view.width / self.engine.width,
                       view.top + pixel.y * view.height / self.engine.height)

    def update(self, mouse_position: Vector2, clicked: bool = False) -> MenuAction:
        """Track the hovered item and act on a left click."""
        point = self._to_world(mouse_position)
        previous = self.selected
        self.selected = ""
        for name, item in self.items.items():
            if item.normal.global_bounds().contains(point):
                self.selected = name
                if previous != name:
                    self.audio.play_menu_move()
        if not clicked:
            return MenuAction.NONE
        if self.selected == PLAY:
            self.audio.play_menu_ok()
            self.audio.toggle_menu_music()
            return MenuAction.PLAY
        if self.selected == QUIT:
            self.audio.play_menu_ok()
            return MenuAction.QUIT
        if self.selected == RESTART:
            self.audio.play_menu_ok()
            self.audio.toggle_menu_music()
            return MenuAction.RESTART
        return MenuAction.NONE

    def draw(self) -> List[object]:
        """Draw the current screen and return what was drawn."""
        drawn: List[object] = []
        if self.show_main:
            drawn.extend([self.background, self.logo])
        else:
            drawn.extend([self.score_background, self.result_text,
                          self.caption_text, self.score_text])
        for name, item in self.items.items():
            drawn.append(item.selected if name == self.selected else item.normal)
        for obj in drawn:
            self.engine.draw(obj)
        return drawn