"""Sound bookkeeping: menu music, menu cues and one-shot 2D sounds."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

MENU_MUSIC = "./resources/audio/main_theme.ogg"
MENU_MOVE = "./resources/audio/cursor_move.ogg"
MENU_OK = "./resources/audio/cursor_ok.ogg"

QUEUE_LIMIT = 100
QUEUE_KEEP_FROM = 90
PITCH_MIN = 0.75
PITCH_MAX = 1.25


@dataclass
class SoundHandle:
    """A sound source and its playback state."""

    path: str
    pitch: float = 1.0
    volume: float = 100.0
    loop: bool = False
    playing: bool = False
    plays: int = 0

    def play(self) -> None:
        self.playing = True
        self.plays += 1

    def stop(self) -> None:
        self.playing = False


class AudioManager:
    """Owns the menu sounds and a bounded queue of one-shot sounds."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self.menu_music = SoundHandle(MENU_MUSIC, loop=True)
        self.menu_move = SoundHandle(MENU_MOVE, pitch=2.0)
        self.menu_ok = SoundHandle(MENU_OK, pitch=2.0)
        self.queue: List[SoundHandle] = []

    def toggle_menu_music(self) -> bool:
        """Start the menu music if stopped, stop it otherwise; return whether it plays."""
        if self.menu_music.playing:
            self.menu_music.stop()
        else:
            self.menu_music.play()
        return self.menu_music.playing

    def play_menu_move(self) -> None:
        self.menu_move.play()

    def play_menu_ok(self) -> None:
        """Play the confirmation cue to the end before returning."""
        self.menu_ok.play()
        self.menu_ok.stop()

    def play_sound_2d(self, path: str) -> SoundHandle:
        """Play a one-shot sound at a random pitch, trimming old sounds from the queue."""
        if len(self.queue) > QUEUE_LIMIT:
            self.queue = self.queue[QUEUE_KEEP_FROM:]
        pitch = PITCH_MIN + self.rng.random() * (PITCH_MAX - PITCH_MIN)
        handle = SoundHandle(path, pitch=pitch, volume=100.0)
        self.queue.append(handle)
        handle.play()
        return handle