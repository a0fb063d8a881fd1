import random

from dungeonrun.audio import MENU_MUSIC, AudioManager


def make_audio():
    return AudioManager(random.Random(7))


def test_menu_sounds_are_set_up():
    audio = make_audio()
    assert audio.menu_music.path == MENU_MUSIC
    assert audio.menu_music.loop is True
    assert audio.menu_move.pitch == 2.0
    assert audio.menu_ok.pitch == 2.0


def test_toggle_menu_music_alternates():
    audio = make_audio()
    assert audio.toggle_menu_music() is True
    assert audio.menu_music.playing is True
    assert audio.toggle_menu_music() is False
    assert audio.menu_music.playing is False


def test_menu_move_plays():
    audio = make_audio()
    audio.play_menu_move()
    assert audio.menu_move.plays == 1
    assert audio.menu_move.playing is True


def test_menu_ok_finishes_before_returning():
    audio = make_audio()
    audio.play_menu_ok()
    assert audio.menu_ok.plays == 1
    assert audio.menu_ok.playing is False


def test_play_sound_2d_returns_playing_handle():
    audio = make_audio()
    handle = audio.play_sound_2d("boom.ogg")
    assert handle.path == "boom.ogg"
    assert handle.playing is True
    assert handle.volume == 100.0
    assert audio.queue[-1] is handle


def test_pitch_within_range():
    audio = make_audio()
    pitches = [audio.play_sound_2d("x.ogg").pitch for _ in range(50)]
    assert all(0.75 <= p <= 1.25 for p in pitches)


def test_queue_stays_bounded():
    audio = make_audio()
    last = None
    for i in range(500):
        last = audio.play_sound_2d(f"s{i}.ogg")
        assert len(audio.queue) <= 101
    assert audio.queue[-1] is last


def test_same_seed_gives_same_pitches():
    a = AudioManager(random.Random(3))
    b = AudioManager(random.Random(3))
    assert [a.play_sound_2d("x").pitch for _ in range(5)] == \
        [b.play_sound_2d("x").pitch for _ in range(5)]