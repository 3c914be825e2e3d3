import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from chip8emu.render import KEY_MAP, SCALE_FACTOR, Renderer  # noqa: E402
from chip8emu.screen import HEIGHT, PIXEL_ON, WIDTH, Screen  # noqa: E402


@pytest.fixture
def renderer():
    r = Renderer()
    pygame.event.clear()
    yield r
    r.close()


def _post(event_type, **attrs):
    pygame.event.post(pygame.event.Event(event_type, **attrs))


@pytest.mark.parametrize(
    "key,index",
    [(pygame.K_1, 0x1), (pygame.K_4, 0xC), (pygame.K_q, 0x4), (pygame.K_x, 0x0), (pygame.K_v, 0xF)],
)
def test_key_press_and_release(renderer, key, index):
    keypad = [False] * 16
    _post(pygame.KEYDOWN, key=key)
    assert renderer.process_input(keypad) is False
    assert keypad[index] is True
    assert sum(keypad) == 1
    _post(pygame.KEYUP, key=key)
    assert renderer.process_input(keypad) is False
    assert keypad == [False] * 16


def test_key_map_covers_whole_keypad():
    assert sorted(KEY_MAP.values()) == list(range(16))


def test_escape_requests_quit(renderer):
    _post(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    assert renderer.process_input([False] * 16) is True


def test_quit_event_requests_quit(renderer):
    _post(pygame.QUIT)
    assert renderer.process_input([False] * 16) is True


def test_unmapped_key_is_ignored(renderer):
    keypad = [False] * 16
    _post(pygame.KEYDOWN, key=pygame.K_p)
    assert renderer.process_input(keypad) is False
    assert keypad == [False] * 16


def test_window_size(renderer):
    assert renderer.window.get_size() == (WIDTH * SCALE_FACTOR, HEIGHT * SCALE_FACTOR)


def test_update_scales_lit_pixel(renderer):
    screen = Screen()
    screen[0] = PIXEL_ON
    renderer.update(screen)
    window = renderer.window
    assert tuple(window.get_at((0, 0)))[:3] == (255, 255, 255)
    assert tuple(window.get_at((SCALE_FACTOR - 1, SCALE_FACTOR - 1)))[:3] == (255, 255, 255)
    assert tuple(window.get_at((SCALE_FACTOR, 0)))[:3] == (0, 0, 0)
    assert tuple(window.get_at((0, SCALE_FACTOR)))[:3] == (0, 0, 0)


def test_update_blank_screen_is_black(renderer):
    renderer.update(Screen())
    w, h = renderer.window.get_size()
    assert tuple(renderer.window.get_at((w - 1, h - 1)))[:3] == (0, 0, 0)


def test_play_sound_follows_timer(renderer):
    assert renderer.sounding is False
    renderer.play_sound(5)
    assert renderer.sounding is True
    renderer.play_sound(0)
    assert renderer.sounding is False


def test_context_manager_closes_display():
    with Renderer() as r:
        assert pygame.display.get_init() is True
        assert r.sounding is False
    assert pygame.display.get_init() is False