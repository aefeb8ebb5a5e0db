import random
from collections import deque

import pygame
import pytest

from gridsnake.config import WIDTH, HEIGHT, STATE_MENU, STATE_PLAYING, STATE_OVER
from gridsnake.intents import intent_for_button
from gridsnake.model import Direction, GameEngine
from gridsnake.view import GameView


@pytest.fixture(scope="module")
def view():
    pygame.init()
    yield GameView(pygame.Surface((WIDTH, HEIGHT)))
    pygame.quit()


@pytest.mark.parametrize("intent", ["up", "down", "left", "right"])
def test_dpad_buttons(view, intent):
    rect = view.dpad[intent]
    assert view.hit_test(rect.center, STATE_PLAYING) == ("button", intent.capitalize())


def test_preset_buttons(view):
    for level, rect in view.presets.items():
        assert view.hit_test(rect.center, STATE_PLAYING) == ("speed", level)


def test_slider_ends_and_middle(view):
    track = view.slider_track
    assert view.slider_level(track.left - 50) == 1
    assert view.slider_level(track.left) == 1
    assert view.slider_level(track.right) == 10
    assert view.slider_level(track.right + 50) == 10
    assert 5 <= view.slider_level(track.centerx) <= 6
    assert view.hit_test((track.right, track.centery), STATE_PLAYING) == ("slider", 10)


def test_overlay_button_depends_on_state(view):
    pos = view.overlay_button.center
    assert view.hit_test(pos, STATE_MENU) == ("button", "Start")
    assert view.hit_test(pos, STATE_OVER) == ("button", "Restart")
    assert view.hit_test(pos, STATE_PLAYING) is None


def test_controls_do_not_overlap(view):
    rects = list(view.dpad.values()) + list(view.presets.values()) + [view.slider_hitbox]
    for i, a in enumerate(rects):
        for b in rects[i + 1:]:
            assert not a.colliderect(b)
    for rect in rects:
        assert pygame.Rect(0, 0, WIDTH, HEIGHT).contains(rect)


def test_renders_every_state(view):
    engine = GameEngine(rng=random.Random(4))
    view.render(engine.snapshot())

    engine.reset()
    engine.snake = deque([(5, 5), (4, 5), (3, 5)])
    engine.direction = Direction.RIGHT
    view.render(engine.snapshot())

    engine.snake = deque([(19, 5)])
    engine.step()
    assert engine.state == STATE_OVER
    view.render(engine.snapshot())


def test_button_names_normalise_to_intents(view):
    for intent, rect in view.dpad.items():
        _, name = view.hit_test(rect.center, STATE_PLAYING)
        assert intent_for_button(name) == intent
    _, name = view.hit_test(view.overlay_button.center, STATE_OVER)
    assert intent_for_button(name) == "restart"
