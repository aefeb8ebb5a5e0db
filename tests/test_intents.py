import pygame
import pytest

from gridsnake import intents


@pytest.mark.parametrize("key, intent", [
    (pygame.K_UP, "up"),
    (pygame.K_DOWN, "down"),
    (pygame.K_LEFT, "left"),
    (pygame.K_RIGHT, "right"),
    (pygame.K_w, "up"),
    (pygame.K_a, "left"),
    (pygame.K_RETURN, "start"),
    (pygame.K_SPACE, "start"),
    (pygame.K_r, "restart"),
])
def test_keys_map_to_intents(key, intent):
    assert intents.intent_for_key(key) == intent


def test_unmapped_key():
    assert intents.intent_for_key(pygame.K_F1) is None


@pytest.mark.parametrize("name, intent", [
    ("up", "up"),
    ("Down", "down"),
    (" LEFT ", "left"),
    ("right", "right"),
    ("start", "start"),
    ("Restart", "restart"),
])
def test_buttons_normalise_like_keys(name, intent):
    assert intents.intent_for_button(name) == intent


def test_unknown_button():
    assert intents.intent_for_button("jump") is None


def test_arrow_key_and_button_agree():
    for key, name in [(pygame.K_UP, "Up"), (pygame.K_LEFT, "Left")]:
        assert intents.intent_for_key(key) == intents.intent_for_button(name)


@pytest.mark.parametrize("key, level", [
    (pygame.K_1, 1),
    (pygame.K_5, 5),
    (pygame.K_9, 9),
    (pygame.K_0, 10),
])
def test_number_keys_pick_presets(key, level):
    assert intents.speed_for_key(key, current=3) == level


def test_nudge_keys_stay_in_range():
    assert intents.speed_for_key(pygame.K_EQUALS, current=4) == 5
    assert intents.speed_for_key(pygame.K_MINUS, current=4) == 3
    assert intents.speed_for_key(pygame.K_EQUALS, current=10) == 10
    assert intents.speed_for_key(pygame.K_MINUS, current=1) == 1


def test_non_speed_key():
    assert intents.speed_for_key(pygame.K_UP, current=5) is None
