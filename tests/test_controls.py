import pygame # type: ignore

from snake_arcade.controls import intent_for
from snake_arcade.session import Intent


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_arrow_keys_map_to_directions():
    assert intent_for(key(pygame.K_UP)) is Intent.UP
    assert intent_for(key(pygame.K_DOWN)) is Intent.DOWN
    assert intent_for(key(pygame.K_LEFT)) is Intent.LEFT
    assert intent_for(key(pygame.K_RIGHT)) is Intent.RIGHT


def test_control_keys():
    assert intent_for(key(pygame.K_p)) is Intent.TOGGLE_PAUSE
    assert intent_for(key(pygame.K_RETURN)) is Intent.START
    assert intent_for(key(pygame.K_r)) is Intent.RESTART
    assert intent_for(pygame.event.Event(pygame.QUIT)) is Intent.QUIT


def test_unknown_events_are_ignored():
    assert intent_for(key(pygame.K_a)) is None
    assert intent_for(pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1), rel=(0, 0), buttons=(0, 0, 0))) is None
