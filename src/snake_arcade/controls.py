# controls.py
from typing import List, Optional

import pygame # type: ignore

from .session import Intent

KEY_INTENTS = {
    pygame.K_UP: Intent.UP,
    pygame.K_DOWN: Intent.DOWN,
    pygame.K_LEFT: Intent.LEFT,
    pygame.K_RIGHT: Intent.RIGHT,
    pygame.K_p: Intent.TOGGLE_PAUSE,
    pygame.K_RETURN: Intent.START,
    pygame.K_KP_ENTER: Intent.START,
    pygame.K_r: Intent.RESTART,
    pygame.K_ESCAPE: Intent.QUIT,
}


def intent_for(event: pygame.event.Event) -> Optional[Intent]:
    """Map one pygame event to an intent; anything unrecognised maps to None."""
    if event.type == pygame.QUIT:
        return Intent.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_INTENTS.get(event.key)
    return None


def poll_intents() -> List[Intent]:
    """Drain every pending event (non-blocking) and keep the ones that mean something."""
    intents = []
    for event in pygame.event.get():
        intent = intent_for(event)
        if intent is not None:
            intents.append(intent)
    return intents
