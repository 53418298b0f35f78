# main.py
import logging
import sys

import pygame # type: ignore

from .config import CFG, Config
from .controls import poll_intents
from .render import RenderContext, AssetLoadError
from .session import Session

logger = logging.getLogger(__name__)


def run(cfg: Config = CFG) -> int:
    """Open the window, play until quit, and return the process exit code."""
    try:
        with RenderContext(cfg) as ctx:
            session = Session(pygame.time.get_ticks(), cfg)
            while session.running:
                # 1) input
                intents = poll_intents()

                # 2) update
                snap = session.tick(pygame.time.get_ticks(), intents)
                if not session.running:
                    break

                # 3) render
                ctx.draw(snap)
                pygame.time.delay(snap.speed_ms)  # tick length follows the snake's speed
    except AssetLoadError as exc:
        logger.error("Failed to initialize: %s", exc)
        pygame.quit()
        return 1
    return 0


def main():
    logging.basicConfig(
        level=CFG.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run(CFG))

if __name__ == "__main__":
    main()
