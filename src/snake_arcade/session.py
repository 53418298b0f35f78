"""
Game session: owns every piece of mutable game state and drives the
Menu / Playing / Paused / LevelUp / Countdown / GameOver state machine.

The renderer never reads the session directly; it gets a frozen Snapshot
from each tick.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
import logging
import random
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .config import UP, DOWN, LEFT, RIGHT, LEVEL_LABELS, CFG, Config
from .geometry import Cell, Rect, is_opposite, cell_hits_any
from .placement import place_random, generate_obstacles, on_cells, on_rects
from .snake import new_snake, new_hazard
from . import collision

logger = logging.getLogger(__name__)


class GameState(Enum):
    MENU = auto()
    PLAYING = auto()
    PAUSED = auto()
    LEVEL_UP = auto()
    COUNTDOWN = auto()
    GAME_OVER = auto()


class Intent(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    TOGGLE_PAUSE = auto()
    START = auto()
    RESTART = auto()
    QUIT = auto()


INTENT_DIRECTIONS = {
    Intent.UP: UP,
    Intent.DOWN: DOWN,
    Intent.LEFT: LEFT,
    Intent.RIGHT: RIGHT,
}


def speed_for_length(length: int, cfg: Config = CFG) -> int:
    """Tick delay in ms: every extra segment shaves a step off, down to the floor."""
    return max(cfg.min_speed_ms, cfg.initial_speed_ms - (length - 1) * cfg.speed_step_ms)


def level_up_message(level: int) -> Tuple[str, str]:
    label = LEVEL_LABELS[level]
    warning = "Be aware of the RUSSELL's VIPER SNAKE." if level == 2 else "Be aware of the stone."
    return (f"Congo!! You are on {label}", warning)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one tick, enough to draw a frame."""
    state: GameState
    snake: Tuple[Cell, ...]
    hazard: Tuple[Cell, ...]        # empty until the viper wakes up
    obstacles: Tuple[Rect, ...]
    food: Optional[Cell]
    bonus: Optional[Cell]
    bonus_remaining_ms: int
    score: int
    level: str
    level_up_remaining_ms: int
    countdown_remaining_ms: int
    speed_ms: int
    message: Tuple[str, ...] = ()


class Session:
    def __init__(self, now_ms: int = 0, cfg: Config = CFG, rng: Optional[random.Random] = None):
        self.cfg = cfg
        self.rng = rng if rng is not None else cfg.make_rng()
        self.running = True
        self._handlers: Dict[GameState, Callable[[int], GameState]] = {
            GameState.MENU: self._idle,
            GameState.PLAYING: self._tick_playing,
            GameState.PAUSED: self._idle,
            GameState.LEVEL_UP: self._tick_level_up,
            GameState.COUNTDOWN: self._tick_countdown,
            GameState.GAME_OVER: self._idle,
        }
        self.reset(now_ms)

    def reset(self, now_ms: int) -> None:
        """Fresh run: length-1 snake at the centre heading right, back at the menu."""
        cfg = self.cfg
        self.state = GameState.MENU
        self.now_ms = now_ms
        self.snake = new_snake()
        self.pending = self.snake.heading
        self.hazard = new_hazard(
            self.rng, now_ms, cfg.hazard_length, cfg.hazard_move_ms, cfg.hazard_turn_chance
        )
        self.hazard_active = False
        self.obstacles: List[Rect] = []
        self.bonus: Optional[Cell] = None
        self.bonus_spawn_ms = 0
        self.food: Optional[Cell] = None
        self.food = self._place_collectible()
        self.score = 0
        self.level = 1
        self.points_since_bonus = 0
        self.level_up_triggered = False
        self.level_up_started_ms = 0
        self.countdown_started_ms = 0
        self.speed_ms = cfg.initial_speed_ms
        logger.debug("Initial food position: %s", self.food)

    # ---------- Intents ----------
    def handle(self, intent: Intent) -> None:
        if intent is Intent.QUIT:
            self.running = False
            return
        if intent in INTENT_DIRECTIONS:
            direction = INTENT_DIRECTIONS[intent]
            if self.state is not GameState.GAME_OVER and not is_opposite(direction, self.snake.heading):
                self.pending = direction
            return
        if intent is Intent.RESTART and self.state is GameState.GAME_OVER:
            logger.info("Restarting from game over (score %d)", self.score)
            self.reset(self.now_ms)
            return
        self._set_state(self._on_intent(intent), self.now_ms)

    def _on_intent(self, intent: Intent) -> GameState:
        if intent is Intent.START and self.state is GameState.MENU:
            return GameState.PLAYING
        if intent is Intent.TOGGLE_PAUSE:
            if self.state is GameState.PLAYING:
                return GameState.PAUSED
            if self.state is GameState.PAUSED:
                return GameState.PLAYING
        return self.state

    # ---------- Tick ----------
    def tick(self, now_ms: int, intents: Iterable[Intent] = ()) -> Snapshot:
        """Apply this frame's intents, run the current state's logic once, and snapshot."""
        self.now_ms = now_ms
        for intent in intents:
            self.handle(intent)
        next_state = self._handlers[self.state](now_ms)
        self._set_state(next_state, now_ms)
        return self.snapshot()

    def _set_state(self, new: GameState, now_ms: int) -> None:
        if new is self.state:
            return
        logger.info("State %s -> %s", self.state.name, new.name)
        if new is GameState.LEVEL_UP:
            self.level_up_started_ms = now_ms
        elif new is GameState.COUNTDOWN:
            self.countdown_started_ms = now_ms
        self.state = new

    def _idle(self, now_ms: int) -> GameState:
        return self.state

    def _tick_level_up(self, now_ms: int) -> GameState:
        if now_ms - self.level_up_started_ms >= self.cfg.level_up_ms:
            return GameState.COUNTDOWN
        return GameState.LEVEL_UP

    def _tick_countdown(self, now_ms: int) -> GameState:
        if now_ms - self.countdown_started_ms >= self.cfg.countdown_ms:
            self.level_up_triggered = False
            return GameState.PLAYING
        return GameState.COUNTDOWN

    def _tick_playing(self, now_ms: int) -> GameState:
        cfg = self.cfg
        self.snake.turn(self.pending)
        self.snake.advance()
        body = self.snake.body

        if collision.is_fatal(body, self.obstacles, self.hazard.body, self.hazard_active):
            logger.info("Game over: head at %s, score %d, %s", self.snake.head, self.score, LEVEL_LABELS[self.level])
            return GameState.GAME_OVER

        if collision.hits_cell(body, self.food):
            self.snake.grow = True
            self.score += 1
            self.points_since_bonus += 1
            self.food = self._place_collectible(self.bonus)
            if self.food is None:
                logger.warning("Board is full; ending the run with score %d", self.score)
                return GameState.GAME_OVER
            logger.debug("New food position: %s", self.food)

        if collision.hits_cell(body, self.bonus):
            self.snake.grow = True
            self.score += cfg.bonus_points
            self.bonus = None
            self.points_since_bonus = 0

        self.speed_ms = speed_for_length(len(body), cfg)
        self._pace_bonus(now_ms)

        if self.hazard_active:
            self.hazard.update(now_ms, self.obstacles, self.rng)

        return self._check_level_up()

    # ---------- Helpers ----------
    def _place_collectible(self, other: Optional[Cell] = None) -> Optional[Cell]:
        blocked = [
            on_cells(self.snake.body),
            on_cells(self.hazard.body),
            on_rects(self.obstacles),
        ]
        if other is not None:
            blocked.append(on_cells([other]))
        return place_random(self.rng, *blocked, attempts=self.cfg.placement_attempts)

    def _pace_bonus(self, now_ms: int) -> None:
        cfg = self.cfg
        if (
            self.bonus is None
            and self.score >= cfg.bonus_min_score
            and self.points_since_bonus >= cfg.bonus_pacing
        ):
            self.bonus = self._place_collectible(self.food)
            if self.bonus is not None:
                self.bonus_spawn_ms = now_ms
                self.points_since_bonus = 0
                logger.debug("Banana at %s", self.bonus)
        if self.bonus is not None and now_ms - self.bonus_spawn_ms >= cfg.bonus_lifetime_ms:
            logger.debug("Banana at %s expired", self.bonus)
            self.bonus = None

    def _check_level_up(self) -> GameState:
        cfg = self.cfg
        if self.level_up_triggered:
            return GameState.PLAYING
        if self.level == 1 and self.score >= cfg.level_2_score:
            self.level = 2
            self.hazard_active = True
        elif self.level == 2 and self.score >= cfg.level_3_score:
            self.level = 3
            self.obstacles = generate_obstacles(
                self.rng, self.snake.body + self.hazard.body, cfg.obstacle_count
            )
            self._clear_collectibles_under_stones()
        else:
            return GameState.PLAYING
        self.level_up_triggered = True
        logger.info("Level up: %s at score %d", LEVEL_LABELS[self.level], self.score)
        return GameState.LEVEL_UP

    def _clear_collectibles_under_stones(self) -> None:
        if self.food is not None and cell_hits_any(self.food, self.obstacles):
            self.food = self._place_collectible(self.bonus)
        if self.bonus is not None and cell_hits_any(self.bonus, self.obstacles):
            self.bonus = self._place_collectible(self.food)

    # ---------- Output ----------
    def snapshot(self) -> Snapshot:
        now = self.now_ms
        cfg = self.cfg
        bonus_left = 0
        if self.bonus is not None:
            bonus_left = max(0, cfg.bonus_lifetime_ms - (now - self.bonus_spawn_ms))
        level_up_left = 0
        if self.state is GameState.LEVEL_UP:
            level_up_left = max(0, cfg.level_up_ms - (now - self.level_up_started_ms))
        countdown_left = 0
        if self.state is GameState.COUNTDOWN:
            countdown_left = max(0, cfg.countdown_ms - (now - self.countdown_started_ms))
        message: Tuple[str, ...] = ()
        if self.state is GameState.LEVEL_UP:
            message = level_up_message(self.level)
        return Snapshot(
            state=self.state,
            snake=tuple(self.snake.body),
            hazard=tuple(self.hazard.body) if self.hazard_active else (),
            obstacles=tuple(self.obstacles),
            food=self.food,
            bonus=self.bonus,
            bonus_remaining_ms=bonus_left,
            score=self.score,
            level=LEVEL_LABELS[self.level],
            level_up_remaining_ms=level_up_left,
            countdown_remaining_ms=countdown_left,
            speed_ms=self.speed_ms,
            message=message,
        )
