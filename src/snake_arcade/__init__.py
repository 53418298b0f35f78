# src/snake_arcade/__init__.py
"""Snake arcade: player snake, wandering viper, stones and bananas."""

from snake_arcade.session import Session, Snapshot, GameState, Intent

__all__ = ["Session", "Snapshot", "GameState", "Intent"]
