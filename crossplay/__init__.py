"""Crossword solving engine.

This package exposes the public API surface via:

- ``crossplay.engine.session.PuzzleSession``: the event surface a UI drives.
- ``crossplay.engine.grid.GridBuilder``: builds the letter grid from clue data.
- ``crossplay.engine.levels.LevelRunner``: level progression with prefetch.
- ``crossplay.io.schema.parse_definition``: validates puzzle documents.
"""

from .core.constants import ArrowKey, CellStatus, Difficulty, Direction
from .core.models import ClueSpec, CursorState, PuzzleDefinition, ValidationResult
from .engine.grid import Grid, GridBuilder
from .engine.levels import LevelConfig, LevelRunner
from .engine.session import PuzzleSession
from .io.schema import parse_definition

__all__ = [
    "ArrowKey",
    "CellStatus",
    "ClueSpec",
    "CursorState",
    "Difficulty",
    "Direction",
    "Grid",
    "GridBuilder",
    "LevelConfig",
    "LevelRunner",
    "PuzzleDefinition",
    "PuzzleSession",
    "ValidationResult",
    "parse_definition",
]

__version__ = "0.1.0"
