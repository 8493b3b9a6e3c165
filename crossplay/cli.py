"""Line-oriented command shell for solving a puzzle in a terminal."""

from __future__ import annotations

import argparse
import logging
import shlex
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO

from .core.constants import ArrowKey, Direction
from .core.exceptions import CrosswordError, LengthMismatchError
from .engine.levels import LevelConfig, LevelRunner
from .engine.session import PuzzleSession
from .io.prefetch import PrefetchConfig, PuzzlePrefetcher
from .io.puzzle_client import ClientConfig, PuzzleClient
from .utils.key_sequence import KeySequenceMatcher
from .utils.logger import configure_logging, get_logger
from .utils.pretty import format_board, format_result, pretty_print_session


LOGGER = get_logger(__name__)

ARROW_ALIASES = {
    "up": ArrowKey.UP,
    "down": ArrowKey.DOWN,
    "left": ArrowKey.LEFT,
    "right": ArrowKey.RIGHT,
}

HELP = """Commands:
  focus R C            click the cell at row R, column C
  arrow up|down|left|right
  type R C X           type letter X into cell R,C
  type LETTERS         type letters one by one at the cursor
  back [R C]           backspace (at the cursor by default)
  fill N across|down [TEXT]   write TEXT into a word, or clear it
  clue N across|down   jump to a clue
  check                check every cell
  show                 print board and clues
  keys SEQUENCE        feed keys typed outside the grid
  next                 load the next level
  quit"""


class CommandShell:
    """Maps text commands onto :class:`PuzzleSession` events."""

    def __init__(
        self,
        session: PuzzleSession,
        runner: Optional[LevelRunner] = None,
        stream: Optional[TextIO] = None,
        echo_board: bool = True,
    ) -> None:
        self.session = session
        self.runner = runner
        self.stream = stream or sys.stdout
        self.echo_board = echo_board
        self.matcher = KeySequenceMatcher()
        self._dirty = False
        session.on_redraw = self._mark_dirty
        self._commands: Dict[str, Callable[[List[str]], None]] = {
            "focus": self._focus,
            "arrow": self._arrow,
            "type": self._type,
            "back": self._back,
            "fill": self._fill,
            "clue": self._clue,
            "check": self._check,
            "show": self._show,
            "keys": self._keys,
            "next": self._next,
            "help": self._help,
        }

    def execute(self, line: str) -> bool:
        """Run one command; returns False once the user asked to quit."""

        try:
            parts = shlex.split(line)
        except ValueError as exc:
            self._print(f"error: {exc}")
            return True
        if not parts:
            return True
        name, args = parts[0].lower(), parts[1:]
        if name in ("quit", "exit"):
            return False
        handler = self._commands.get(name)
        if handler is None:
            self._print(f"error: unknown command {name!r} (try 'help')")
            return True
        try:
            handler(args)
        except (CrosswordError, ValueError, IndexError) as exc:
            self._print(f"error: {exc}")
        if self._dirty and self.echo_board:
            self._print(self._board())
        self._dirty = False
        return True

    def run(self, lines) -> None:
        for line in lines:
            if not self.execute(line):
                break

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def _focus(self, args: List[str]) -> None:
        row, col = _ints(args, 2)
        self.session.on_focus(row, col)

    def _arrow(self, args: List[str]) -> None:
        key = ARROW_ALIASES.get(args[0].lower(), args[0])
        if not self.session.on_arrow(key):
            self._print("(no move)")

    def _type(self, args: List[str]) -> None:
        if len(args) == 3 and args[0].isdigit() and args[1].isdigit():
            row, col = _ints(args[:2], 2)
            self.session.on_character_entered(row, col, args[2])
            return
        for char in "".join(args):
            cursor = self.session.cursor
            if cursor is None:
                raise CrosswordError("Focus a cell before typing")
            self.session.on_character_entered(cursor.row, cursor.col, char)

    def _back(self, args: List[str]) -> None:
        if args:
            row, col = _ints(args, 2)
        else:
            cursor = self.session.cursor
            if cursor is None:
                raise CrosswordError("Focus a cell before deleting")
            row, col = cursor.position
        self.session.on_backspace(row, col)

    def _fill(self, args: List[str]) -> None:
        number = int(args[0])
        direction = Direction(args[1].lower())
        word = self.session.definition.find_clue(number, direction)
        if word is None:
            raise CrosswordError(f"No clue {number} {direction.value}")
        error = self.session.on_fill_word(word, " ".join(args[2:]))
        if isinstance(error, LengthMismatchError):
            self._print(f"'{word.label()}' needs {error.expected} letters, got {error.actual}")
        elif error is not None:
            self._print(f"error: {error}")

    def _clue(self, args: List[str]) -> None:
        self.session.on_clue_selected(int(args[0]), args[1].lower())

    def _check(self, args: List[str]) -> None:
        self._print(format_result(self.session.on_check()))

    def _show(self, args: List[str]) -> None:
        pretty_print_session(
            self.session, show_answers=self.matcher.flags.dev_answers, stream=self.stream
        )
        self._dirty = False

    def _keys(self, args: List[str]) -> None:
        for key in "".join(args):
            overlay = self.matcher.feed(key)
            if overlay is not None:
                self._print(f"[{overlay.value}] {self.matcher.flags}")
                self._dirty = True

    def _next(self, args: List[str]) -> None:
        if self.runner is None:
            raise CrosswordError("Level progression needs a generation endpoint")
        self.runner.advance()
        self._print(f"Level {self.runner.level}: {self.session.definition.title}")

    def _help(self, args: List[str]) -> None:
        self._print(HELP)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _board(self) -> str:
        return format_board(self.session, show_answers=self.matcher.flags.dev_answers)

    def _mark_dirty(self) -> None:
        self._dirty = True

    def _print(self, text: str) -> None:
        print(text, file=self.stream)


def _ints(args: List[str], count: int) -> List[int]:
    if len(args) != count:
        raise ValueError(f"expected {count} numbers, got {len(args)}")
    return [int(value) for value in args]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve crossword puzzles in the terminal")
    parser.add_argument(
        "puzzle",
        nargs="?",
        default=None,
        help="Puzzle document (path or URL); defaults to $CROSSPLAY_PUZZLE_URL or puzzle.json",
    )
    parser.add_argument(
        "--endpoint",
        type=str,
        default=None,
        help="Generation endpoint for later levels (queried with ?difficulty=<tier>)",
    )
    parser.add_argument(
        "--levels-per-tier",
        type=int,
        default=1,
        help="Levels played before moving to the next difficulty tier",
    )
    parser.add_argument(
        "--retry-delay",
        type=float,
        default=5.0,
        help="Seconds between prefetch retries",
    )
    parser.add_argument("--timeout", type=float, default=15.0, help="HTTP timeout in seconds")
    parser.add_argument(
        "--commands",
        type=Path,
        help="Read commands from this file instead of standard input",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    client_config = ClientConfig(timeout_seconds=args.timeout)
    if args.endpoint:
        client_config.endpoint = args.endpoint
    client = PuzzleClient(client_config)
    runner = LevelRunner(
        PuzzleSession(),
        client,
        prefetcher=PuzzlePrefetcher(client, PrefetchConfig(retry_delay_seconds=args.retry_delay)),
        config=LevelConfig(levels_per_tier=args.levels_per_tier),
    )
    shell = CommandShell(runner.session, runner=runner if client_config.endpoint else None)

    try:
        runner.start(args.puzzle)
    except CrosswordError as exc:
        LOGGER.error("Could not load the initial puzzle: %s", exc)
        print(f"Could not load the initial puzzle: {exc}", file=sys.stderr)
        return 1

    shell.execute("show")
    if args.commands:
        shell.run(args.commands.read_text(encoding="utf-8").splitlines())
    else:
        shell.run(sys.stdin)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
