"""Parsing of puzzle documents into :class:`PuzzleDefinition` objects.

Two document layouts are accepted::

    {"title": ..., "rows": 5, "cols": 5, "clues": {"across": [...], "down": [...]}}
    {"metadata": {"title": ..., "size": {"rows": 5, "cols": 5}}, "clues": {...}}

Each clue entry needs ``number``, ``row``, ``col`` and ``answer``; ``clue``
defaults to an empty string and ``direction``, when present, must match the
list the entry appears in.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Set, Tuple

from ..core.constants import Direction
from ..core.exceptions import SchemaError
from ..core.models import ClueSpec, PuzzleDefinition
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def parse_definition(document: Any) -> PuzzleDefinition:
    """Validate ``document`` and return the puzzle it describes."""

    if not isinstance(document, Mapping):
        raise SchemaError("Puzzle document must be a JSON object")

    metadata = document.get("metadata")
    if isinstance(metadata, Mapping):
        size = metadata.get("size")
        if not isinstance(size, Mapping):
            raise SchemaError("metadata.size is missing")
        title = metadata.get("title", "")
        rows = _positive_int(size, "rows")
        cols = _positive_int(size, "cols")
    else:
        title = document.get("title", "")
        rows = _positive_int(document, "rows")
        cols = _positive_int(document, "cols")
    if not isinstance(title, str):
        raise SchemaError("title must be a string")

    clues = document.get("clues")
    if not isinstance(clues, Mapping):
        raise SchemaError("clues must be an object with 'across' and 'down' lists")

    seen: Set[Tuple[int, Direction]] = set()
    parsed: Dict[Direction, List[ClueSpec]] = {}
    for direction in Direction:
        entries = clues.get(direction.value, [])
        if not isinstance(entries, list):
            raise SchemaError(f"clues.{direction.value} must be a list")
        parsed[direction] = []
        for index, entry in enumerate(entries):
            clue = _parse_clue(entry, direction, f"clues.{direction.value}[{index}]")
            if (clue.number, direction) in seen:
                raise SchemaError(f"Duplicate clue {clue.label()}")
            seen.add((clue.number, direction))
            parsed[direction].append(clue)

    if not seen:
        raise SchemaError("Puzzle has no clues")

    LOGGER.debug(
        "Parsed '%s': %sx%s, %d across, %d down",
        title,
        rows,
        cols,
        len(parsed[Direction.ACROSS]),
        len(parsed[Direction.DOWN]),
    )
    return PuzzleDefinition(
        title=title,
        rows=rows,
        cols=cols,
        across=parsed[Direction.ACROSS],
        down=parsed[Direction.DOWN],
    )


def parse_json(text: str) -> PuzzleDefinition:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Puzzle document is not valid JSON: {exc}") from exc
    return parse_definition(document)


def definition_to_jsonable(definition: PuzzleDefinition) -> Dict[str, Any]:
    return {
        "title": definition.title,
        "rows": definition.rows,
        "cols": definition.cols,
        "clues": {
            direction.value: [
                {
                    "number": clue.number,
                    "direction": direction.value,
                    "row": clue.row,
                    "col": clue.col,
                    "answer": clue.answer,
                    "clue": clue.clue,
                }
                for clue in definition.clues(direction)
            ]
            for direction in Direction
        },
    }


def _parse_clue(entry: Any, direction: Direction, where: str) -> ClueSpec:
    if not isinstance(entry, Mapping):
        raise SchemaError(f"{where} must be an object")

    declared = entry.get("direction")
    if declared is not None and str(declared).lower() != direction.value:
        raise SchemaError(f"{where} declares direction {declared!r} inside the {direction.value} list")

    answer = entry.get("answer")
    if not isinstance(answer, str) or not answer.isascii() or not answer.isalpha():
        raise SchemaError(f"{where}.answer must be a non-empty string of A-Z letters")

    text = entry.get("clue", "")
    if not isinstance(text, str):
        raise SchemaError(f"{where}.clue must be a string")

    return ClueSpec(
        number=_int(entry, "number", where),
        direction=direction,
        row=_int(entry, "row", where),
        col=_int(entry, "col", where),
        answer=answer.upper(),
        clue=text,
    )


def _int(mapping: Mapping, key: str, where: str = "puzzle") -> int:
    value = mapping.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError(f"{where}.{key} must be an integer, got {value!r}")
    return value


def _positive_int(mapping: Mapping, key: str) -> int:
    value = _int(mapping, key)
    if value <= 0:
        raise SchemaError(f"puzzle.{key} must be positive, got {value}")
    return value
