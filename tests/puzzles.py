"""Puzzle definitions shared by the test modules."""

from crossplay.core.constants import Direction
from crossplay.core.models import ClueSpec, PuzzleDefinition


def crane_puzzle() -> PuzzleDefinition:
    return PuzzleDefinition(
        title="Crane",
        rows=5,
        cols=5,
        across=[ClueSpec(1, Direction.ACROSS, 0, 0, "CRANE", "Wading bird")],
    )


def starter_puzzle() -> PuzzleDefinition:
    """5x5 with three across and three down words.

        C R A N E
        H # T # X
        A L O H A
        F # N # C
        E L E C T
    """

    return PuzzleDefinition(
        title="Starter",
        rows=5,
        cols=5,
        across=[
            ClueSpec(1, Direction.ACROSS, 0, 0, "CRANE", "Wading bird"),
            ClueSpec(4, Direction.ACROSS, 2, 0, "ALOHA", "Hawaiian greeting"),
            ClueSpec(5, Direction.ACROSS, 4, 0, "ELECT", "Choose by vote"),
        ],
        down=[
            ClueSpec(1, Direction.DOWN, 0, 0, "CHAFE", "Rub until sore"),
            ClueSpec(2, Direction.DOWN, 0, 2, "ATONE", "Make amends"),
            ClueSpec(3, Direction.DOWN, 0, 4, "EXACT", "Precise"),
        ],
    )


def starter_document() -> dict:
    return {
        "metadata": {"title": "Starter", "size": {"rows": 5, "cols": 5}},
        "clues": {
            "across": [
                {"number": 1, "direction": "across", "row": 0, "col": 0, "answer": "crane", "clue": "Wading bird"},
                {"number": 4, "direction": "across", "row": 2, "col": 0, "answer": "ALOHA", "clue": "Hawaiian greeting"},
                {"number": 5, "direction": "across", "row": 4, "col": 0, "answer": "ELECT", "clue": "Choose by vote"},
            ],
            "down": [
                {"number": 1, "direction": "down", "row": 0, "col": 0, "answer": "CHAFE", "clue": "Rub until sore"},
                {"number": 2, "row": 0, "col": 2, "answer": "ATONE", "clue": "Make amends"},
                {"number": 3, "direction": "down", "row": 0, "col": 4, "answer": "EXACT", "clue": "Precise"},
            ],
        },
    }
