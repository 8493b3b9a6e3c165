"""Secret key sequences that toggle the admin panel and developer overlays.

This lives outside the engine: it only flips display flags and never
touches puzzle state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


ADMIN_CODE = "~asd"
DEV_CODE = "~dev"
DEV_ANSWERS_CODE = "~deva"
STOP_DEV_CODE = "~sdev"
MAX_BUFFER = 10


class Overlay(str, Enum):
    ADMIN = "admin"
    DEV = "dev"
    DEV_ANSWERS = "dev_answers"
    STOP_DEV = "stop_dev"


@dataclass
class OverlayFlags:
    admin_panel: bool = False
    dev_mode: bool = False
    dev_answers: bool = False


class KeySequenceMatcher:
    """Watches keys typed outside the grid for the secret codes."""

    def __init__(self) -> None:
        self.buffer = ""
        self.flags = OverlayFlags()

    def feed(self, key: str, *, in_cell: bool = False) -> Optional[Overlay]:
        if in_cell or not key:
            return None
        self.buffer += "~" if key in ("`", "~") else key.lower()

        matched: Optional[Overlay] = None
        if self.buffer.endswith(ADMIN_CODE):
            self.flags.admin_panel = not self.flags.admin_panel
            matched = Overlay.ADMIN
        elif self.buffer.endswith(DEV_ANSWERS_CODE):
            self.flags.dev_mode = True
            self.flags.dev_answers = True
            matched = Overlay.DEV_ANSWERS
        elif self.buffer.endswith(DEV_CODE):
            self.flags.dev_mode = not self.flags.dev_mode
            self.flags.dev_answers = False
            matched = Overlay.DEV
        elif self.buffer.endswith(STOP_DEV_CODE):
            self.flags.dev_mode = False
            self.flags.dev_answers = False
            matched = Overlay.STOP_DEV

        # "~dev" is a prefix of "~deva", so its match keeps the buffer.
        if matched not in (None, Overlay.DEV) or len(self.buffer) > MAX_BUFFER:
            self.buffer = ""
        return matched
