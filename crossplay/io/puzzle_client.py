"""HTTP and file access for puzzle documents."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import requests

from ..core.constants import Difficulty
from ..core.exceptions import NetworkError, SchemaError
from ..core.models import PuzzleDefinition
from ..utils.logger import get_logger
from .schema import parse_definition, parse_json


LOGGER = get_logger(__name__)

DEFAULT_STATIC_SOURCE = "puzzle.json"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.environ.get(name)
    return value if value else default


@dataclass
class ClientConfig:
    """Where puzzles come from and how long to wait for them.

    ``static_source`` is a URL or a local path to a single puzzle document.
    ``endpoint`` is a generation service queried with ``?difficulty=<tier>``.
    Both can be overridden from the environment.
    """

    static_source: str = field(
        default_factory=lambda: _env("CROSSPLAY_PUZZLE_URL", DEFAULT_STATIC_SOURCE)
    )
    endpoint: Optional[str] = field(default_factory=lambda: _env("CROSSPLAY_ENDPOINT"))
    timeout_seconds: float = 15.0


class PuzzleClient:
    """Fetches puzzle documents and turns them into definitions."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or ClientConfig()
        self._session = session or requests.Session()

    def fetch_static(self, source: Union[str, Path, None] = None) -> PuzzleDefinition:
        """Load the puzzle at ``source`` (URL or path), defaulting to the config."""

        source = str(source or self.config.static_source)
        if source.startswith(("http://", "https://")):
            return parse_definition(self._get_json(source))
        path = Path(source)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise NetworkError(f"Cannot read puzzle file {path}: {exc}") from exc
        LOGGER.info("Loaded puzzle document from %s", path)
        return parse_json(text)

    def fetch_generated(self, difficulty: Difficulty) -> PuzzleDefinition:
        """Ask the generation endpoint for a fresh puzzle of ``difficulty``."""

        if not self.config.endpoint:
            raise NetworkError("No puzzle generation endpoint configured")
        tier = Difficulty(difficulty).value
        return parse_definition(self._get_json(self.config.endpoint, params={"difficulty": tier}))

    def _get_json(self, url: str, params: Optional[Dict[str, str]] = None) -> Any:
        try:
            response = self._session.get(url, params=params, timeout=self.config.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise NetworkError(f"Puzzle request to {url} failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise SchemaError(f"Response from {url} is not JSON") from exc
        LOGGER.info("Fetched puzzle document from %s %s", url, params or "")
        return payload
