"""Background prefetch of the next puzzle while the current one is solved."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from ..core.constants import Difficulty
from ..core.exceptions import BoundsError, NetworkError, SchemaError
from ..core.models import PuzzleDefinition
from ..engine.grid import GridBuilder
from ..utils.logger import get_logger
from .puzzle_client import PuzzleClient


LOGGER = get_logger(__name__)


@dataclass
class PrefetchConfig:
    retry_delay_seconds: float = 5.0
    max_attempts: int = 5


class PuzzlePrefetcher:
    """Fetches one puzzle ahead of time on a worker thread.

    Only the most recently requested tier is kept: requesting a tier drops
    any puzzle cached for another one. One fetch runs at a time and a tier
    requested meanwhile is queued behind it. A failed fetch, or a document
    that does not parse or build, is retried after a fixed delay until
    ``max_attempts`` is reached; failures are logged and never raised to
    the caller, which falls back to a direct fetch.
    """

    def __init__(
        self,
        client: PuzzleClient,
        config: Optional[PrefetchConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.client = client
        self.config = config or PrefetchConfig()
        self._sleep = sleep
        self._builder = GridBuilder()
        self._lock = threading.Lock()
        self._running: Optional[Difficulty] = None
        self._queued: Optional[Difficulty] = None
        self._wanted: Optional[Difficulty] = None
        self._ready: Dict[Difficulty, PuzzleDefinition] = {}
        self._thread: Optional[threading.Thread] = None

    @property
    def in_flight(self) -> bool:
        with self._lock:
            return self._running is not None

    def request(self, difficulty: Difficulty) -> bool:
        """Start or queue a prefetch of ``difficulty``.

        Returns False when that tier is already cached, running or queued.
        """

        difficulty = Difficulty(difficulty)
        with self._lock:
            self._wanted = difficulty
            self._ready = {tier: p for tier, p in self._ready.items() if tier is difficulty}
            if difficulty in self._ready or difficulty in (self._running, self._queued):
                return False
            if self._running is not None:
                LOGGER.debug("Queued %s prefetch behind %s", difficulty.value, self._running.value)
                self._queued = difficulty
                return True
            self._running = difficulty
        self._thread = threading.Thread(
            target=self._run,
            args=(difficulty,),
            name=f"prefetch-{difficulty.value}",
            daemon=True,
        )
        self._thread.start()
        return True

    def take(self, difficulty: Difficulty) -> Optional[PuzzleDefinition]:
        with self._lock:
            return self._ready.pop(difficulty, None)

    def wait(self, timeout: Optional[float] = None) -> None:
        thread = self._thread
        if thread is not None:
            thread.join(timeout)

    def _run(self, difficulty: Optional[Difficulty]) -> None:
        try:
            while difficulty is not None:
                definition = self._fetch(difficulty)
                with self._lock:
                    if definition is not None and difficulty is self._wanted:
                        self._ready[difficulty] = definition
                    elif definition is not None:
                        LOGGER.info("Dropped %s puzzle, no longer wanted", difficulty.value)
                    difficulty, self._queued = self._queued, None
                    self._running = difficulty
        finally:
            if difficulty is not None:
                with self._lock:
                    self._running = None
                    self._queued = None

    def _fetch(self, difficulty: Difficulty) -> Optional[PuzzleDefinition]:
        for attempt in range(1, self.config.max_attempts + 1):
            try:
                definition = self.client.fetch_generated(difficulty)
                self._builder.build(definition)
            except (NetworkError, SchemaError, BoundsError) as exc:
                LOGGER.warning(
                    "Prefetch of %s puzzle failed (attempt %d/%d): %s",
                    difficulty.value,
                    attempt,
                    self.config.max_attempts,
                    exc,
                )
                if attempt < self.config.max_attempts:
                    self._sleep(self.config.retry_delay_seconds)
                continue
            LOGGER.info("Prefetched %s puzzle '%s'", difficulty.value, definition.title)
            return definition
        LOGGER.error("Giving up prefetch of %s puzzle", difficulty.value)
        return None
