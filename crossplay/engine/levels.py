"""Level progression: initial load, advancing tiers and prefetching ahead."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from ..core.constants import DIFFICULTY_ORDER, Difficulty
from ..core.models import PuzzleDefinition
from ..io.prefetch import PuzzlePrefetcher
from ..io.puzzle_client import PuzzleClient
from ..utils.logger import get_logger
from .session import PuzzleSession


LOGGER = get_logger(__name__)


@dataclass
class LevelConfig:
    tiers: Tuple[Difficulty, ...] = DIFFICULTY_ORDER
    levels_per_tier: int = 1
    prefetch: bool = True

    def tier_for_level(self, level: int) -> Difficulty:
        """Tier of the 1-based ``level``, capped at the hardest tier."""

        if level < 1:
            raise ValueError(f"Levels start at 1, got {level}")
        index = (level - 1) // max(1, self.levels_per_tier)
        return self.tiers[min(index, len(self.tiers) - 1)]


class LevelRunner:
    """Moves a :class:`PuzzleSession` from one puzzle to the next.

    Level 1 comes from the static source; every later level is requested
    from the generation endpoint at the tier for that level. While a level
    is being solved the next level's puzzle is prefetched in the background.
    """

    def __init__(
        self,
        session: PuzzleSession,
        client: PuzzleClient,
        prefetcher: Optional[PuzzlePrefetcher] = None,
        config: Optional[LevelConfig] = None,
    ) -> None:
        self.session = session
        self.client = client
        self.config = config or LevelConfig()
        self.prefetcher = prefetcher
        if self.prefetcher is None and self.config.prefetch:
            self.prefetcher = PuzzlePrefetcher(client)
        self.level = 0

    @property
    def tier(self) -> Optional[Difficulty]:
        return self.config.tier_for_level(self.level) if self.level else None

    def start(self, source: Union[str, Path, None] = None) -> PuzzleDefinition:
        """Load level 1; any fetch or schema error is raised to the caller."""

        definition = self.client.fetch_static(source)
        self.session.load(definition)
        self.level = 1
        self._prefetch_next()
        return definition

    def advance(self) -> PuzzleDefinition:
        """Load the next level, preferring a prefetched puzzle.

        On failure the level counter and the current puzzle stay as they were.
        """

        next_level = self.level + 1
        tier = self.config.tier_for_level(next_level)
        definition = self.prefetcher.take(tier) if self.prefetcher else None
        if definition is None:
            LOGGER.info("No prefetched %s puzzle, fetching directly", tier.value)
            definition = self.client.fetch_generated(tier)
        self.session.load(definition)
        self.level = next_level
        LOGGER.info("Level %d (%s): '%s'", self.level, tier.value, definition.title)
        self._prefetch_next()
        return definition

    def _prefetch_next(self) -> None:
        if self.prefetcher is None or not self.client.config.endpoint:
            return
        self.prefetcher.request(self.config.tier_for_level(self.level + 1))
