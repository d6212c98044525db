"""Read-only Unicode repository shared by every query."""

import bisect
import logging
from functools import cached_property
from typing import Dict, List, Optional, Tuple

from ..config import Config
from ..models import Block, Codepoint, Emoji
from .categories import build_category_map, canonical_name
from .loader import (
    DataUnavailableError,
    build_codepoints,
    group_emoji,
    parse_blocks,
    parse_emoji_test,
    read_data_file,
)

logger = logging.getLogger(__name__)


class UnicodeRepository:
    """Codepoints, categories, blocks and emoji.

    Every table is built the first time it's used and never changes after
    that. Building the codepoint table needs the block list; the emoji table
    is independent of both.
    """

    def __init__(self, config: Config) -> None:
        """Initialize the repository.

        Args:
            config: Application configuration (data directory, download URLs)
        """
        self.config = config

    @cached_property
    def blocks(self) -> List[Block]:
        """Get all blocks, ordered by start."""
        blocks = parse_blocks(
            read_data_file(self.config, "Blocks.txt", self.config.blocks_url)
        )
        logger.debug("Loaded %d blocks", len(blocks))
        return blocks

    @cached_property
    def codepoints(self) -> List[Codepoint]:
        """Get every codepoint in ascending order."""
        codepoints = build_codepoints(self.blocks)
        logger.debug(
            "Loaded %d codepoints (Unicode %s)",
            len(codepoints),
            self.config.unicode_version,
        )
        return codepoints

    @cached_property
    def _codes(self) -> List[int]:
        return [cp.code for cp in self.codepoints]

    @cached_property
    def _category_map(self) -> Dict[str, str]:
        return build_category_map()

    @cached_property
    def _block_map(self) -> Dict[str, Block]:
        return {canonical_name(block.name): block for block in self.blocks}

    @cached_property
    def emojis(self) -> List[Emoji]:
        """Get every base emoji in emoji-test.txt order."""
        data = read_data_file(self.config, "emoji-test.txt", self.config.emoji_test_url)
        try:
            emojis = parse_emoji_test(data)
        except ValueError as e:
            raise DataUnavailableError(f"corrupt emoji-test.txt: {e}") from e
        logger.debug("Loaded %d emoji", len(emojis))
        return emojis

    @cached_property
    def _emoji_groups(self) -> Tuple[List[str], Dict[str, List[str]]]:
        return group_emoji(self.emojis)

    @property
    def emoji_groups(self) -> List[str]:
        """Get emoji group names in file order."""
        return self._emoji_groups[0]

    @property
    def emoji_subgroups(self) -> Dict[str, List[str]]:
        """Get the subgroup names of every emoji group."""
        return self._emoji_groups[1]

    def find_codepoint(self, code: int) -> Optional[Codepoint]:
        """Look up a codepoint by value.

        Returns None for values that are out of range or not assigned.
        """
        codes = self._codes
        i = bisect.bisect_left(codes, code)
        if i < len(codes) and codes[i] == code:
            return self.codepoints[i]
        return None

    def find_category(self, canon: str) -> Optional[str]:
        """Get the category code for a canonical category name."""
        return self._category_map.get(canon)

    def find_block(self, canon: str) -> Optional[Block]:
        """Get the block for a canonical block name."""
        return self._block_map.get(canon)

    def codepoints_by_category(self, category: str) -> List[Codepoint]:
        """Get all codepoints in a category, in ascending order."""
        return [cp for cp in self.codepoints if cp.category == category]

    def codepoints_in_block(self, block: Block) -> List[Codepoint]:
        """Get the assigned codepoints of a block, in ascending order."""
        lo = bisect.bisect_left(self._codes, block.start)
        hi = bisect.bisect_right(self._codes, block.end)
        return self.codepoints[lo:hi]


_repositories: Dict[str, UnicodeRepository] = {}


def get_repository(config: Config) -> UnicodeRepository:
    """Get the shared repository for the configured data directory."""
    key = str(config.data_directory)
    if key not in _repositories:
        _repositories[key] = UnicodeRepository(config)
    return _repositories[key]
