"""Readers for the Unicode data files the repository is built from.

Blocks and emoji are read from copies of the upstream ``Blocks.txt`` and
``emoji-test.txt`` kept in the data directory. A missing file is downloaded
from unicode.org the first time it's needed.
"""

import logging
import re
import unicodedata
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple

import requests

from ..config import Config
from ..models import Block, Codepoint, Emoji

logger = logging.getLogger(__name__)

MAX_CODEPOINT = 0x10FFFF
NO_BLOCK = "No_Block"
SKIN_TONE_MODIFIERS = frozenset(range(0x1F3FB, 0x1F400))
VARIATION_SELECTOR_16 = 0xFE0F

# Not part of the table: unassigned, surrogates and private use.
EXCLUDED_CATEGORIES = frozenset({"Cn", "Cs", "Co"})

_BLOCK_LINE = re.compile(
    r"^([0-9A-Fa-f]{4,6})\.\.([0-9A-Fa-f]{4,6})\s*;\s*([^#]+?)\s*(?:#.*)?$"
)
_EMOJI_LINE = re.compile(
    r"^([0-9A-Fa-f ]+?)\s*;\s*([a-z-]+)\s*#\s*\S+\s+(?:E\d+\.\d+\s+)?(.+?)\s*$"
)
_GROUP_PREFIX = "# group:"
_SUBGROUP_PREFIX = "# subgroup:"


class DataUnavailableError(Exception):
    """A Unicode data file is missing or can't be read."""


def fetch_data_file(url: str, dest: Path, timeout: float = 30) -> Path:
    """Download a data file to the data directory.

    Args:
        url: Source URL
        dest: Destination file path
        timeout: Request timeout in seconds

    Returns:
        The destination path

    Raises:
        DataUnavailableError: If the download fails
    """
    logger.info("Downloading %s to %s", url, dest)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise DataUnavailableError(f"could not download {url}: {e}") from e

    dest.parent.mkdir(parents=True, exist_ok=True)
    tmp = dest.with_name(dest.name + ".part")
    tmp.write_bytes(response.content)
    tmp.replace(dest)
    return dest


def read_data_file(config: Config, filename: str, url: str) -> str:
    """Read a data file, downloading it first if needed."""
    path = config.data_directory / filename
    if not path.exists():
        if config.offline:
            raise DataUnavailableError(
                f"{path} does not exist and downloads are disabled"
            )
        fetch_data_file(url, path, timeout=config.request_timeout)

    logger.debug("Reading %s", path)
    return path.read_text(encoding="utf-8")


def parse_blocks(data: str) -> List[Block]:
    """Parse Blocks.txt.

    Example data:
        0000..007F; Basic Latin
        0080..00FF; Latin-1 Supplement
    """
    blocks = []
    for line in data.splitlines():
        match = _BLOCK_LINE.match(line.strip())
        if not match:
            continue
        first, last, name = match.groups()
        blocks.append(Block(int(first, 16), int(last, 16), name))
    blocks.sort(key=lambda b: b.start)
    return blocks


def _strip_modifiers(sequence: Iterable[int]) -> Tuple[int, ...]:
    return tuple(
        cp
        for cp in sequence
        if cp not in SKIN_TONE_MODIFIERS and cp != VARIATION_SELECTOR_16
    )


def parse_emoji_test(data: str) -> List[Emoji]:
    """Parse emoji-test.txt into base emoji, in file order.

    Only fully-qualified sequences are kept. Sequences with a skin tone
    modifier are not listed themselves; they mark their base emoji as
    supporting skin tones when they carry exactly one modifier. Sequences
    with two or more modifiers (couples, handshakes between two people)
    don't count.

    Example data:
        # group: People & Body
        # subgroup: hand-fingers-open
        1F44B        ; fully-qualified     # 👋 E0.6 waving hand
        1F44B 1F3FB  ; fully-qualified     # 👋🏻 E1.0 waving hand: light skin tone
    """
    group: Optional[str] = None
    subgroup: Optional[str] = None
    bases: List[Tuple[Tuple[int, ...], str, str, str]] = []
    toned: Set[Tuple[int, ...]] = set()

    for line in data.splitlines():
        line = line.strip()
        if not line:
            continue
        if line.startswith("#"):
            if line.startswith(_GROUP_PREFIX):
                group = line[len(_GROUP_PREFIX) :].strip()
                subgroup = None
            elif line.startswith(_SUBGROUP_PREFIX):
                subgroup = line[len(_SUBGROUP_PREFIX) :].strip()
            continue

        match = _EMOJI_LINE.match(line)
        if not match:
            raise ValueError(f"unrecognized line in emoji-test.txt: {line!r}")
        codes, status, name = match.groups()
        if status != "fully-qualified":
            continue
        if group is None or subgroup is None:
            raise ValueError(f"emoji {codes} has no group or subgroup")

        sequence = tuple(int(c, 16) for c in codes.split())
        modifiers = sum(1 for cp in sequence if cp in SKIN_TONE_MODIFIERS)
        if modifiers:
            if modifiers == 1:
                toned.add(_strip_modifiers(sequence))
            continue
        bases.append((sequence, name, group, subgroup))

    return [
        Emoji(
            sequence=sequence,
            name=name,
            group=group_name,
            subgroup=subgroup_name,
            supports_skin_tone=_strip_modifiers(sequence) in toned,
        )
        for sequence, name, group_name, subgroup_name in bases
    ]


def _codepoint_name(char: str, category: str) -> str:
    name = unicodedata.name(char, "")
    if name:
        return name
    if category == "Cc":
        return "<control>"
    return f"<{category}>"


def build_codepoints(blocks: List[Block]) -> List[Codepoint]:
    """Build the codepoint table from the unicodedata module.

    Args:
        blocks: Blocks sorted by start, used to fill in each codepoint's block

    Returns:
        Every assigned codepoint in ascending order
    """
    codepoints = []
    block_iter = iter(blocks)
    block = next(block_iter, None)
    for code in range(MAX_CODEPOINT + 1):
        char = chr(code)
        category = unicodedata.category(char)
        if category in EXCLUDED_CATEGORIES:
            continue

        while block is not None and block.end < code:
            block = next(block_iter, None)
        block_name = block.name if block is not None and code in block else NO_BLOCK

        codepoints.append(
            Codepoint(code, _codepoint_name(char, category), category, block_name)
        )
    return codepoints


def group_emoji(emojis: Iterable[Emoji]) -> Tuple[List[str], Dict[str, List[str]]]:
    """Collect group names and the subgroups of each group, in file order."""
    groups: List[str] = []
    subgroups: Dict[str, List[str]] = {}
    for emoji in emojis:
        if emoji.group not in subgroups:
            groups.append(emoji.group)
            subgroups[emoji.group] = []
        if emoji.subgroup not in subgroups[emoji.group]:
            subgroups[emoji.group].append(emoji.subgroup)
    return groups, subgroups
