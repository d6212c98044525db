"""Select emoji by group and apply skin tones."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from ..models import Emoji
from ..unidata import UnicodeRepository
from .errors import InvalidToneError, UnknownGroupError

ZERO_WIDTH_JOINER = "\u200d"

SKIN_TONES: Dict[str, int] = {
    "light": 0x1F3FB,
    "mediumlight": 0x1F3FC,
    "medium": 0x1F3FD,
    "mediumdark": 0x1F3FE,
    "dark": 0x1F3FF,
}

ALL_TOKEN = "all"
GROUPS_TOKEN = "groups"


@dataclass(frozen=True)
class EmojiRow:
    """One output row: the composed emoji and where it's classified."""

    text: str
    name: str
    group: str
    subgroup: str


@dataclass
class EmojiSelection:
    """Result of an emoji query.

    ``group_tree`` is set instead of ``rows`` when the query asked for the
    list of groups.
    """

    rows: List[EmojiRow] = field(default_factory=list)
    group_tree: Optional[List[Tuple[str, List[str]]]] = None


def tone_modifier(tone: Optional[str]) -> Optional[int]:
    """Map a skin tone name to its modifier codepoint.

    Returns None when no tone is given.

    Raises:
        InvalidToneError: If the tone name isn't known
    """
    if not tone:
        return None
    try:
        return SKIN_TONES[tone]
    except KeyError:
        raise InvalidToneError(tone) from None


def compose(emoji: Emoji, modifier: Optional[int] = None) -> str:
    """Get the display string of an emoji, with a skin tone if it takes one."""
    text = emoji.text
    if modifier is not None and emoji.supports_skin_tone:
        text += ZERO_WIDTH_JOINER + chr(modifier)
    return text


def _matches(emoji: Emoji, token: str) -> bool:
    return token in emoji.group.lower() or token in emoji.subgroup.lower()


def select_group(
    repo: UnicodeRepository, token: str, modifier: Optional[int] = None
) -> List[EmojiRow]:
    """Get all emoji whose group or subgroup contains the token.

    Raises:
        UnknownGroupError: If nothing matches
    """
    needle = token.lower()
    if needle == ALL_TOKEN:
        needle = ""

    rows = [
        EmojiRow(compose(e, modifier), e.name, e.group, e.subgroup)
        for e in repo.emojis
        if _matches(e, needle)
    ]
    if not rows:
        raise UnknownGroupError(token)
    return rows


def group_tree(repo: UnicodeRepository) -> List[Tuple[str, List[str]]]:
    """Get every group with its subgroups."""
    return [(g, list(repo.emoji_subgroups[g])) for g in repo.emoji_groups]


def select_emojis(
    repo: UnicodeRepository, tokens: Iterable[str], tone: Optional[str] = None
) -> EmojiSelection:
    """Resolve emoji tokens in order.

    Rows for each token are appended as they are; an emoji matched by two
    tokens is listed twice. The "groups" token ends the query and returns
    the group listing instead of rows.

    Raises:
        InvalidToneError: If the tone is unknown; checked before any token
        UnknownGroupError: For the first token that matches nothing
    """
    modifier = tone_modifier(tone)

    selection = EmojiSelection()
    for token in tokens:
        if token.lower() == GROUPS_TOKEN:
            return EmojiSelection(group_tree=group_tree(repo))
        selection.rows.extend(select_group(repo, token, modifier))
    return selection
