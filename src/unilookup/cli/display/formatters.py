"""Display formatters for query results.

Everything here writes to the stream it's given and nothing else; choosing
the stream and the exit status is left to the commands.
"""

from html.entities import codepoint2name
from typing import Iterable, List, Sequence, TextIO, Tuple

from ...core import EmojiRow
from ...models import Codepoint
from ...unidata import category_display_name

DOTTED_CIRCLE = "\u25cc"
REPLACEMENT_CHARACTER = 0xFFFD
CONTROL_PICTURES_OFFSET = 0x2400
SYMBOL_FOR_DELETE = 0x2421
SOFT_HYPHEN = 0x00AD

_ROW_FORMAT = "{char:<5}{cpoint:<7} {dec:<6} {utf8:<11} {html:<10} {name} ({cat})"

HEADER = _ROW_FORMAT.format(
    char="",
    cpoint="cpoint",
    dec="dec",
    utf8="utf-8",
    html="html",
    name="name",
    cat="cat",
)


def fmt_char(info: Codepoint, raw: bool = False) -> str:
    """Get a displayable version of a codepoint.

    Combining marks get a dotted circle to sit on, control characters are
    shown as their "Control Pictures" symbol, and anything else without a
    glyph becomes U+FFFD. Raw mode returns the character as-is, which may
    mess up the terminal for control characters.
    """
    if raw:
        return info.char

    if info.is_combining:
        return DOTTED_CIRCLE + info.char

    code = info.code
    if code < 0x20:  # C0
        code += CONTROL_PICTURES_OFFSET
    elif code == 0x7F:  # DEL
        code = SYMBOL_FOR_DELETE
    elif not info.is_printable and info.category != "Zs" and code != SOFT_HYPHEN:
        code = REPLACEMENT_CHARACTER
    return chr(code)


def html_entity(code: int) -> str:
    """Get the HTML entity for a codepoint; named where one exists."""
    name = codepoint2name.get(code)
    if name:
        return f"&{name};"
    return f"&#x{code:x};"


def utf8_bytes(code: int) -> str:
    """Get the UTF-8 encoding as space-separated hex bytes."""
    return " ".join(f"{b:02x}" for b in chr(code).encode("utf-8"))


def format_codepoint(info: Codepoint, raw: bool = False) -> str:
    """Format one codepoint table row."""
    return _ROW_FORMAT.format(
        char=f"'{fmt_char(info, raw)}'",
        cpoint=info.label,
        dec=info.code,
        utf8=utf8_bytes(info.code),
        html=html_entity(info.code),
        name=info.name,
        cat=category_display_name(info.category),
    )


def display_codepoints(
    out: TextIO,
    codepoints: Sequence[Codepoint],
    quiet: bool = False,
    raw: bool = False,
    sort: bool = False,
) -> None:
    """Write a codepoint table.

    Args:
        out: Stream to write to
        codepoints: Codepoints to list
        quiet: Only write the rows, without header and summary
        raw: Write characters without display substitutions
        sort: Order rows by codepoint value instead of the given order
    """
    rows: Iterable[Codepoint] = codepoints
    if sort:
        rows = sorted(codepoints, key=lambda info: info.code)

    if not quiet:
        out.write(HEADER.rstrip() + "\n")
    for info in rows:
        out.write(format_codepoint(info, raw) + "\n")
    if not quiet:
        n = len(codepoints)
        out.write(f"{n} codepoint{'' if n == 1 else 's'}\n")


def fill(text: str, width: int) -> str:
    """Pad text with spaces to a width in characters."""
    return text + " " * max(width - len(text), 0)


def display_emoji(out: TextIO, rows: Sequence[EmojiRow]) -> None:
    """Write emoji rows with aligned name, group and subgroup columns.

    The emoji itself is followed by a single space; how wide it displays
    depends on the font, so it isn't padded.
    """
    widths = [0, 0, 0]
    for row in rows:
        for i, cell in enumerate((row.name, row.group, row.subgroup)):
            widths[i] = max(widths[i], len(cell))

    for row in rows:
        cells = (row.name, row.group, row.subgroup)
        line = row.text + " " + "".join(
            fill(cell, widths[i] + 2) for i, cell in enumerate(cells)
        )
        out.write(line.rstrip() + "\n")


def display_emoji_groups(out: TextIO, tree: List[Tuple[str, List[str]]]) -> None:
    """Write emoji group names, each followed by its indented subgroups."""
    for group, subgroups in tree:
        out.write(group + "\n")
        for subgroup in subgroups:
            out.write("    " + subgroup + "\n")
