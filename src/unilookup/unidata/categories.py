"""General category names and name canonicalization."""

import re
from typing import Dict, Tuple

# code: (property value alias, display name)
CATEGORIES: Dict[str, Tuple[str, str]] = {
    "Lu": ("Uppercase_Letter", "Letter, Uppercase"),
    "Ll": ("Lowercase_Letter", "Letter, Lowercase"),
    "Lt": ("Titlecase_Letter", "Letter, Titlecase"),
    "Lm": ("Modifier_Letter", "Letter, Modifier"),
    "Lo": ("Other_Letter", "Letter, Other"),
    "Mn": ("Nonspacing_Mark", "Mark, Nonspacing"),
    "Mc": ("Spacing_Mark", "Mark, Spacing Combining"),
    "Me": ("Enclosing_Mark", "Mark, Enclosing"),
    "Nd": ("Decimal_Number", "Number, Decimal Digit"),
    "Nl": ("Letter_Number", "Number, Letter"),
    "No": ("Other_Number", "Number, Other"),
    "Pc": ("Connector_Punctuation", "Punctuation, Connector"),
    "Pd": ("Dash_Punctuation", "Punctuation, Dash"),
    "Ps": ("Open_Punctuation", "Punctuation, Open"),
    "Pe": ("Close_Punctuation", "Punctuation, Close"),
    "Pi": ("Initial_Punctuation", "Punctuation, Initial quote"),
    "Pf": ("Final_Punctuation", "Punctuation, Final quote"),
    "Po": ("Other_Punctuation", "Punctuation, Other"),
    "Sm": ("Math_Symbol", "Symbol, Math"),
    "Sc": ("Currency_Symbol", "Symbol, Currency"),
    "Sk": ("Modifier_Symbol", "Symbol, Modifier"),
    "So": ("Other_Symbol", "Symbol, Other"),
    "Zs": ("Space_Separator", "Separator, Space"),
    "Zl": ("Line_Separator", "Separator, Line"),
    "Zp": ("Paragraph_Separator", "Separator, Paragraph"),
    "Cc": ("Control", "Other, Control"),
    "Cf": ("Format", "Other, Format"),
    "Cs": ("Surrogate", "Other, Surrogate"),
    "Co": ("Private_Use", "Other, Private Use"),
    "Cn": ("Unassigned", "Other, Not Assigned"),
}

_IGNORED = re.compile(r"[\s_,]+")


def canonical_name(name: str) -> str:
    """Normalize a category or block name to its lookup key.

    "Po", "po", "Punctuation, Other", "Punctuation_Other" and
    "OtherPunctuation" all map to a key for the same category.
    """
    return _IGNORED.sub("", name).lower()


def category_display_name(code: str) -> str:
    """Get the human readable name of a category code."""
    try:
        return CATEGORIES[code][1]
    except KeyError:
        return code


def build_category_map() -> Dict[str, str]:
    """Map every canonical spelling of each category to its code."""
    catmap: Dict[str, str] = {}
    for code, (alias, display) in CATEGORIES.items():
        catmap[canonical_name(code)] = code
        catmap[canonical_name(alias)] = code
        catmap[canonical_name(display)] = code
        # "Punctuation, Other" also reads as "OtherPunctuation"
        major, _, minor = display.partition(", ")
        if minor:
            catmap[canonical_name(minor + major)] = code
    return catmap
