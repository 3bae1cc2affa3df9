"""
Character-set checks for scraped course titles.

A title is valid when every character belongs to the allow pattern
(full-string match). ``\\s`` is ASCII-only, so a no-break space counts as
a disallowed character.
"""

import re

from constants import ALLOWED_TITLE_PATTERN

FAILURE_HEADER = "Unexpected character(s) found in course titles.\nInvalid Titles:\n"


def _compile(pattern):
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern, re.ASCII)


def is_valid_title(title, pattern=ALLOWED_TITLE_PATTERN):
    return _compile(pattern).fullmatch(title) is not None


def find_invalid(titles, pattern=ALLOWED_TITLE_PATTERN):
    """Returns the titles that contain at least one disallowed character, in order."""
    regex = _compile(pattern)
    return [title for title in titles if regex.fullmatch(title) is None]


def partition_titles(titles, pattern=ALLOWED_TITLE_PATTERN):
    """Splits titles into the expected and unexpected equivalence classes."""
    regex = _compile(pattern)
    valid, invalid = [], []
    for title in titles:
        if regex.fullmatch(title) is None:
            invalid.append(title)
        else:
            valid.append(title)
    return valid, invalid


# A single character class with an optional quantifier, e.g. [a-z0-9 ]+ or [a-z]{2,}
_CHARACTER_CLASS_FORM = re.compile(r"(\[\^?\]?(?:\\.|[^\]\\])*\])(?:[+*?]|\{\d*(?:,\d*)?\})?")


def _character_class(pattern):
    """The allow-list class of a ``[...]``-style pattern, or None for any other form."""
    regex = _compile(pattern)
    form = _CHARACTER_CLASS_FORM.fullmatch(regex.pattern)
    if form is None:
        return None
    return re.compile(form.group(1), regex.flags)


def disallowed_characters(title, pattern=ALLOWED_TITLE_PATTERN):
    """Characters of ``title`` outside the pattern's character class, unique and in first-seen order.

    Only character-class patterns have per-character answers; for any other
    pattern the result is empty.
    """
    char_class = _character_class(pattern)
    if char_class is None:
        return []
    found = []
    for char in title:
        if char_class.fullmatch(char) is None and char not in found:
            found.append(char)
    return found


def describe_character(char):
    return f"'{char}' (U+{ord(char):04X})"


def build_failure_message(invalid_titles, pattern=ALLOWED_TITLE_PATTERN):
    """Aggregate failure text listing every invalid title and what it tripped on."""
    lines = []
    for title in invalid_titles:
        chars = ", ".join(describe_character(c) for c in disallowed_characters(title, pattern))
        lines.append(f"{title}  [{chars}]" if chars else title)
    return FAILURE_HEADER + "\n".join(lines)
