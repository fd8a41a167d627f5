"""
Bidi Reordering for Terminal Display
====================================

The terminal grid writes every character left to right. Hebrew typed into the
input bar or stored in a chat name would come out mirrored, so before text is
written to a cell we reverse the Hebrew parts ourselves.

Two variants exist:

- reverse_run_aware: finds runs of Hebrew (with interior spaces/hyphens),
  reverses letters inside each word and the order of the words in the run.
  Latin text, digits and punctuation keep their place. Used for the live
  input line and chat names.

- reverse_char_only: one accumulator; Hebrew characters are prepended,
  everything else appended. Cheaper and simpler, but differs from the
  run-aware version as soon as a run holds more than one word or Latin text
  comes before the Hebrew.
"""

import re
from dataclasses import dataclass
from typing import List

# Hebrew block + Hebrew presentation forms
HEBREW_RANGES = (
    (0x0590, 0x05FF),
    (0xFB1D, 0xFB4F),
)

_HEBREW_CLASS = r"\u0590-\u05FF\uFB1D-\uFB4F"

# Starts and ends with a Hebrew char; spaces and hyphens only in between
_RUN_RE = re.compile(rf"[{_HEBREW_CLASS}](?:[{_HEBREW_CLASS}\- ]*[{_HEBREW_CLASS}])?")

_SPACES_RE = re.compile(r" +")


@dataclass
class BidiRun:
    """A maximal Hebrew run found in a piece of text."""
    start: int
    end: int
    text: str


def is_hebrew_char(char: str) -> bool:
    """True if `char` is in one of the Hebrew ranges."""
    code = ord(char)
    return any(low <= code <= high for low, high in HEBREW_RANGES)


def has_hebrew(text: str) -> bool:
    return any(is_hebrew_char(c) for c in text)


def find_bidi_runs(text: str) -> List[BidiRun]:
    """Return the Hebrew runs of `text`, left to right."""
    return [BidiRun(m.start(), m.end(), m.group(0)) for m in _RUN_RE.finditer(text)]


def _reverse_run(run: str) -> str:
    words = _SPACES_RE.split(run)
    reversed_words = [word[::-1] for word in words]
    reversed_words.reverse()
    return " ".join(reversed_words)


def reverse_run_aware(text: str) -> str:
    """
    Reorder Hebrew runs for a left-to-right terminal.

    "שלום-לכם אנשים" → "םישנא םכל-םולש"
    "Hello עולם!"    → "Hello םלוע!"

    Spaces inside a run are collapsed to one.
    """
    if not text:
        return text
    return _RUN_RE.sub(lambda m: _reverse_run(m.group(0)), text)


def reverse_char_only(text: str) -> str:
    """
    Reverse Hebrew characters by prepending them to a single accumulator.

    Non-Hebrew characters are appended in their original order, so
    "abc דגא" becomes "אגדabc " rather than "abc אגד".
    """
    result = ""
    for char in text:
        if is_hebrew_char(char):
            result = char + result
        else:
            result = result + char
    return result
