"""
Transliteration Map - Latin to Hebrew candidate spellings
==========================================================

PHILOSOPHY: Generate every plausible spelling, let the caller match.

A chat name typed in Latin letters ("shalom", "savta") can be spelled in
Hebrew in several ways: vowels may or may not be written, "k" may be ק or כ,
"t" may be ת or ט. Instead of guessing the single right spelling we expand
every path through the phoneme table and hand the whole set to the chat
lookup, which does substring matching against the real display names.

Pipeline:
1. Normalize (lowercase, trim)
2. Tokenize greedily (2-char digraphs before single letters)
3. Expand every option of every token recursively
4. Apply sofit (final letter) rules to each completed path
"""

import logging
from typing import Dict, List, Optional, Set

logger = logging.getLogger(__name__)


# ==========================================
#  SECTION 1: PHONEME TABLE
# ==========================================

# PRIORITY ORDER MATTERS inside each list - first option is tried first.
# "" means the sound may be left unwritten (common unpointed spelling).
PHONEME_TABLE: Dict[str, List[str]] = {
    # Digraphs (longest match wins)
    "sh": ["ש"],
    "ch": ["כ", "ח"],
    "kh": ["כ", "ח"],
    "tz": ["צ"],
    "ts": ["צ"],
    "ph": ["פ"],

    # Single consonants
    "k": ["ק", "כ"],
    "q": ["ק"],
    "l": ["ל"],
    "m": ["מ"],        # sofit handled in SECTION 2
    "n": ["נ"],
    "s": ["ס", "ש"],   # samech or shin/sin
    "f": ["פ"],
    "p": ["פ"],
    "r": ["ר"],
    "t": ["ת", "ט"],
    "b": ["ב"],
    "v": ["ב", "ו"],
    "w": ["ו", "ב"],
    "d": ["ד"],
    "g": ["ג"],
    "h": ["ה", "ח", ""],
    "j": ["ג׳", "ג"],  # gimel with geresh
    "z": ["ז"],
    "y": ["י", ""],

    # Vowels
    "o": ["ו", ""],
    "u": ["ו", ""],
    "i": ["י", ""],
    "e": ["", "י"],
    "a": ["", "א"],    # final "a" also gets ה, see FINAL_A_OPTION
}

MAX_KEY_LENGTH = max(len(key) for key in PHONEME_TABLE)

# Word-final "a" is very often written with ה (savta → סבתה, lama → למה)
FINAL_A_OPTION = "ה"

# Paths grow exponentially with the number of tokens; longer words are rejected.
# Callers with configuration pass settings.max_input_tokens instead.
DEFAULT_MAX_INPUT_TOKENS = 12


# ==========================================
#  SECTION 2: SOFIT (FINAL LETTER) RULES
# ==========================================

SOFIT_MAP: Dict[str, str] = {
    'כ': 'ך',
    'מ': 'ם',
    'נ': 'ן',
    'פ': 'ף',
    'צ': 'ץ',
}

# Word for which a non-final mem at the end is also offered.
# FIXME: word-literal rule, pending product review before it is
# generalized or removed.
NON_FINAL_MEM_WORD = "kom"


def apply_sofit_rules(hebrew: str) -> str:
    """
    Replace the last letter with its sofit form, if it has one.

    Rules:
    - Final כ → ך
    - Final מ → ם
    - Final נ → ן
    - Final פ → ף
    - Final צ → ץ

    Idempotent: sofit letters are not keys of SOFIT_MAP.
    """
    if not hebrew:
        return hebrew

    last_char = hebrew[-1]
    if last_char in SOFIT_MAP:
        return hebrew[:-1] + SOFIT_MAP[last_char]

    return hebrew


def final_form_variants(hebrew: str, original_word: str) -> List[str]:
    """
    Return the spelling(s) a completed candidate contributes to the result set.

    Normally exactly one string: the candidate with sofit applied. For the
    word "kom" ending in a regular mem, the unmodified candidate is returned
    as well (קום and קומ).
    """
    if not hebrew:
        return []

    final = apply_sofit_rules(hebrew)
    if original_word == NON_FINAL_MEM_WORD and hebrew[-1] == 'מ':
        return [final, hebrew]

    return [final]


# ==========================================
#  SECTION 3: TOKENIZER
# ==========================================

def normalize_input(word: str) -> str:
    """Lowercase and trim user input."""
    return word.lower().strip()


def match_grapheme(remaining: str) -> Optional[str]:
    """
    Return the longest PHONEME_TABLE key that prefixes `remaining`.

    Length 2 is checked before length 1, so "sh" is never split into
    "s" + "h". Returns None when nothing matches (caller skips one char).
    """
    for length in range(min(MAX_KEY_LENGTH, len(remaining)), 0, -1):
        chunk = remaining[:length]
        if chunk in PHONEME_TABLE:
            return chunk
    return None


def tokenize(word: str) -> List[str]:
    """
    Split a word into PHONEME_TABLE keys, left to right.

    Characters with no rule (digits, punctuation, "c", "x") are dropped.
    """
    word = normalize_input(word)
    tokens: List[str] = []
    pos = 0

    while pos < len(word):
        key = match_grapheme(word[pos:])
        if key is None:
            pos += 1
            continue
        tokens.append(key)
        pos += len(key)

    return tokens


def skipped_characters(word: str) -> List[str]:
    """Characters of `word` that the tokenizer drops, in order."""
    word = normalize_input(word)
    skipped: List[str] = []
    pos = 0

    while pos < len(word):
        key = match_grapheme(word[pos:])
        if key is None:
            skipped.append(word[pos])
            pos += 1
        else:
            pos += len(key)

    return skipped


# ==========================================
#  SECTION 4: VARIANT GENERATION
# ==========================================

def _mapping_options(word: str, pos: int, key: str) -> List[str]:
    """Options for `key` at `pos`, with the word-final "a" rule applied."""
    options = list(PHONEME_TABLE[key])

    is_final_sequence = pos + len(key) == len(word)
    if is_final_sequence and key == "a" and FINAL_A_OPTION not in options:
        options.append(FINAL_A_OPTION)

    return options


def _expand(word: str, pos: int, current: str) -> Set[str]:
    """
    Expand every spelling reachable from `pos` given the prefix `current`.

    Each branch gets its own string, so siblings never see each other's
    letters.
    """
    if pos >= len(word):
        return set(final_form_variants(current, word))

    key = match_grapheme(word[pos:])
    if key is None:
        logger.debug(f"[TRANSLIT] Skipping unknown character {word[pos]!r} in {word!r}")
        return _expand(word, pos + 1, current)

    results: Set[str] = set()
    for hebrew in _mapping_options(word, pos, key):
        results |= _expand(word, pos + len(key), current + hebrew)

    return results


def generate_hebrew_variants(word: str, max_input_tokens: Optional[int] = None) -> Set[str]:
    """
    Main entry point: every plausible Hebrew spelling of a Latin word.

    Returns an empty set for empty, whitespace-only or non-string input, and
    for words of more than `max_input_tokens` phoneme tokens (default
    DEFAULT_MAX_INPUT_TOKENS) since the number of paths grows exponentially.
    Spaces and other skipped characters do not count toward the limit.
    """
    if not word or not isinstance(word, str):
        return set()

    word = normalize_input(word)
    if not word:
        return set()

    if max_input_tokens is None:
        max_input_tokens = DEFAULT_MAX_INPUT_TOKENS

    token_count = len(tokenize(word))
    if token_count > max_input_tokens:
        logger.warning(
            f"[TRANSLIT] Input of {token_count} tokens exceeds limit of "
            f"{max_input_tokens} - no variants generated"
        )
        return set()

    variants = _expand(word, 0, "")
    logger.debug(f"[TRANSLIT] {word!r} → {len(variants)} variants")
    return variants


# Aliases for compatibility
def generate(word: str) -> Set[str]:
    return generate_hebrew_variants(word)
