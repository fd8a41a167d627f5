"""
Tools package for Chat Translit
"""

from .bidi import (
    BidiRun,
    find_bidi_runs,
    has_hebrew,
    is_hebrew_char,
    reverse_char_only,
    reverse_run_aware,
)
from .transliteration_map import (
    PHONEME_TABLE,
    SOFIT_MAP,
    apply_sofit_rules,
    final_form_variants,
    generate,
    generate_hebrew_variants,
    match_grapheme,
    tokenize,
)

__all__ = [
    'BidiRun',
    'find_bidi_runs',
    'has_hebrew',
    'is_hebrew_char',
    'reverse_char_only',
    'reverse_run_aware',
    'PHONEME_TABLE',
    'SOFIT_MAP',
    'apply_sofit_rules',
    'final_form_variants',
    'generate',
    'generate_hebrew_variants',
    'match_grapheme',
    'tokenize',
]
