"""
Chat Lookup - find a chat by a Latin-typed name
===============================================

The user types "savta" and the chat list holds "סבתא". We generate every
Hebrew spelling of the query, then do case-insensitive substring matching of
each spelling (and the raw query) against the chat names. When several chats
match, the one highest in the list (lowest index) wins.
"""

from typing import List

from config import get_settings
from logging_config import get_logger
from models import ChatEntry, ChatLookupResult, LookupStatus, TransliterationResult
from tools.bidi import reverse_run_aware
from tools.transliteration_map import (
    generate_hebrew_variants,
    normalize_input,
    skipped_characters,
    tokenize,
)

logger = get_logger(__name__)


def transliterate(word: str) -> TransliterationResult:
    """Run the transliteration engine and collect the details for display."""
    normalized = normalize_input(word) if isinstance(word, str) else ""
    max_tokens = get_settings().max_input_tokens
    tokens = tokenize(normalized)

    return TransliterationResult(
        word=normalized,
        tokens=tokens,
        skipped=skipped_characters(normalized),
        candidates=sorted(generate_hebrew_variants(normalized, max_tokens)),
        rejected=len(tokens) > max_tokens,
    )


def build_search_names(query: str) -> List[str]:
    """
    Names to look for: the raw query first, then its Hebrew spellings.
    """
    query = query.strip()
    if not query:
        return []

    settings = get_settings()
    names: List[str] = []
    if settings.lookup_include_raw_query:
        names.append(query)

    for variant in sorted(generate_hebrew_variants(query, settings.max_input_tokens)):
        if variant not in names:
            names.append(variant)

    return names


def find_chats(names: List[str], chats: List[ChatEntry]) -> List[ChatEntry]:
    """
    All chats whose name contains any of `names` (case-insensitive),
    ordered by position in the chat list.
    """
    lowered = [n.lower() for n in names if n]
    matches = [
        chat for chat in chats
        if any(name in chat.name.lower() for name in lowered)
    ]
    matches.sort(key=lambda chat: chat.index)
    return matches


def lookup_chat(query: str, chats: List[ChatEntry]) -> ChatLookupResult:
    """
    Resolve a typed query to a single chat.

    Never raises: an empty query or no match is reported through the
    result's status and message.
    """
    if not query or not query.strip():
        return ChatLookupResult(
            query=query or "",
            status=LookupStatus.EMPTY_QUERY,
            message="empty query",
        )

    names = build_search_names(query)
    matches = find_chats(names, chats)

    if not matches:
        logger.info(f"[LOOKUP] No chat for {query!r} ({len(names)} names tried)")
        return ChatLookupResult(
            query=query,
            status=LookupStatus.NOT_FOUND,
            candidates=names,
            message=f"not found: {','.join(names)}",
        )

    chat = matches[0]
    logger.info(f"[LOOKUP] {query!r} → {chat.name!r} (index {chat.index}, {len(matches)} matches)")
    return ChatLookupResult(
        query=query,
        status=LookupStatus.FOUND,
        candidates=names,
        matches=matches,
        chat=chat,
        display_name=reverse_run_aware(chat.name),
        message=f"selected: {chat.name}",
    )
