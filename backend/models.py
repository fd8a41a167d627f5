"""
Central Data Models for Chat Translit
=====================================

Pydantic models for the data passed between the transliteration engine,
the chat lookup and the console tester.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


# ==========================================
#  ENUMS
# ==========================================

class LookupStatus(str, Enum):
    """Outcome of a chat lookup."""
    FOUND = "found"
    NOT_FOUND = "not_found"
    EMPTY_QUERY = "empty_query"


# ==========================================
#  CHAT LIST
# ==========================================

class ChatEntry(BaseModel):
    """A chat as the chat list knows it."""
    name: str
    index: int = Field(..., description="Position in the chat list (0 = top)")


class ChatLookupResult(BaseModel):
    """Result of resolving a typed query against the chat list."""
    query: str
    status: LookupStatus
    candidates: List[str] = Field(default_factory=list, description="Names tried, raw query first")
    matches: List[ChatEntry] = Field(default_factory=list, description="All matching chats, best first")
    chat: Optional[ChatEntry] = None
    display_name: Optional[str] = Field(None, description="Chat name reordered for the terminal")
    message: str = ""

    @property
    def found(self) -> bool:
        return self.status == LookupStatus.FOUND


# ==========================================
#  TRANSLITERATION
# ==========================================

class TransliterationResult(BaseModel):
    """Transliteration of one word, with the details the console shows."""
    word: str
    tokens: List[str] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list, description="Characters with no rule")
    candidates: List[str] = Field(default_factory=list)
    rejected: bool = Field(False, description="True when the word had more than max_input_tokens tokens")
