from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from clearspeak.intents import Suggestion

MAX_TEXT_CHARS = 2000


class SuggestionOut(BaseModel):
    id: str
    text: str
    enhanced: str
    category: str
    icon: str = ""
    confidence: float = Field(0.0, ge=0.0, le=1.0)

    @classmethod
    def from_suggestion(cls, suggestion: Suggestion) -> "SuggestionOut":
        entry = suggestion.entry
        return cls(
            id=entry.id,
            text=entry.phrase,
            enhanced=entry.enhanced_phrase,
            category=entry.category.value,
            icon=entry.icon,
            confidence=suggestion.confidence,
        )


class SuggestionList(BaseModel):
    query: Optional[str] = None
    suggestions: List[SuggestionOut] = Field(default_factory=list)


class SelectionRequest(BaseModel):
    id: str = Field(..., min_length=1, max_length=64)


class EnhanceRequest(BaseModel):
    text: str = Field("", max_length=MAX_TEXT_CHARS)


class EnhanceResponse(BaseModel):
    original: str
    enhanced: str
    tier: str
    confidence: Optional[float] = None
    entry_id: Optional[str] = None
