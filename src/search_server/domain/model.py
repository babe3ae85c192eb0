"""Value objects shared by the indexing and ranking layers.

Following Cosmic Python principles:
- Value Objects are immutable (frozen=True)
- No infrastructure dependencies
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DocumentStatus(str, Enum):
    """Lifecycle tag attached to every indexed document.

    The engine only compares statuses for equality; callers decide what each
    tag means.
    """

    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"


class RankedDocument(BaseModel):
    """A single ranked search hit.

    Produced per query and never stored by the engine.
    """

    model_config = ConfigDict(frozen=True)

    document_id: int
    relevance: float
    rating: int

    def __str__(self) -> str:
        return f"{{ document_id = {self.document_id}, relevance = {self.relevance}, rating = {self.rating} }}"


class MatchResult(BaseModel):
    """Query terms found in one document together with its status."""

    model_config = ConfigDict(frozen=True)

    words: tuple[str, ...] = Field(default_factory=tuple)
    status: DocumentStatus

    @property
    def matched(self) -> bool:
        return bool(self.words)
