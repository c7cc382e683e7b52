"""
schemas.py — Chat Pydantic v2 data contracts.

Defines:
  - ResolutionKind   enum (calculator / text)
  - Resolution       (resolver output — what to show, and who produced it)
  - ChatTurn         (one transcript entry — immutable once created)
  - ChatRequest      (POST /api/chat body)
  - QuickAction      (preset message button)
"""
import uuid
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ResolutionKind(str, Enum):
    calculator = "calculator"   # Caller should open the tax calculator
    text = "text"


class Resolution(BaseModel):
    """
    source: "calculator" | "canned" | "keyword" | "provider:<id>" | "fallback"
    """
    model_config = ConfigDict(frozen=True)

    kind: ResolutionKind
    text: str
    source: str


class ChatTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    text: str
    is_from_assistant: bool
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ChatRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    message: str = Field(..., min_length=1, max_length=2000)


class QuickAction(BaseModel):
    label: str
    message: str
