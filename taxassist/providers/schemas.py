"""
schemas.py — Provider Pydantic v2 data contracts.

Defines:
  - ProviderId          enum (openai / gemini) — also the credential store key
  - ProviderErrorKind   enum (normalised failure taxonomy)
  - ProviderError       (kind + human-readable message)
  - ProviderResult      (success text OR ProviderError — adapters never raise)
  - ApiKeyRequest       (PUT /api/providers/{id}/key body)
  - ProviderStatus      (GET /api/providers item)
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProviderId(str, Enum):
    openai = "openai"
    gemini = "gemini"


class ProviderErrorKind(str, Enum):
    invalid_credential = "invalid_credential"
    quota_exceeded = "quota_exceeded"
    unavailable = "unavailable"      # No credential configured
    unknown = "unknown"


class ProviderError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ProviderErrorKind
    message: str


class ProviderResult(BaseModel):
    """
    Outcome of one completion call. Exactly one of text / error is set.
    The resolver only ever inspects .ok, .text and .error.kind — never
    provider-specific exception shapes.
    """
    model_config = ConfigDict(frozen=True)

    text: Optional[str] = None
    error: Optional[ProviderError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.text)

    @classmethod
    def success(cls, text: str) -> "ProviderResult":
        return cls(text=text)

    @classmethod
    def failure(cls, kind: ProviderErrorKind, message: str) -> "ProviderResult":
        return cls(error=ProviderError(kind=kind, message=message))


# ---------------------------------------------------------------------------
# HTTP contracts
# ---------------------------------------------------------------------------

class ApiKeyRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    api_key: str = Field(..., min_length=1, description="Provider API secret")


class ProviderStatus(BaseModel):
    model_config = ConfigDict(extra="forbid")

    provider_id: ProviderId
    configured: bool
    masked_key: Optional[str] = None   # e.g. "sk-proj...9xQz"
