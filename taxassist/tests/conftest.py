"""
Test configuration for TaxAssist.

Forces the in-memory credential backend before any taxassist import so no
test needs Redis, and provides a scripted provider so resolver tests never
touch a real LLM SDK.
"""
from __future__ import annotations

import os

os.environ.setdefault("CREDENTIAL_BACKEND", "memory")

from typing import Any, Optional  # noqa: E402

import pytest  # noqa: E402

from taxassist.credentials import InMemoryCredentialStore  # noqa: E402
from taxassist.providers.base import BaseProvider  # noqa: E402
from taxassist.providers.gateway import ProviderGateway  # noqa: E402
from taxassist.providers.schemas import (  # noqa: E402
    ProviderError,
    ProviderErrorKind,
    ProviderId,
)


class ScriptedProvider(BaseProvider):
    """
    Provider whose completion outcome is fixed per instance.

    reply:  text returned by the completion (None / "" → empty response)
    raises: exception raised by the completion instead of replying
    calls:  (message, system_context) of every completion attempt, in order
    """

    def __init__(
        self,
        provider_id: ProviderId,
        store: InMemoryCredentialStore,
        reply: Optional[str] = None,
        raises: Optional[Exception] = None,
    ):
        super().__init__(store)
        self.provider_id = provider_id
        self.display_name = provider_id.value.title()
        self.reply = reply
        self.raises = raises
        self.calls: list[tuple[str, str]] = []
        self.log: Optional[list[str]] = None

    def _build_client(self, secret: str) -> Any:
        return object()

    async def _complete(self, client: Any, message: str, system_context: str) -> Optional[str]:
        self.calls.append((message, system_context))
        if self.log is not None:
            self.log.append(self.provider_id.value)
        if self.raises is not None:
            raise self.raises
        return self.reply

    async def _validation_request(self, client: Any) -> bool:
        return self.raises is None

    def _classify_error(self, exc: Exception) -> ProviderError:
        return ProviderError(kind=ProviderErrorKind.unknown, message=str(exc))


@pytest.fixture
def store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def empty_gateway(store: InMemoryCredentialStore) -> ProviderGateway:
    """Both providers registered, no credentials stored."""
    return ProviderGateway([
        ScriptedProvider(ProviderId.openai, store, reply="openai answer"),
        ScriptedProvider(ProviderId.gemini, store, reply="gemini answer"),
    ])


class UnreachableCredentialStore(InMemoryCredentialStore):
    """Store whose reads fail the way a dropped Redis connection does."""

    async def get(self, provider_id: str) -> Optional[str]:
        raise ConnectionError("store offline")
