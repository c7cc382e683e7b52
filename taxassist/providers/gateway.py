"""
gateway.py — Ordered set of LLM provider adapters sharing one credential store.

Priority order is fixed: OpenAI first, Gemini second. The resolver walks
configured() in that order and stops at the first successful completion.

Built once in the FastAPI lifespan and stored on app.state.gateway.
"""
from __future__ import annotations

import logging
from typing import Sequence

from taxassist.credentials import CredentialStore
from taxassist.providers.base import BaseProvider
from taxassist.providers.gemini_provider import GeminiProvider
from taxassist.providers.openai_provider import OpenAIProvider
from taxassist.providers.schemas import ProviderId

logger = logging.getLogger(__name__)


class ProviderGateway:
    def __init__(self, providers: Sequence[BaseProvider]):
        self.providers: tuple[BaseProvider, ...] = tuple(providers)

    def get(self, provider_id: ProviderId) -> BaseProvider:
        """
        Raises:
            KeyError: if no adapter is registered for provider_id.
        """
        for provider in self.providers:
            if provider.provider_id == provider_id:
                return provider
        raise KeyError(provider_id)

    async def configured(self) -> list[BaseProvider]:
        """
        Adapters with a stored credential, in priority order.
        An adapter whose credential cannot be read counts as unconfigured.
        """
        result = []
        for provider in self.providers:
            try:
                secret = await provider.get_credential()
            except Exception as exc:
                logger.warning(
                    "Credential lookup failed provider=%s error=%s",
                    provider.provider_id.value, type(exc).__name__,
                )
                continue
            if secret:
                result.append(provider)
        return result

    async def any_configured(self) -> bool:
        return bool(await self.configured())


def build_gateway(store: CredentialStore) -> ProviderGateway:
    gateway = ProviderGateway([OpenAIProvider(store), GeminiProvider(store)])
    logger.info(
        "Provider gateway ready order=%s",
        ",".join(p.provider_id.value for p in gateway.providers),
    )
    return gateway
