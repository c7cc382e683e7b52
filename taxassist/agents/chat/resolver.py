"""
resolver.py — Decides how to answer one chat message.

Resolution order (first match wins):
  1. Calculator trigger   — "calculate" / "tax calculator" → open the calculator
  2. Canned topic table   — ordered, loose substring matching (see match_canned)
  3. Keyword rules        — section codes, old-vs-new regime comparison
  4. Provider chain       — configured providers in priority order, sequentially,
                            first non-empty answer wins, failures logged and skipped
  5. Generic fallback     — supported topics + API key hint

Each call is independent: no conversation memory, no shared state mutation,
no retries. Provider errors never reach the user; only the fallback text does.
"""
from __future__ import annotations

import logging
from typing import Optional

from taxassist.agents.chat.responses import (
    CALCULATOR_ACK,
    CANNED_RESPONSES,
    KEYWORD_RULES,
    SYSTEM_CONTEXT,
    build_fallback,
)
from taxassist.agents.chat.schemas import Resolution, ResolutionKind
from taxassist.providers.gateway import ProviderGateway

logger = logging.getLogger(__name__)

CALCULATOR_TRIGGERS = ("calculate", "tax calculator")


def is_calculator_request(lower_message: str) -> bool:
    return any(trigger in lower_message for trigger in CALCULATOR_TRIGGERS)


def match_canned(
    lower_message: str,
    table: tuple[tuple[str, str], ...] = CANNED_RESPONSES,
) -> Optional[str]:
    """
    Return the first table response whose key satisfies any of:
      - message contains key
      - key contains message
      - message contains the key's first word
    This is deliberately permissive (short keys can match unrelated text) and
    depends on table order.
    """
    for key, response in table:
        if (
            key in lower_message
            or lower_message in key
            or key.split(" ")[0] in lower_message
        ):
            return response
    return None


def match_keyword_rule(lower_message: str) -> Optional[str]:
    for required, response in KEYWORD_RULES:
        if all(word in lower_message for word in required):
            return response
    return None


async def resolve(message: str, gateway: ProviderGateway) -> Resolution:
    """Resolve one user message into a calculator trigger or answer text."""
    lower_message = message.lower()

    if is_calculator_request(lower_message):
        return Resolution(
            kind=ResolutionKind.calculator, text=CALCULATOR_ACK, source="calculator",
        )

    canned = match_canned(lower_message)
    if canned is not None:
        return Resolution(kind=ResolutionKind.text, text=canned, source="canned")

    keyword = match_keyword_rule(lower_message)
    if keyword is not None:
        return Resolution(kind=ResolutionKind.text, text=keyword, source="keyword")

    providers = await gateway.configured()
    for provider in providers:
        result = await provider.complete(message, SYSTEM_CONTEXT)
        if result.ok:
            return Resolution(
                kind=ResolutionKind.text,
                text=result.text,
                source=f"provider:{provider.provider_id.value}",
            )
        logger.warning(
            "%s API error kind=%s — trying next provider",
            provider.display_name, result.error.kind.value if result.error else "empty",
        )

    logger.info("No rule or provider answered providers_configured=%d", len(providers))
    return Resolution(
        kind=ResolutionKind.text,
        text=build_fallback(),
        source="fallback",
    )
