"""
session.py — Headless chat controller.

Holds one conversation's transcript and calculator visibility for an embedding
UI (or a test). The transcript is append-only; turns are never edited.
Resolution of each message is independent of earlier turns.

Not shared across users and not persisted — one ChatSession per open chat.
"""
from __future__ import annotations

import logging

from taxassist.agents.calculator.formatting import format_tax_result
from taxassist.agents.calculator.schemas import TaxQuery, TaxResult
from taxassist.agents.calculator.tax_engine import compute_tax
from taxassist.agents.chat.resolver import resolve
from taxassist.agents.chat.responses import ERROR_MESSAGE, WELCOME_MESSAGE
from taxassist.agents.chat.schemas import ChatTurn, Resolution, ResolutionKind
from taxassist.providers.gateway import ProviderGateway

logger = logging.getLogger(__name__)


class ChatSession:
    def __init__(self, gateway: ProviderGateway):
        self.gateway = gateway
        self.calculator_visible = False
        self._turns: list[ChatTurn] = [ChatTurn(text=WELCOME_MESSAGE, is_from_assistant=True)]

    @property
    def transcript(self) -> tuple[ChatTurn, ...]:
        return tuple(self._turns)

    def _append(self, text: str, is_from_assistant: bool) -> ChatTurn:
        turn = ChatTurn(text=text, is_from_assistant=is_from_assistant)
        self._turns.append(turn)
        return turn

    async def send(self, text: str) -> ChatTurn | None:
        """
        Append the user's message and the assistant's reply.
        Blank input is ignored (returns None). A failing resolver yields the
        generic error reply instead of propagating.
        """
        if not text.strip():
            return None

        self._append(text, is_from_assistant=False)
        try:
            resolution: Resolution = await resolve(text, self.gateway)
        except Exception:
            logger.error("Error getting response", exc_info=True)
            return self._append(ERROR_MESSAGE, is_from_assistant=True)

        if resolution.kind == ResolutionKind.calculator:
            self.calculator_visible = True
        return self._append(resolution.text, is_from_assistant=True)

    def complete_calculation(self, query: TaxQuery) -> TaxResult:
        """Run the calculator, post its summary to the transcript and close it."""
        result = compute_tax(query)
        self._append(format_tax_result(result), is_from_assistant=True)
        self.calculator_visible = False
        return result
