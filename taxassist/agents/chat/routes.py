"""
Chat HTTP routes — POST /api/chat
                   GET  /api/chat/quick-actions
                   GET  /api/chat/welcome

Stateless: the UI owns the transcript. Each POST resolves one message
independently (no history is sent or kept).
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from taxassist.agents.chat.resolver import resolve
from taxassist.agents.chat.responses import QUICK_ACTIONS, WELCOME_MESSAGE
from taxassist.agents.chat.schemas import ChatRequest, QuickAction, Resolution

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.post("", response_model=Resolution)
async def chat_endpoint(body: ChatRequest, request: Request) -> Resolution:
    """
    Resolve one message.

    kind="calculator" tells the UI to open the tax calculator; text is the
    acknowledgement to show. Otherwise text is the answer to append.
    """
    resolution = await resolve(body.message, request.app.state.gateway)
    logger.info(
        "Chat resolved kind=%s source=%s message_len=%d",
        resolution.kind.value, resolution.source, len(body.message),
    )
    return resolution


@router.get("/quick-actions", response_model=list[QuickAction])
async def quick_actions() -> list[QuickAction]:
    return [QuickAction(label=label, message=message) for label, message in QUICK_ACTIONS]


@router.get("/welcome")
async def welcome() -> dict:
    return {"text": WELCOME_MESSAGE}
