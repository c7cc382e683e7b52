"""
HTTP API tests — httpx AsyncClient over ASGITransport.

ASGITransport does not run the lifespan, so the fixture installs a gateway
backed by an in-memory credential store on app.state directly.
"""
from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from taxassist.agents.chat.responses import (
    CALCULATOR_ACK,
    QUICK_ACTIONS,
    SETUP_KEY_HINT,
    SLABS_RESPONSE,
    WELCOME_MESSAGE,
)
from taxassist.credentials import InMemoryCredentialStore
from taxassist.main import app
from taxassist.providers.gateway import build_gateway
from taxassist.providers.schemas import ProviderId

OPENAI_KEY = "sk-proj-abcdefghijklmnop9xQz"


@pytest_asyncio.fixture
async def client():
    app.state.credentials = InMemoryCredentialStore()
    app.state.gateway = build_gateway(app.state.credentials)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# ---------------------------------------------------------------------------
# System
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


# ---------------------------------------------------------------------------
# Calculator
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_calculate_old_regime(client: AsyncClient) -> None:
    response = await client.post(
        "/api/calculate", json={"annual_income": 1_000_000, "regime": "old"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["base_tax"] == pytest.approx(112_500)
    assert data["cess"] == pytest.approx(4_500)
    assert data["total_tax"] == pytest.approx(117_000)
    assert data["slab"] == "20% (₹5,00,001 - ₹10,00,000)"
    assert "₹1,17,000" in data["summary"]


@pytest.mark.asyncio
async def test_calculate_defaults_to_new_regime(client: AsyncClient) -> None:
    response = await client.post("/api/calculate", json={"annual_income": 800_000})
    assert response.status_code == 200
    assert response.json()["regime"] == "new"
    assert response.json()["total_tax"] == pytest.approx(36_400)


@pytest.mark.parametrize(
    "payload",
    [
        pytest.param({}, id="missing_income"),
        pytest.param({"annual_income": -5}, id="negative_income"),
        pytest.param({"annual_income": "lots"}, id="non_numeric"),
        pytest.param({"annual_income": 500_000, "regime": "flat"}, id="bad_regime"),
        pytest.param({"annual_income": 500_000, "bonus": 1}, id="unknown_field"),
    ],
)
@pytest.mark.asyncio
async def test_calculate_validation_envelope(client: AsyncClient, payload: dict) -> None:
    response = await client.post("/api/calculate", json=payload)
    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"]


@pytest.mark.asyncio
async def test_compare_regimes_endpoint(client: AsyncClient) -> None:
    response = await client.post(
        "/api/calculate/compare", json={"annual_income": 1_000_000, "deductions": 500_000},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["recommended_regime"] == "old"
    assert data["savings_amount"] == pytest.approx(49_400)


# ---------------------------------------------------------------------------
# Chat
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_chat_canned(client: AsyncClient) -> None:
    response = await client.post("/api/chat", json={"message": "explain tax slabs"})
    assert response.status_code == 200
    assert response.json() == {"kind": "text", "text": SLABS_RESPONSE, "source": "canned"}


@pytest.mark.asyncio
async def test_chat_calculator_trigger(client: AsyncClient) -> None:
    response = await client.post("/api/chat", json={"message": "calculate my tax"})
    data = response.json()
    assert data["kind"] == "calculator"
    assert data["text"] == CALCULATOR_ACK


@pytest.mark.asyncio
async def test_chat_fallback_without_keys(client: AsyncClient) -> None:
    response = await client.post("/api/chat", json={"message": "what is the weather"})
    data = response.json()
    assert data["source"] == "fallback"
    assert SETUP_KEY_HINT in data["text"]


@pytest.mark.asyncio
async def test_chat_uses_configured_provider(client: AsyncClient) -> None:
    await app.state.credentials.set("openai", OPENAI_KEY)

    with patch("taxassist.providers.openai_provider.AsyncOpenAI") as mock_cls:
        mock_cls.return_value.chat.completions.create = AsyncMock(
            side_effect=RuntimeError("network down"),
        )
        response = await client.post("/api/chat", json={"message": "what is the weather"})

    data = response.json()
    assert response.status_code == 200
    assert data["source"] == "fallback"
    assert SETUP_KEY_HINT in data["text"]
    assert "network down" not in data["text"]


@pytest.mark.parametrize("message", ["", "   "])
@pytest.mark.asyncio
async def test_chat_rejects_blank_message(client: AsyncClient, message: str) -> None:
    response = await client.post("/api/chat", json={"message": message})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_quick_actions_and_welcome(client: AsyncClient) -> None:
    actions = (await client.get("/api/chat/quick-actions")).json()
    assert [(a["label"], a["message"]) for a in actions] == list(QUICK_ACTIONS)

    welcome = (await client.get("/api/chat/welcome")).json()
    assert welcome == {"text": WELCOME_MESSAGE}


# ---------------------------------------------------------------------------
# Provider keys
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_list_providers_unconfigured(client: AsyncClient) -> None:
    response = await client.get("/api/providers")
    assert response.json() == [
        {"provider_id": "openai", "configured": False, "masked_key": None},
        {"provider_id": "gemini", "configured": False, "masked_key": None},
    ]


@pytest.mark.asyncio
async def test_put_valid_key_stores_and_masks(client: AsyncClient) -> None:
    openai_provider = app.state.gateway.get(ProviderId.openai)

    with patch.object(openai_provider, "validate_credential", AsyncMock(return_value=True)) as validate:
        response = await client.put(
            "/api/providers/openai/key", json={"api_key": f"  {OPENAI_KEY}  "},
        )

    assert response.status_code == 200
    assert response.json() == {
        "provider_id": "openai", "configured": True, "masked_key": "sk-proj...9xQz",
    }
    validate.assert_awaited_once_with(OPENAI_KEY)
    assert await app.state.credentials.get("openai") == OPENAI_KEY

    listing = (await client.get("/api/providers")).json()
    assert listing[0]["configured"] is True
    assert OPENAI_KEY not in str(listing)


@pytest.mark.asyncio
async def test_put_rejected_key_stores_nothing(client: AsyncClient) -> None:
    gemini_provider = app.state.gateway.get(ProviderId.gemini)

    with patch.object(gemini_provider, "validate_credential", AsyncMock(return_value=False)):
        response = await client.put("/api/providers/gemini/key", json={"api_key": "AIza-bad"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_API_KEY"
    assert await app.state.credentials.get("gemini") is None


@pytest.mark.asyncio
async def test_put_blank_key_is_validation_error(client: AsyncClient) -> None:
    response = await client.put("/api/providers/openai/key", json={"api_key": "   "})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_unknown_provider_id_is_validation_error(client: AsyncClient) -> None:
    response = await client.put("/api/providers/claude/key", json={"api_key": "x"})
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_delete_key_is_idempotent(client: AsyncClient) -> None:
    await app.state.credentials.set("openai", OPENAI_KEY)

    first = await client.delete("/api/providers/openai/key")
    second = await client.delete("/api/providers/openai/key")

    assert first.status_code == second.status_code == 204
    assert await app.state.credentials.get("openai") is None


@pytest.mark.asyncio
async def test_put_key_schema_documents_provider_status(client: AsyncClient) -> None:
    schema = (await client.get("/api/openapi.json")).json()
    put = schema["paths"]["/api/providers/{provider_id}/key"]["put"]
    success = put["responses"]["200"]["content"]["application/json"]["schema"]
    assert success == {"$ref": "#/components/schemas/ProviderStatus"}
