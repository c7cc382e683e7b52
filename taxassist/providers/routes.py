"""
Provider credential routes — GET    /api/providers
                             PUT    /api/providers/{provider_id}/key
                             DELETE /api/providers/{provider_id}/key

A key is only stored after the provider accepted it (validate_credential).
Secrets are never echoed back: GET returns a masked form only.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from taxassist.credentials import mask_secret
from taxassist.errors import make_error_response
from taxassist.providers.gateway import ProviderGateway
from taxassist.providers.schemas import ApiKeyRequest, ProviderId, ProviderStatus

router = APIRouter(prefix="/api/providers", tags=["providers"])
logger = logging.getLogger(__name__)

INVALID_KEY_MESSAGE = "Invalid API key. Please check and try again."


def get_gateway(request: Request) -> ProviderGateway:
    return request.app.state.gateway


@router.get("", response_model=list[ProviderStatus])
async def list_providers(gateway: ProviderGateway = Depends(get_gateway)) -> list[ProviderStatus]:
    """Configuration state of every provider, in fallback priority order."""
    statuses = []
    for provider in gateway.providers:
        secret = await provider.get_credential()
        statuses.append(ProviderStatus(
            provider_id=provider.provider_id,
            configured=bool(secret),
            masked_key=mask_secret(secret) if secret else None,
        ))
    return statuses


@router.put("/{provider_id}/key", response_model=ProviderStatus)
async def set_provider_key(
    provider_id: ProviderId,
    body: ApiKeyRequest,
    gateway: ProviderGateway = Depends(get_gateway),
) -> ProviderStatus | JSONResponse:
    """
    Validate the key with a minimal provider request, then store it.

    Returns:
      200: ProviderStatus with the masked key
      400: INVALID_API_KEY — the provider rejected the key (nothing stored)
      422: blank key
    """
    provider = gateway.get(provider_id)
    if not await provider.validate_credential(body.api_key):
        logger.info("Rejected API key provider=%s", provider_id.value)
        return make_error_response(
            code="INVALID_API_KEY",
            message=INVALID_KEY_MESSAGE,
            details=[{"field": "api_key", "issue": INVALID_KEY_MESSAGE}],
            status_code=400,
        )

    await provider.save_credential(body.api_key)
    return ProviderStatus(
        provider_id=provider_id,
        configured=True,
        masked_key=mask_secret(body.api_key),
    )


@router.delete("/{provider_id}/key", status_code=204)
async def clear_provider_key(
    provider_id: ProviderId,
    gateway: ProviderGateway = Depends(get_gateway),
) -> Response:
    """Remove the stored key. Idempotent."""
    await gateway.get(provider_id).clear_credential()
    return Response(status_code=204)
