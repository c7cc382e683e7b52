"""
credentials.py — Provider credential store for TaxAssist.

Namespace convention:
  credential:{provider_id}   → API secret string     NO TTL (durable until cleared)

Design:
  - Uses redis.asyncio (async client, part of redis-py 5.x)
  - Store is created once in lifespan, stored on app.state.credentials
  - Adapters receive the store as a constructor param — no module-level global state
  - Last write wins: concurrent saves for the same provider are not coordinated
  - Logs only provider ids — secrets never reach the logs
"""
import logging
from typing import Optional, Protocol

import redis.asyncio as aioredis

from taxassist.config import settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Key prefix constants
# ---------------------------------------------------------------------------
CREDENTIAL_PREFIX = "credential"


def make_credential_key(provider_id: str) -> str:
    """Build Redis key for a provider secret: credential:{provider_id}"""
    return f"{CREDENTIAL_PREFIX}:{provider_id}"


class CredentialStore(Protocol):
    """get/set/delete by provider id. No expiry."""

    async def get(self, provider_id: str) -> Optional[str]: ...

    async def set(self, provider_id: str, secret: str) -> None: ...

    async def delete(self, provider_id: str) -> None: ...

    async def aclose(self) -> None: ...


class RedisCredentialStore:
    """Durable credential store backed by a Redis connection pool."""

    def __init__(self, client: aioredis.Redis):
        self.client = client

    async def get(self, provider_id: str) -> Optional[str]:
        return await self.client.get(make_credential_key(provider_id))

    async def set(self, provider_id: str, secret: str) -> None:
        # Plain SET: no TTL, overwrites any previous secret
        await self.client.set(make_credential_key(provider_id), secret)
        logger.info("Credential stored provider=%s", provider_id)

    async def delete(self, provider_id: str) -> None:
        await self.client.delete(make_credential_key(provider_id))
        logger.info("Credential cleared provider=%s", provider_id)

    async def aclose(self) -> None:
        await self.client.aclose()


class InMemoryCredentialStore:
    """Process-local store. Lost on restart."""

    def __init__(self) -> None:
        self._secrets: dict[str, str] = {}

    async def get(self, provider_id: str) -> Optional[str]:
        return self._secrets.get(make_credential_key(provider_id))

    async def set(self, provider_id: str, secret: str) -> None:
        self._secrets[make_credential_key(provider_id)] = secret
        logger.info("Credential stored in memory provider=%s", provider_id)

    async def delete(self, provider_id: str) -> None:
        self._secrets.pop(make_credential_key(provider_id), None)
        logger.info("Credential cleared from memory provider=%s", provider_id)

    async def aclose(self) -> None:
        self._secrets.clear()


# ---------------------------------------------------------------------------
# Factory: called once in lifespan
# ---------------------------------------------------------------------------

async def create_credential_store() -> CredentialStore:
    """
    Build the credential store selected by settings.credential_backend.
    The Redis variant verifies connectivity with PING before returning.
    """
    if settings.credential_backend == "memory":
        logger.warning("Using in-memory credential store — keys are lost on restart")
        return InMemoryCredentialStore()

    client = aioredis.from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
        max_connections=10,
    )
    await client.ping()
    logger.info("Redis credential store connected at %s", settings.redis_url)
    return RedisCredentialStore(client)


def mask_secret(secret: str) -> str:
    """First 7 and last 4 characters, as shown in the key settings dialog."""
    if len(secret) <= 11:
        return "*" * len(secret)
    return f"{secret[:7]}...{secret[-4:]}"
