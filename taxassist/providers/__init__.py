"""
LLM provider adapters.

Import from here rather than from individual modules:
    from taxassist.providers import ProviderGateway, build_gateway
"""
from taxassist.providers.gateway import ProviderGateway, build_gateway
from taxassist.providers.schemas import ProviderErrorKind, ProviderId, ProviderResult

__all__ = ["ProviderGateway", "build_gateway", "ProviderErrorKind", "ProviderId", "ProviderResult"]
