from fastapi import Depends

from hazardrisk.services.location_resolver import LocationResolver
from hazardrisk.services.lookup_orchestrator import RiskLookupOrchestrator
from hazardrisk.services.risk_data_fetcher import RiskDataFetcher

# Shared across requests; each holds one pooled httpx client and no lookup state.
_resolver: LocationResolver | None = None
_fetcher: RiskDataFetcher | None = None


def get_location_resolver() -> LocationResolver:
    global _resolver
    if _resolver is None:
        _resolver = LocationResolver()
    return _resolver


def get_risk_data_fetcher() -> RiskDataFetcher:
    global _fetcher
    if _fetcher is None:
        _fetcher = RiskDataFetcher()
    return _fetcher


def get_orchestrator(
    resolver: LocationResolver = Depends(get_location_resolver),
    fetcher: RiskDataFetcher = Depends(get_risk_data_fetcher),
) -> RiskLookupOrchestrator:
    """One orchestrator, and so one result slot, per request."""
    return RiskLookupOrchestrator(resolver, fetcher)


async def close_clients():
    global _resolver, _fetcher
    if _resolver is not None:
        await _resolver.close()
        _resolver = None
    if _fetcher is not None:
        await _fetcher.close()
        _fetcher = None
