"""Resolve a US ZIP code to its county via the Census Bureau geocoder."""

from typing import Any

import httpx
import structlog

from hazardrisk.clients.census_geocoder import CensusGeocoderClient
from hazardrisk.errors import (
    GEOCODER_UNAVAILABLE_MESSAGE,
    NO_COUNTY_MESSAGE,
    NO_LOCATION_MESSAGE,
    LocationResolutionError,
)
from hazardrisk.models.location import CountyLocation

logger = structlog.get_logger()


class LocationResolver:
    """ZIP code -> CountyLocation, one geocoder round trip per call."""

    def __init__(self, client: CensusGeocoderClient | None = None):
        self._client = client or CensusGeocoderClient()

    async def resolve(self, zip_code: str) -> CountyLocation:
        """
        Resolve an already-validated 5-digit ZIP code.

        Raises:
            LocationResolutionError: geocoder unreachable or non-2xx, no
                address match, or a match without county geography.
        """
        try:
            data = await self._client.geocode_oneline_address(zip_code)
        except (httpx.HTTPStatusError, httpx.TransportError) as e:
            logger.warning("Geocoding request failed", zip_code=zip_code, error=str(e))
            raise LocationResolutionError(GEOCODER_UNAVAILABLE_MESSAGE) from e
        except ValueError as e:
            logger.warning("Geocoder returned invalid JSON", zip_code=zip_code, error=str(e))
            raise LocationResolutionError(GEOCODER_UNAVAILABLE_MESSAGE) from e

        location = self._parse_response(data)
        logger.info(
            "Resolved ZIP code",
            zip_code=zip_code,
            fips=location.fips,
            county=location.county_name,
        )
        return location

    @staticmethod
    def _parse_response(data: dict[str, Any]) -> CountyLocation:
        """Take the first county of the first address match."""
        if not isinstance(data, dict):
            raise LocationResolutionError(GEOCODER_UNAVAILABLE_MESSAGE)
        matches = (data.get("result") or {}).get("addressMatches") or []
        if not matches:
            raise LocationResolutionError(NO_LOCATION_MESSAGE, not_found=True)

        match = matches[0]
        counties = (match.get("geographies") or {}).get("Counties") or []
        if not counties:
            raise LocationResolutionError(NO_COUNTY_MESSAGE, not_found=True)

        county = counties[0]
        state_fips = str(county.get("STATE") or "")
        county_fips = str(county.get("COUNTY") or "")
        if len(state_fips) != 2 or len(county_fips) != 3:
            raise LocationResolutionError(NO_COUNTY_MESSAGE, not_found=True)

        components = match.get("addressComponents") or {}
        coordinates = match.get("coordinates") or {}

        return CountyLocation(
            fips=state_fips + county_fips,
            county_name=county.get("NAME") or "",
            state_name=components.get("state") or state_fips,
            latitude=_to_float(coordinates.get("y")),
            longitude=_to_float(coordinates.get("x")),
            matched_address=match.get("matchedAddress"),
        )

    async def close(self):
        await self._client.close()


def _to_float(value: Any) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
