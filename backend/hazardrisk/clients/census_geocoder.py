"""
US Census Bureau Geocoder API client.

API Documentation: https://geocoding.geo.census.gov/geocoder/Geocoding_Services_API.html
Base URL: https://geocoding.geo.census.gov/geocoder/
Authentication: None required

Used endpoint:
- geographies/onelineaddress: single free-text address -> matches with
  coordinates and census geographies (states, counties, tracts, ...)
"""

from typing import Any

import httpx

from hazardrisk.clients.base_client import BaseAPIClient
from hazardrisk.config import settings


class CensusGeocoderClient(BaseAPIClient):
    """Census Bureau geocoder client."""

    def __init__(
        self,
        base_url: str | None = None,
        benchmark: str | None = None,
        vintage: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(
            base_url=base_url or settings.census_geocoder_url,
            timeout=timeout or settings.http_timeout,
            transport=transport,
        )
        self.benchmark = benchmark or settings.census_benchmark
        self.vintage = vintage or settings.census_vintage

    async def geocode_oneline_address(self, address: str) -> dict[str, Any]:
        """
        Geocode a single-line address and return its geographies.

        Args:
            address: Free-text address (a bare 5-digit ZIP code works)

        Returns:
            Raw JSON payload; matches live under ``result.addressMatches``
        """
        return await self.get(
            "/geocoder/geographies/onelineaddress",
            params={
                "address": address,
                "benchmark": self.benchmark,
                "vintage": self.vintage,
                "format": "json",
            },
        )
