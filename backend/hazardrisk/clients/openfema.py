"""
OpenFEMA API client (National Risk Index county dataset).

API Documentation: https://www.fema.gov/about/openfema/api
Base URL: https://www.fema.gov/api/open/v1/
Authentication: None required

Queries use OData-style parameters:
- $filter: server-side row filter, e.g. ``stateCode eq '06' and countyCode eq '037'``
- $select: comma-separated list of fields to return
"""

from typing import Any

import httpx

from hazardrisk.clients.base_client import BaseAPIClient
from hazardrisk.config import settings


class OpenFemaClient(BaseAPIClient):
    """OpenFEMA NRI county data client."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(
            base_url=base_url or settings.openfema_url,
            timeout=timeout or settings.http_timeout,
            transport=transport,
        )

    async def get_nri_county_data(
        self,
        state_code: str,
        county_code: str,
        fields: list[str],
    ) -> list[dict[str, Any]]:
        """
        Fetch National Risk Index rows for exactly one county.

        Args:
            state_code: 2-digit state FIPS code (e.g. "06")
            county_code: 3-digit county FIPS code (e.g. "037")
            fields: NRI field names to select

        Returns:
            List of matching records (at most one per county is expected)
        """
        data = await self.get(
            "/api/open/v1/NriCountyData",
            params={
                "$filter": f"stateCode eq '{state_code}' and countyCode eq '{county_code}'",
                "$select": ",".join(fields),
            },
        )
        return data.get("NriCountyData") or []
