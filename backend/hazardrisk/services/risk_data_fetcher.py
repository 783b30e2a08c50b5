"""Fetch a county's National Risk Index record from OpenFEMA."""

import httpx
import structlog

from hazardrisk.clients.openfema import OpenFemaClient
from hazardrisk.errors import (
    NO_RISK_DATA_MESSAGE,
    RISK_DATA_INVALID_MESSAGE,
    RISK_DATA_UNAVAILABLE_MESSAGE,
    RiskDataError,
)
from hazardrisk.models.risk import NRI_FIELDS, CountyRiskRecord

logger = structlog.get_logger()


class RiskDataFetcher:
    """County FIPS -> CountyRiskRecord, one OpenFEMA round trip per call."""

    def __init__(self, client: OpenFemaClient | None = None):
        self._client = client or OpenFemaClient()

    async def fetch(self, fips: str) -> CountyRiskRecord:
        """
        Fetch the NRI record for a 5-character county FIPS code.

        The dataset holds one row per county; when more come back the first
        one is used.

        Raises:
            RiskDataError: service non-2xx, unreachable or not JSON, or no row for
                the county.
        """
        state_code, county_code = fips[:2], fips[2:5]

        try:
            rows = await self._client.get_nri_county_data(state_code, county_code, NRI_FIELDS)
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("NRI request failed", fips=fips, status=status)
            raise RiskDataError(f"FEMA API error: {status}", status_code=status) from e
        except httpx.TransportError as e:
            logger.warning("NRI service unreachable", fips=fips, error=str(e))
            raise RiskDataError(RISK_DATA_UNAVAILABLE_MESSAGE) from e
        except ValueError as e:
            logger.warning("NRI service returned invalid JSON", fips=fips, error=str(e))
            raise RiskDataError(RISK_DATA_INVALID_MESSAGE) from e

        if not rows:
            logger.warning("No NRI record for county", fips=fips)
            raise RiskDataError(NO_RISK_DATA_MESSAGE, not_found=True)
        if len(rows) > 1:
            logger.warning("Multiple NRI records for county, using first", fips=fips, count=len(rows))

        record = CountyRiskRecord.from_api(rows[0])
        logger.info("Fetched NRI record", fips=fips, county=record.county, risk_score=record.risk_score)
        return record

    async def close(self):
        await self._client.close()
