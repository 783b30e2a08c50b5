"""Tests for NRI county record retrieval against a mocked OpenFEMA API."""

import httpx
import pytest

from hazardrisk.clients.openfema import OpenFemaClient
from hazardrisk.errors import NO_RISK_DATA_MESSAGE, RISK_DATA_INVALID_MESSAGE, RiskDataError
from hazardrisk.models.hazard import HazardType
from hazardrisk.services.risk_data_fetcher import RiskDataFetcher


def _fetcher(handler) -> RiskDataFetcher:
    client = OpenFemaClient(
        base_url="https://fema.test",
        transport=httpx.MockTransport(handler),
    )
    return RiskDataFetcher(client)


class TestFetch:
    async def test_returns_parsed_record(self, nri_row):
        fetcher = _fetcher(lambda request: httpx.Response(200, json={"NriCountyData": [nri_row]}))

        record = await fetcher.fetch("06037")

        assert record.county == "Los Angeles"
        assert record.hazard(HazardType.EARTHQUAKE).risk_score == pytest.approx(42.3)
        assert record.risk_rating == "Very High"

    async def test_filters_exactly_one_county(self, nri_row):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"NriCountyData": [nri_row]})

        await _fetcher(handler).fetch("06037")

        params = seen[0].url.params
        assert params["$filter"] == "stateCode eq '06' and countyCode eq '037'"
        assert "ERQK_RISKS" in params["$select"].split(",")
        assert "RESL_RATNG" in params["$select"].split(",")

    async def test_first_record_wins(self, nri_row):
        other = dict(nri_row, county="Other")
        fetcher = _fetcher(lambda request: httpx.Response(200, json={"NriCountyData": [nri_row, other]}))

        record = await fetcher.fetch("06037")
        assert record.county == "Los Angeles"

    async def test_service_error_carries_status(self):
        fetcher = _fetcher(lambda request: httpx.Response(500))

        with pytest.raises(RiskDataError) as exc:
            await fetcher.fetch("06037")
        assert exc.value.status_code == 500
        assert exc.value.message == "FEMA API error: 500"

    async def test_transport_failure(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(RiskDataError) as exc:
            await _fetcher(handler).fetch("06037")
        assert exc.value.status_code is None

    async def test_non_json_body(self):
        fetcher = _fetcher(lambda request: httpx.Response(200, text="<html>maintenance</html>"))

        with pytest.raises(RiskDataError) as exc:
            await fetcher.fetch("06037")
        assert exc.value.message == RISK_DATA_INVALID_MESSAGE
        assert not exc.value.not_found

    async def test_no_records(self):
        fetcher = _fetcher(lambda request: httpx.Response(200, json={"NriCountyData": []}))

        with pytest.raises(RiskDataError) as exc:
            await fetcher.fetch("99999")
        assert exc.value.message == NO_RISK_DATA_MESSAGE
        assert exc.value.not_found
