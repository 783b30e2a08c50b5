"""Test configuration and fixtures."""

import copy

import pytest

from hazardrisk.errors import LocationResolutionError, NO_LOCATION_MESSAGE
from hazardrisk.models.location import CountyLocation
from hazardrisk.models.risk import CountyRiskRecord

GEOCODER_PAYLOAD = {
    "result": {
        "input": {"address": {"address": "90210"}},
        "addressMatches": [
            {
                "matchedAddress": "BEVERLY HILLS, CA, 90210",
                "coordinates": {"x": -118.4065, "y": 34.0901},
                "addressComponents": {"city": "BEVERLY HILLS", "state": "CA", "zip": "90210"},
                "geographies": {
                    "Counties": [
                        {"STATE": "06", "COUNTY": "037", "NAME": "Los Angeles County", "GEOID": "06037"}
                    ]
                },
            }
        ],
    }
}

NRI_ROW = {
    "county": "Los Angeles",
    "state": "California",
    "stateCode": "06",
    "countyCode": "037",
    "ERQK_RISKS": 42.3,
    "ERQK_RISKR": "Relatively Moderate",
    "ERQK_EALS": 99.9,
    "ERQK_EALR": "Very High",
    "HRCN_RISKS": 3.1,
    "HRCN_RISKR": "Very Low",
    "HRCN_EALS": 4.0,
    "HRCN_EALR": "Very Low",
    "TRND_RISKS": 55.0,
    "TRND_RISKR": "Relatively High",
    "TRND_EALS": 50.2,
    "TRND_EALR": "Relatively High",
    "RFLD_RISKS": 88.0,
    "RFLD_RISKR": "Very High",
    "RFLD_EALS": 91.5,
    "RFLD_EALR": "Very High",
    "WFIR_RISKS": None,
    "WFIR_RISKR": "No Rating",
    "WFIR_EALS": None,
    "WFIR_EALR": None,
    "RISK_SCORE": 99.97,
    "RISK_RATNG": "Very High",
    "EAL_SCORE": 100,
    "EAL_RATNG": "Very High",
    "SOVI_SCORE": 80.1,
    "SOVI_RATNG": "Relatively High",
    "RESL_SCORE": 61.2,
    "RESL_RATNG": "Relatively Moderate",
}


@pytest.fixture
def geocoder_payload():
    return copy.deepcopy(GEOCODER_PAYLOAD)


@pytest.fixture
def nri_row():
    return dict(NRI_ROW)


@pytest.fixture
def la_location():
    return CountyLocation(
        fips="06037",
        county_name="Los Angeles County",
        state_name="CA",
        latitude=34.0901,
        longitude=-118.4065,
        matched_address="BEVERLY HILLS, CA, 90210",
    )


@pytest.fixture
def la_record():
    return CountyRiskRecord.from_api(NRI_ROW)


class StubResolver:
    """Stands in for LocationResolver; returns a fixed location or raises."""

    def __init__(self, location=None, error=None):
        self.location = location
        self.error = error
        self.calls: list[str] = []
        self.closed = False

    async def resolve(self, zip_code):
        self.calls.append(zip_code)
        if self.error is not None:
            raise self.error
        return self.location

    async def close(self):
        self.closed = True


class StubFetcher:
    """Stands in for RiskDataFetcher; returns a fixed record or raises."""

    def __init__(self, record=None, error=None):
        self.record = record
        self.error = error
        self.calls: list[str] = []
        self.closed = False

    async def fetch(self, fips):
        self.calls.append(fips)
        if self.error is not None:
            raise self.error
        return self.record

    async def close(self):
        self.closed = True


@pytest.fixture
def resolver(la_location):
    return StubResolver(location=la_location)


@pytest.fixture
def fetcher(la_record):
    return StubFetcher(record=la_record)


@pytest.fixture
def no_match_resolver():
    return StubResolver(error=LocationResolutionError(NO_LOCATION_MESSAGE, not_found=True))


@pytest.fixture
def stub_resolver():
    """The StubResolver class, for tests that need a custom resolver."""
    return StubResolver


@pytest.fixture
def stub_fetcher():
    """The StubFetcher class, for tests that need a custom fetcher."""
    return StubFetcher
