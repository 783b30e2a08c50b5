from dataclasses import dataclass


@dataclass(frozen=True)
class CountyLocation:
    """County resolved from a ZIP code by the geocoder."""

    fips: str  # 2-digit state + 3-digit county
    county_name: str
    state_name: str
    latitude: float | None = None
    longitude: float | None = None
    matched_address: str | None = None

    @property
    def state_fips(self) -> str:
        return self.fips[:2]

    @property
    def county_fips(self) -> str:
        return self.fips[2:5]
