from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class HazardInfo:
    """Fixed descriptive metadata for one hazard type."""

    code: str
    label: str
    icon: str
    color: str
    description: str
    methodology: str


class HazardType(str, Enum):
    EARTHQUAKE = "earthquake"
    HURRICANE = "hurricane"
    TORNADO = "tornado"
    FLOOD = "flood"
    WILDFIRE = "wildfire"

    @property
    def info(self) -> HazardInfo:
        return HAZARD_INFO[self]

    @property
    def code(self) -> str:
        """NRI field prefix, e.g. ``ERQK``."""
        return HAZARD_INFO[self].code

    @property
    def label(self) -> str:
        return HAZARD_INFO[self].label


HAZARD_INFO: dict[HazardType, HazardInfo] = {
    HazardType.EARTHQUAKE: HazardInfo(
        code="ERQK",
        label="Earthquake",
        icon="🌍",
        color="#b08d57",
        description="Sudden ground shaking caused by seismic waves from tectonic plate movement.",
        methodology=(
            "Based on USGS probabilistic seismic hazard data integrated into FEMA's NRI. "
            "Uses Hazus earthquake loss estimation methodology to model expected annual "
            "losses from ground shaking, liquefaction, and landslide."
        ),
    ),
    HazardType.HURRICANE: HazardInfo(
        code="HRCN",
        label="Hurricane",
        icon="🌀",
        color="#5b8fa8",
        description=(
            "Tropical cyclones with sustained winds of 74+ mph causing wind damage, "
            "storm surge, and flooding."
        ),
        methodology=(
            "Uses NOAA/NHC historical hurricane track data and Hazus hurricane wind model. "
            "Accounts for wind speed probability, storm surge, and rainfall-induced flooding "
            "over a multi-decade historical period."
        ),
    ),
    HazardType.TORNADO: HazardInfo(
        code="TRND",
        label="Tornado",
        icon="🌪️",
        color="#7d6b91",
        description="Violently rotating columns of air extending from thunderstorms to the ground.",
        methodology=(
            "Based on NOAA Storm Prediction Center historical tornado data. Uses spatial "
            "smoothing of tornado touchdown locations weighted by Enhanced Fujita scale "
            "intensity ratings."
        ),
    ),
    HazardType.FLOOD: HazardInfo(
        code="RFLD",
        label="Flooding",
        icon="🌊",
        color="#4a8c7f",
        description=(
            "Inland flooding from rivers, streams, and heavy rainfall overwhelming "
            "drainage systems."
        ),
        methodology=(
            "Combines FEMA National Flood Hazard Layer (NFHL) data with USGS streamflow "
            "records and historical flood loss data. Includes both riverine (fluvial) and "
            "rainfall (pluvial) flooding."
        ),
    ),
    HazardType.WILDFIRE: HazardInfo(
        code="WFIR",
        label="Wildfire",
        icon="🔥",
        color="#c27a5a",
        description=(
            "Uncontrolled fires in wildland-urban interface areas fueled by vegetation "
            "and weather conditions."
        ),
        methodology=(
            "Uses USGS wildfire burn probability data and historical wildfire perimeter "
            "records. Accounts for wildland-urban interface exposure, vegetation fuel "
            "loads, and fire weather climatology."
        ),
    ),
}
