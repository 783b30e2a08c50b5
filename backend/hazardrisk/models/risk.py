from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from hazardrisk.models.hazard import HazardType

# Per-hazard field suffixes: risk score/rating, expected-annual-loss score/rating
_HAZARD_FIELD_SUFFIXES = ("RISKS", "RISKR", "EALS", "EALR")

_COMPOSITE_FIELDS = [
    "RISK_SCORE", "RISK_RATNG",
    "EAL_SCORE", "EAL_RATNG",
    "SOVI_SCORE", "SOVI_RATNG",
    "RESL_SCORE", "RESL_RATNG",
]

# Field selection sent with every NRI county query
NRI_FIELDS: list[str] = [
    "county",
    "state",
    *(f"{h.code}_{suffix}" for h in HazardType for suffix in _HAZARD_FIELD_SUFFIXES),
    *_COMPOSITE_FIELDS,
    "stateCode",
    "countyCode",
]

MAX_SCORE = 100.0


def parse_score(value: Any) -> float | None:
    """
    Normalise a raw NRI score into the 0-100 range.

    Missing, non-numeric and negative values mean "no data" and become
    ``None``. Values above 100 are clamped.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        score = float(value)
    except (TypeError, ValueError):
        return None
    if score != score or score < 0:  # NaN or negative
        return None
    return min(score, MAX_SCORE)


def _parse_rating(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class HazardRisk:
    """NRI sub-scores for one hazard in one county."""

    risk_score: float | None = None
    risk_rating: str | None = None
    eal_score: float | None = None
    eal_rating: str | None = None

    @property
    def has_data(self) -> bool:
        return self.risk_score is not None


@dataclass(frozen=True)
class CountyRiskRecord:
    """One NRI county row: per-hazard scores plus county-wide composites."""

    county: str | None = None
    state: str | None = None
    state_code: str | None = None
    county_code: str | None = None
    hazards: Mapping[HazardType, HazardRisk] = field(default_factory=dict)

    risk_score: float | None = None
    risk_rating: str | None = None
    eal_score: float | None = None
    eal_rating: str | None = None
    sovi_score: float | None = None
    sovi_rating: str | None = None
    resl_score: float | None = None
    resl_rating: str | None = None

    def __post_init__(self):
        # read-only copy
        object.__setattr__(self, "hazards", MappingProxyType(dict(self.hazards)))

    def hazard(self, hazard: HazardType) -> HazardRisk:
        """Sub-scores for a hazard; an empty record when the row lacks it."""
        return self.hazards.get(hazard) or HazardRisk()

    @classmethod
    def from_api(cls, row: dict[str, Any]) -> "CountyRiskRecord":
        """Build a record from a raw ``NriCountyData`` row."""
        hazards = {
            h: HazardRisk(
                risk_score=parse_score(row.get(f"{h.code}_RISKS")),
                risk_rating=_parse_rating(row.get(f"{h.code}_RISKR")),
                eal_score=parse_score(row.get(f"{h.code}_EALS")),
                eal_rating=_parse_rating(row.get(f"{h.code}_EALR")),
            )
            for h in HazardType
        }
        return cls(
            county=_parse_rating(row.get("county")),
            state=_parse_rating(row.get("state")),
            state_code=_parse_rating(row.get("stateCode")),
            county_code=_parse_rating(row.get("countyCode")),
            hazards=hazards,
            risk_score=parse_score(row.get("RISK_SCORE")),
            risk_rating=_parse_rating(row.get("RISK_RATNG")),
            eal_score=parse_score(row.get("EAL_SCORE")),
            eal_rating=_parse_rating(row.get("EAL_RATNG")),
            sovi_score=parse_score(row.get("SOVI_SCORE")),
            sovi_rating=_parse_rating(row.get("SOVI_RATNG")),
            resl_score=parse_score(row.get("RESL_SCORE")),
            resl_rating=_parse_rating(row.get("RESL_RATNG")),
        )
