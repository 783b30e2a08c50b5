"""
Display model for a finished lookup.

Applies the rating classifier and the probability estimator to every hazard
and to the overall county score, producing a plain structure the front end
can render without further logic.
"""

import math
from dataclasses import dataclass, field

from hazardrisk.models.hazard import HazardType
from hazardrisk.models.location import CountyLocation
from hazardrisk.models.risk import MAX_SCORE, CountyRiskRecord
from hazardrisk.services.probability import ProbabilityDescriptor, estimate
from hazardrisk.services.rating import RatingBand, classify


def display_score(score: float | None) -> int | None:
    """Round half up for gauges (42.5 -> 43)."""
    if score is None or score < 0:
        return None
    return int(math.floor(score + 0.5))


def gauge_fraction(score: float | None) -> float:
    """Share of the gauge arc to fill, 0.0 when there is no data."""
    if score is None or score < 0:
        return 0.0
    return min(score, MAX_SCORE) / MAX_SCORE


@dataclass(frozen=True)
class ComponentScore:
    label: str
    score: float | None
    rating: str | None
    display_score: int | None


@dataclass(frozen=True)
class HazardSummary:
    hazard: HazardType
    code: str
    label: str
    icon: str
    color: str
    description: str
    risk_score: float | None
    risk_rating: str | None
    eal_score: float | None
    eal_rating: str | None
    band: RatingBand
    probability: ProbabilityDescriptor
    has_data: bool
    display_score: int | None
    gauge_fraction: float


@dataclass(frozen=True)
class OverallSummary:
    score: float | None
    rating: str
    band: RatingBand
    probability: ProbabilityDescriptor
    display_score: int | None
    gauge_fraction: float
    components: list[ComponentScore] = field(default_factory=list)


@dataclass(frozen=True)
class RiskReport:
    zip_code: str
    fips: str
    location_name: str
    location: CountyLocation
    overall: OverallSummary
    hazards: list[HazardSummary]


def _summarize_hazard(hazard: HazardType, record: CountyRiskRecord) -> HazardSummary:
    risk = record.hazard(hazard)
    info = hazard.info
    return HazardSummary(
        hazard=hazard,
        code=info.code,
        label=info.label,
        icon=info.icon,
        color=info.color,
        description=info.description,
        risk_score=risk.risk_score,
        risk_rating=risk.risk_rating,
        eal_score=risk.eal_score,
        eal_rating=risk.eal_rating,
        band=classify(risk.risk_score),
        probability=estimate(risk.risk_score),
        has_data=risk.has_data,
        display_score=display_score(risk.risk_score),
        gauge_fraction=gauge_fraction(risk.risk_score),
    )


def _summarize_overall(record: CountyRiskRecord) -> OverallSummary:
    band = classify(record.risk_score)
    components = [
        ComponentScore("Expected Loss", record.eal_score, record.eal_rating, display_score(record.eal_score)),
        ComponentScore("Social Vulnerability", record.sovi_score, record.sovi_rating, display_score(record.sovi_score)),
        ComponentScore("Community Resilience", record.resl_score, record.resl_rating, display_score(record.resl_score)),
    ]
    return OverallSummary(
        score=record.risk_score,
        rating=record.risk_rating or band.label,
        band=band,
        probability=estimate(record.risk_score),
        display_score=display_score(record.risk_score),
        gauge_fraction=gauge_fraction(record.risk_score),
        components=components,
    )


def build_risk_report(zip_code: str, location: CountyLocation, record: CountyRiskRecord) -> RiskReport:
    county = record.county or location.county_name
    state = record.state or location.state_name
    return RiskReport(
        zip_code=zip_code,
        fips=location.fips,
        location_name=f"{county}, {state}",
        location=location,
        overall=_summarize_overall(record),
        hazards=[_summarize_hazard(h, record) for h in HazardType],
    )
