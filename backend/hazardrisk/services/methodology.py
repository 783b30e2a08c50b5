"""Static content for the methodology view."""

from typing import Any

from hazardrisk.models.hazard import HazardType
from hazardrisk.services.probability import HIGHEST_PROBABILITY, PROBABILITY_BANDS
from hazardrisk.services.rating import RISK_RATINGS

RISK_FORMULA = "Risk = EAL × (Social Vulnerability / Community Resilience)"

OVERVIEW = (
    "This tool uses FEMA's National Risk Index (NRI) to assess natural disaster risk "
    "for any US location. The NRI is a peer-reviewed, publicly available dataset "
    "developed by FEMA in collaboration with academia, government agencies, and the "
    "private sector."
)

LOCATION_RESOLUTION = (
    "When you enter a ZIP code, the US Census Bureau Geocoder identifies the county "
    "associated with that ZIP code. Risk data is then retrieved at the county level "
    "from FEMA's NRI dataset. Risk can vary within a county; this provides a "
    "county-level baseline assessment."
)

RISK_COMPONENTS = [
    {
        "name": "Expected Annual Loss (EAL)",
        "description": (
            "The average dollar amount of damage expected per year, derived from "
            "historical loss data, hazard frequency, and exposure analysis."
        ),
    },
    {
        "name": "Social Vulnerability",
        "description": (
            "A measure of how susceptible the community is to adverse impacts, based on "
            "demographics, socioeconomic factors, and household characteristics."
        ),
    },
    {
        "name": "Community Resilience",
        "description": (
            "How well the community can recover, based on infrastructure, civic capacity, "
            "institutional resources, and economic factors."
        ),
    },
]

PROBABILITY_NOTE = (
    "The annual probability estimates shown are approximate ranges derived from NRI "
    "risk scores. NRI scores are relative indices, not direct probabilities. Score "
    "ranges are mapped to approximate probability bands based on FEMA's underlying "
    "frequency and exposure data. They indicate the relative likelihood of "
    "experiencing a significant event in a given year, not an exact probability."
)

PLANNING_DISCLAIMER = (
    "These estimates should not be used as the sole basis for insurance, real estate, "
    "or emergency planning decisions. Consult local emergency management officials and "
    "insurance professionals for site-specific risk assessments."
)

DATA_SOURCES = [
    {"name": "FEMA National Risk Index v1.20", "role": "Primary risk dataset"},
    {"name": "US Census Bureau Geocoder", "role": "ZIP code to county resolution"},
    {"name": "USGS", "role": "Seismic hazard, wildfire, landslide, and volcanic data"},
    {"name": "NOAA", "role": "Hurricane, tornado, and severe weather historical data"},
    {"name": "Hazus", "role": "FEMA's loss estimation tool for earthquakes, hurricanes, and floods"},
]

LIMITATIONS = [
    "Data is resolved at the county level; risk may vary significantly within a county.",
    "NRI scores are relative indices comparing US counties to each other, not absolute probability measures.",
    "The model reflects historical patterns and may not fully account for climate change impacts on future risk.",
    "Some hazards may have limited data in certain regions.",
    "This tool is for educational purposes and general awareness only.",
]

ATTRIBUTION = (
    "Data source: FEMA National Risk Index v1.20 via OpenFEMA API. This product uses "
    "the Federal Emergency Management Agency's OpenFEMA API, but is not endorsed by FEMA."
)


def hazard_catalog() -> list[dict[str, Any]]:
    return [
        {
            "id": h.value,
            "code": h.info.code,
            "label": h.info.label,
            "icon": h.info.icon,
            "color": h.info.color,
            "description": h.info.description,
            "methodology": h.info.methodology,
        }
        for h in HazardType
    ]


def rating_table() -> list[dict[str, Any]]:
    return [
        {"label": b.label, "max_score": b.max_score, "color": b.color, "bg": b.bg}
        for b in RISK_RATINGS
    ]


def probability_table() -> list[dict[str, Any]]:
    rows = [
        {
            "max_score": band.max_score,
            "text": band.descriptor.text,
            "detail": band.descriptor.detail,
            "odds": band.descriptor.odds,
        }
        for band in PROBABILITY_BANDS
    ]
    rows.append({
        "max_score": None,
        "text": HIGHEST_PROBABILITY.text,
        "detail": HIGHEST_PROBABILITY.detail,
        "odds": HIGHEST_PROBABILITY.odds,
    })
    return rows


def get_methodology() -> dict[str, Any]:
    """Everything the methodology view displays."""
    return {
        "overview": OVERVIEW,
        "location_resolution": LOCATION_RESOLUTION,
        "risk_formula": RISK_FORMULA,
        "risk_components": RISK_COMPONENTS,
        "probability_note": PROBABILITY_NOTE,
        "planning_disclaimer": PLANNING_DISCLAIMER,
        "hazards": [
            {"id": h["id"], "label": h["label"], "icon": h["icon"], "methodology": h["methodology"]}
            for h in hazard_catalog()
        ],
        "data_sources": DATA_SOURCES,
        "limitations": LIMITATIONS,
        "attribution": ATTRIBUTION,
    }
