from fastapi import APIRouter

from hazardrisk.services.methodology import (
    get_methodology,
    hazard_catalog,
    probability_table,
    rating_table,
)

router = APIRouter()


@router.get("/methodology")
async def read_methodology():
    return get_methodology()


@router.get("/hazards")
async def list_hazards():
    """Hazard metadata plus the rating and probability band tables."""
    return {
        "hazards": hazard_catalog(),
        "rating_bands": rating_table(),
        "probability_bands": probability_table(),
    }
