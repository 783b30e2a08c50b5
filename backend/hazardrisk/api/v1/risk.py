from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from hazardrisk.api.deps import get_orchestrator
from hazardrisk.errors import (
    InputValidationError,
    LocationResolutionError,
    RiskDataError,
    RiskLookupError,
)
from hazardrisk.services.lookup_orchestrator import RiskLookupOrchestrator
from hazardrisk.services.risk_report import build_risk_report

router = APIRouter()


class ErrorResponse(BaseModel):
    detail: str
    error: str


_ERROR_RESPONSES = {
    status: {"model": ErrorResponse}
    for status in (404, 422, 500, 502)
}


@router.get("/{zip_code}", responses=_ERROR_RESPONSES)
async def get_zip_risk(
    zip_code: str,
    orchestrator: RiskLookupOrchestrator = Depends(get_orchestrator),
):
    """Resolve a ZIP code to its county and return the county's hazard risk report."""
    session = await orchestrator.submit(zip_code)
    if session.failed:
        return _error_response(session.error)
    return build_risk_report(session.zip_code, session.location, session.record)


def _error_response(error: RiskLookupError) -> JSONResponse:
    body = ErrorResponse(detail=error.message, error=type(error).__name__)
    return JSONResponse(status_code=_status_for(error), content=body.model_dump())


def _status_for(error: RiskLookupError) -> int:
    if isinstance(error, InputValidationError):
        return 422
    if error.not_found:
        return 404
    if isinstance(error, (LocationResolutionError, RiskDataError)):
        return 502
    return 500
