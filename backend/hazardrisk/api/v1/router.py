from fastapi import APIRouter

from hazardrisk.api.v1 import methodology, risk

api_router = APIRouter()

api_router.include_router(risk.router, prefix="/risk", tags=["risk"])
api_router.include_router(methodology.router, tags=["methodology"])
