from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from datetime import datetime, timezone

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hazardrisk.config import settings

logger = structlog.get_logger()

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("Starting NRI hazard lookup API", env=settings.app_env)
    for warning in settings.validate_production():
        logger.warning("Configuration warning", detail=warning)

    yield

    from hazardrisk.api.deps import close_clients
    await close_clients()
    logger.info("Shutting down NRI hazard lookup API")


def create_app() -> FastAPI:
    app = FastAPI(
        title="NRI Hazard Lookup API",
        description="ZIP code to county natural-hazard risk, from FEMA's National Risk Index.",
        version=VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    from hazardrisk.api.v1.router import api_router

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "version": VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "upstreams": {
                "geocoder": settings.census_geocoder_url,
                "nri": settings.openfema_url,
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hazardrisk.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_debug,
    )
