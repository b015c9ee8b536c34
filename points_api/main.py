# Purpose: Initializes the FastAPI application and defines API endpoints.
# Also the process entry point: load the dataset, then serve it.

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from . import config
from .cors import CORSMiddleware
from .data_loader import load_conversion_data
from .errors import PointsApiError
from .schemas import ConversionData, ErrorResponse, HealthStatus

# Set up a logger for this module
logger = logging.getLogger(__name__)

router = APIRouter(prefix=config.API_PREFIX)


# --- Conversion Data Endpoint ---
@router.get(
    "/conversions",
    response_model=ConversionData,
    responses={500: {"model": ErrorResponse}},
)
async def get_conversions(request: Request):
    """
    Returns the full conversions dataset exactly as it was loaded.
    """
    data: Optional[ConversionData] = getattr(request.app.state, "conversion_data", None)
    if data is None:
        # Startup refuses to serve without data, so this is a bug if hit.
        logger.error("GET /conversions called but no conversion data is loaded")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Conversion data not loaded").model_dump(),
        )

    return JSONResponse(content=data.to_response())


# --- Health Check Endpoint ---
@router.get("/health", status_code=200, response_model=HealthStatus)
async def health_check():
    """
    Simple health check to confirm the service is running.
    Liveness only; it does not look at the dataset.
    """
    return HealthStatus()


def create_app(conversion_data: Optional[ConversionData] = None) -> FastAPI:
    """
    Builds the API.

    If no dataset is passed in, it is loaded from disk during lifespan
    startup, which uvicorn runs before binding the listen socket.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "conversion_data", None) is None:
            app.state.conversion_data = load_conversion_data()
        yield

    app = FastAPI(
        title="Points Converter API",
        description="Read-only access to loyalty-points conversion ratios "
                    "for the points-converter.com frontend.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.conversion_data = conversion_data

    app.add_middleware(CORSMiddleware)
    app.include_router(router)
    return app


# Used by `uvicorn points_api.main:app`
app = create_app()


def run() -> None:
    """
    Console entry point. Any startup failure exits with status 1
    before a socket is bound.
    """
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        port = config.get_port()
        conversion_data = load_conversion_data()
    except PointsApiError as e:
        logger.critical(f"Failed to start: {e}")
        sys.exit(1)

    logger.info(f"Starting API server on port {port}")
    # proxy_headers=False: client address comes from the socket peer only
    uvicorn.run(
        create_app(conversion_data),
        host=config.HOST,
        port=port,
        proxy_headers=False,
        log_config=None,
    )


if __name__ == "__main__":
    run()
