from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.ai import router as ai_router
from src.adapters.api.controllers.booking import router as booking_router
from src.adapters.api.controllers.static_site import router as site_router
from src.adapters.api.controllers.tracking import router as tracking_router
from src.domain.exceptions import (
    BookingValidationError,
    InvalidTripPath,
    LocationUnavailable,
    NoActiveTrip,
    TripAutoTicking,
)

app = FastAPI(title="Arogya")
app.include_router(booking_router)
app.include_router(tracking_router)
app.include_router(ai_router)


@app.exception_handler(BookingValidationError)
@app.exception_handler(InvalidTripPath)
async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(NoActiveTrip)
async def no_trip_exception_handler(request: Request, exc: NoActiveTrip) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(TripAutoTicking)
async def auto_tick_exception_handler(
    request: Request, exc: TripAutoTicking
) -> JSONResponse:
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(LocationUnavailable)
async def location_exception_handler(
    request: Request, exc: LocationUnavailable
) -> JSONResponse:
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON so the booking page can show them."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("APP_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    if reveal or isinstance(exc, (FileNotFoundError, RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# Catch-all; must stay last.
app.include_router(site_router)
