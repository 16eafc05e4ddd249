from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.routes import directions, distance_matrix, places, roads
from api.schemas import ErrorOut
from core.config import settings
from core.errors import (
    InvalidCodeError,
    InvalidLatLngError,
    MapsApiError,
    MapsError,
    RetriesExhaustedError,
    ValidationError,
)
from core.logging_config import configure_logging

app = FastAPI(title="Maps Request Service", version="0.1.0")


@app.get("/health")
async def health():
    return {"status": "ok"}


def _status_code_for(exc: MapsError) -> int:
    if isinstance(exc, (ValidationError, InvalidCodeError, InvalidLatLngError)):
        return 422
    if isinstance(exc, MapsApiError):
        return 502
    if isinstance(exc, RetriesExhaustedError):
        return 503
    return 500


@app.exception_handler(MapsError)
async def maps_error_handler(request: Request, exc: MapsError):
    """Validation and decode errors are the caller's to fix; upstream failures are not."""
    body = ErrorOut(
        detail=str(exc),
        error=type(exc).__name__,
        values=getattr(exc, "values", None),
    )
    return JSONResponse(status_code=_status_code_for(exc), content=body.model_dump())


app.include_router(directions.router)
app.include_router(distance_matrix.router)
app.include_router(places.router)
app.include_router(roads.router)


@app.on_event("startup")
async def on_startup():
    configure_logging(settings.log_level)
