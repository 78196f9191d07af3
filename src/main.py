from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.bus_stops import router as bus_stops_router
from src.adapters.api.controllers.location import router as location_router
from src.adapters.api.controllers.routes import router as routes_router
from src.domain.exceptions import NotFound, StorageUnavailable, TrackingError

app = FastAPI(title="BusTrack")
app.include_router(location_router)
app.include_router(routes_router)
app.include_router(bus_stops_router)


def _reveal_errors() -> bool:
    flag = os.getenv("BUSTRACK_REVEAL_ERRORS", "")
    return flag.strip().lower() in {"1", "true", "yes", "on"}


@app.exception_handler(TrackingError)
async def tracking_error_handler(request: Request, exc: TrackingError) -> JSONResponse:
    if isinstance(exc, StorageUnavailable):
        logging.getLogger("uvicorn.error").warning(
            "Storage unavailable", extra={"path": str(request.url.path)}
        )
        return JSONResponse(
            status_code=503,
            content={"detail": "Location storage temporarily unavailable"},
            headers={"Retry-After": "5"},
        )
    if isinstance(exc, NotFound):
        return JSONResponse(status_code=404, content={"detail": str(exc)})
    if isinstance(exc, ValueError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return await unhandled_exception_handler(request, exc)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort 500 with a `detail` body, the shape every other error uses.

    Configuration problems (RuntimeError from settings) are shown as-is;
    other messages only when BUSTRACK_REVEAL_ERRORS is set.
    """

    logging.getLogger("uvicorn.error").exception(
        "Request failed", extra={"path": str(request.url.path)}
    )

    if _reveal_errors() or isinstance(exc, RuntimeError):
        detail = str(exc) or type(exc).__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
