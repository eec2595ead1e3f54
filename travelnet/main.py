from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from travelnet.adapters.api.controllers.network import router as network_router
from travelnet.adapters.api.controllers.paths import router as paths_router
from travelnet.adapters.api.dependencies import build_network
from travelnet.domain.exceptions import GraphDataError, LocationNotFound


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Compose once per application; the path cache lives as long as the app.
    _, app.state.travel_network = build_network()
    yield


app = FastAPI(title="travelnet", lifespan=lifespan)
app.include_router(paths_router)
app.include_router(network_router)


@app.exception_handler(LocationNotFound)
async def location_not_found_handler(request: Request, exc: LocationNotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(GraphDataError)
async def graph_data_error_handler(request: Request, exc: GraphDataError) -> JSONResponse:
    logging.getLogger("uvicorn.error").warning(
        "Rejected location data: %s", exc, extra={"path": str(request.url.path)}
    )
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return unhandled errors as JSON instead of Starlette's plain-text 500."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("TRAVELNET_REVEAL_ERRORS") or "").strip().lower() in {
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
