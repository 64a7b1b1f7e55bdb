from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from matches_api.core.config import Settings, get_settings
from matches_api.routers import matches as matches_router
from matches_api.services.persistence import open_match_store

INVALID_ID = "Invalid match id"


def _is_int(value: object) -> bool:
    try:
        int(str(value))
    except ValueError:
        return False
    return True


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Malformed ids and bodies are client errors (400), not FastAPI's default 422.

    A bad id wins over a bad body: FastAPI reports an unparseable JSON body on
    its own, without the path error, so the raw id is checked here as well.
    """
    errors = exc.errors()
    if not _is_int(request.path_params.get("match_id", "0")) or any(
        tuple(err.get("loc", ()))[:1] == ("path",) for err in errors
    ):
        return JSONResponse({"detail": INVALID_ID}, status_code=400)
    return JSONResponse({"detail": jsonable_encoder(errors)}, status_code=400)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatible with uvicorn (``--factory``) and the tests."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store, writer = open_match_store(settings)
        app.state.match_store = store
        app.state.snapshot_writer = writer
        try:
            yield
        finally:
            if writer is not None:
                writer.close()

    app = FastAPI(title="Match Tracker API", lifespan=lifespan)
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _validation_error)

    app.include_router(matches_router.router)
    # legacy /api prefix used by existing front-ends
    app.include_router(matches_router.router, prefix="/api", include_in_schema=False)
    return app


app = create_app()
