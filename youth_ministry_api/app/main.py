"""
Main entrypoint for the Youth Ministry API.

``create_app`` assembles the FastAPI application: logging, the
in‑memory store, the validation error handler and the versioned
routers.  A default instance is created at import time as ``app`` so it
can be served directly, e.g.::

    uvicorn youth_ministry_api.app.main:app --reload
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import DataStore, build_store


def _flatten_errors(errors: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Group validation errors by field.

    Errors on a body or query field are collected under ``fieldErrors``
    keyed by the field's JSON name; anything else (e.g. a body that is
    not an object) goes to ``formErrors``.
    """
    field_errors: Dict[str, List[str]] = {}
    form_errors: List[str] = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in {"body", "query", "path"}:
            field_errors.setdefault(".".join(loc[1:]), []).append(error.get("msg", "Invalid value"))
        else:
            form_errors.append(error.get("msg", "Invalid request"))
    return {"fieldErrors": field_errors, "formErrors": form_errors}


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logging.getLogger(__name__).info("Rejected %s %s: invalid payload", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request payload", **_flatten_errors(exc.errors())},
    )


def create_app(store: Optional[DataStore] = None, cors_origins: Optional[List[str]] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[DataStore]
        Store the application serves.  When omitted a new one is built,
        seeded with demo data if ``settings.seed_demo_data`` is set.
    cors_origins : Optional[List[str]]
        Browser origins allowed to call the API.  Defaults to
        ``settings.cors_origin_list``.

    Returns
    -------
    FastAPI
        A configured application instance.
    """
    # Logging first so store seeding can log.
    setup_logging()

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store if store is not None else build_store(seed=settings.seed_demo_data)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # The browser dashboard is served from a different origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins if cors_origins is not None else settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["health"])
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()
