"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from polymorph import __version__
from polymorph.config import settings
from polymorph.errors import MorphingError
from polymorph.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.polymorph_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _morphing_error_handler(request: Request, exc: MorphingError) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    body = ErrorResponse(detail=str(exc), error=type(exc).__name__)
    return JSONResponse(status_code=422, content=body.model_dump())


def create_app() -> FastAPI:
    app = FastAPI(
        title="polymorph",
        description="Arc-length correspondence between 2D polylines",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(MorphingError, _morphing_error_handler)

    from polymorph.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
