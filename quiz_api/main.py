import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from .core.config import Settings, settings as default_settings
from .core.cors import setup_cors
from .core.database import create_store
from .core.log_config import setup_logging
from .core.schema import init_schema
from .api.responses import failure
from .api.routers import questions as questions_router
from .api.routers import quizzes as quizzes_router

logger = logging.getLogger(__name__)


def _describe(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    store = create_store(settings)
    if settings.DB_CREATE_SCHEMA:
        init_schema(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        store.close()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store
    setup_cors(app, settings)

    @app.exception_handler(RequestValidationError)
    async def invalid_input(request: Request, exc: RequestValidationError):
        detail = _describe(exc)
        logger.warning("invalid input on %s: %s", request.url.path, detail)
        return failure(status.HTTP_400_BAD_REQUEST, explaination=f"Invalid Input: {detail}")

    app.include_router(quizzes_router.router, prefix=settings.API_PREFIX)
    app.include_router(questions_router.router, prefix=settings.API_PREFIX)

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    logger.info("%s started (env=%s)", settings.APP_NAME, settings.APP_ENV)
    return app
