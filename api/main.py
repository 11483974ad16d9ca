import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from contact_info import router as contact_info_router
from contact_submissions import router as contact_submissions_router
from core import config
from core.db import Database
from core.errors import STORE_ERRORS, NotFoundError
from core.log import configure_logging
from education import router as education_router
from experience import router as experience_router
from projects import router as projects_router
from skills import router as skills_router

logger = logging.getLogger(__name__)


def create_app(database: Database | None = None) -> FastAPI:
    """
    Build the API. `database` defaults to one configured from the environment
    when the app starts; it is opened on startup and closed on shutdown.
    """
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database or Database.from_env()
        await db.connect()
        try:
            if config.apply_schema_on_startup():
                await db.apply_schema()
            app.state.db = db
            yield
        finally:
            app.state.db = None
            await db.close()

    app = FastAPI(title="Portfolio API", lifespan=lifespan)

    # Allow the frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(contact_info_router.router, tags=["contact-info"])
    app.include_router(skills_router.router, tags=["skills"])
    app.include_router(experience_router.router, tags=["experience"])
    app.include_router(projects_router.router, tags=["projects"])
    app.include_router(education_router.router, tags=["education"])
    app.include_router(contact_submissions_router.router, tags=["contact-submissions"])

    register_error_handlers(app)

    @app.get("/healthcheck")
    def healthcheck() -> dict:
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    return app


def register_error_handlers(app: FastAPI) -> None:
    async def not_found(_: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    async def store_unavailable(request: Request, exc: Exception) -> JSONResponse:
        # The failing statement was already logged by core.db.
        logger.error("Store error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=503, content={"detail": "Database unavailable."})

    app.add_exception_handler(NotFoundError, not_found)
    for exc_type in STORE_ERRORS:
        app.add_exception_handler(exc_type, store_unavailable)


app = create_app()
