from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.router import api_router
from app.core.config import Settings, settings as default_settings
from app.core.exceptions import ValidationError
from app.core.logging import configure_logging, get_logger
from app.db.init_db import init_db
from app.db.session import build_engine, build_session_factory
from app.web.frontend import build_dev_client, mount_frontend

logger = get_logger("main")


async def http_exception_handler(request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# Body and path failures become 400 with a fixed message
async def validation_exception_handler(request, exc: RequestValidationError):
    if any(err.get("loc") and err["loc"][0] == "path" for err in exc.errors()):
        error = ValidationError("Invalid department id")
    else:
        error = ValidationError()

    return await http_exception_handler(request, error)


def create_app(settings: Settings = default_settings) -> FastAPI:

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(app.state.engine)
        logger.info(
            "Starting in %s mode, database %s",
            "production" if settings.is_production else "development",
            app.state.engine.url.render_as_string(hide_password=True),
        )
        if not settings.is_production:
            app.state.dev_client = build_dev_client(settings)
        try:
            yield
        finally:
            if not settings.is_production:
                await app.state.dev_client.aclose()
            app.state.engine.dispose()

    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Hospital Departments API", lifespan=lifespan)

    engine = build_engine(settings.DATABASE_URL)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(api_router)

    # catch-all, must come after the API routes
    mount_frontend(app, settings)

    return app


app = create_app()
