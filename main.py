from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import greetings
from config.settings import Settings, get_settings, settings
from config.log_config import configure_logging
from utils.errors import register_exception_handlers


logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings

    # OpenAPI/docs routes are only served in development.
    docs_enabled = app_settings.ENVIRONMENT == "development"

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="Greeting resource with a HATEOAS self link.",
        version="0.1.0",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.dependency_overrides[get_settings] = lambda: app_settings

    if app_settings.CORS_ALLOWED_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.CORS_ALLOWED_ORIGINS,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    # -------------------------------------------------------------------------
    # Routers to public RESTful resources
    # -------------------------------------------------------------------------
    app.include_router(router=greetings.router)

    return app


app = create_app()


# -----------------------------------------------------------------------------
# Entrypoint for `python main.py`
# -----------------------------------------------------------------------------
def run() -> None:
    import uvicorn

    configure_logging(settings.LOG_LEVEL)
    logger.info("Starting %s on %s:%d", settings.APP_NAME, settings.HOST, settings.PORT)
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
    )


if __name__ == "__main__":
    run()
