import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from capstone_catalog.backend.app.api.v1.router import api_router
from capstone_catalog.backend.app.application.common.in_flight import InFlightGuard
from capstone_catalog.backend.app.core import Settings, settings as default_settings, setup_logging
from capstone_catalog.backend.app.core.deps import build_blob_storage, build_project_feed
from capstone_catalog.backend.app.exception_handlers import register_exception_handlers
from capstone_catalog.backend.app.infrastructure.db import create_engine, create_session_factory, init_db

logger = logging.getLogger(__name__)

FILES_MOUNT_PATH = "/files"


def create_app(settings: Optional[Settings] = None):
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
        engine = create_engine(settings.SQLALCHEMY_DATABASE_URL, echo=settings.SQLALCHEMY_ECHO)
        await init_db(engine)
        session_factory = create_session_factory(engine)

        app.state.settings = settings
        app.state.session_factory = session_factory
        app.state.blob_storage = build_blob_storage(settings)
        app.state.project_feed = build_project_feed(session_factory)
        app.state.in_flight_guard = InFlightGuard()
        logger.info("Catalog API ready (blob storage: %s)", settings.BLOB_STORAGE_BACKEND)
        try:
            yield
        finally:
            await app.state.blob_storage.aclose()
            await engine.dispose()

    app = FastAPI(title="Capstone Catalog", lifespan=lifespan)
    app.include_router(api_router, prefix="/api/v1")

    if settings.BLOB_STORAGE_BACKEND == "filesystem":
        files_dir = Path(settings.FILE_STORAGE_DIR)
        files_dir.mkdir(parents=True, exist_ok=True)
        app.mount(FILES_MOUNT_PATH, StaticFiles(directory=files_dir), name="files")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    register_exception_handlers(app)
    return app


app = create_app()
