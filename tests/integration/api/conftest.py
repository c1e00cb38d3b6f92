import pytest
from fastapi.testclient import TestClient

from capstone_catalog.backend.app.core.config import Settings
from capstone_catalog.backend.app.main import create_app


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    return Settings(
        SQLALCHEMY_DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        BLOB_STORAGE_BACKEND="filesystem",
        FILE_STORAGE_DIR=str(tmp_path / "files"),
        FILES_PUBLIC_BASE_URL="http://testserver/files",
        MAX_ATTACHMENT_BYTES=1024,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(api_settings):
    # entering the client runs the lifespan (engine, storage, feed)
    with TestClient(create_app(api_settings)) as c:
        yield c


@pytest.fixture
def form_data() -> dict[str, str]:
    return {
        "name": "Smart Irrigation",
        "description": "Soil moisture driven irrigation controller",
        "student_name": "Asha Rao",
        "department": "ECE",
        "guide": "Dr. Menon",
        "domain": "IoT",
        "passout_year": "2024",
    }
