from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', case_sensitive=True, extra='ignore')
    SQLALCHEMY_DATABASE_URL: str = 'sqlite+aiosqlite:///./capstone_catalog.db'
    SQLALCHEMY_ECHO: bool = False

    BLOB_STORAGE_BACKEND: Literal['filesystem', 'supabase'] = 'filesystem'
    FILE_STORAGE_DIR: str = './storage/project-files'
    FILES_PUBLIC_BASE_URL: str = 'http://localhost:8000/files'

    SUPABASE_URL: str = ''
    SUPABASE_SERVICE_KEY: str = ''
    SUPABASE_BUCKET: str = 'project-files'

    MAX_ATTACHMENT_BYTES: int = 10 * 1024 * 1024

    LOG_LEVEL: str = 'INFO'
    LOG_FILE: Optional[str] = None


settings = Settings()
