import json
from typing import Annotated, List, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.platform.constant.path import BASE_DIR


_ENV_PATH = BASE_DIR / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (BASE_DIR / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'EcoFinds Marketplace'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    SERVICE_NAME: str = 'ecofinds-service'
    DEPLOY_ENV: str = 'local_dev'

    # Logging
    LOG_JSON: bool = False  # One JSON object per line on stdout

    # Tracing
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None
    OTEL_CONSOLE_EXPORT: bool = False
    TRACE_SAMPLE_RATIO: float = 1.0

    # Database
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'ecofinds'
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[str] = None  # Full override, e.g. sqlite+aiosqlite:///./test.db

    # Connection pool (ignored for sqlite)
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    @property
    def IS_SQLITE(self) -> bool:
        return self.DATABASE_URL_ASYNC.startswith('sqlite')

    # Security
    SECRET_KEY: SecretStr = SecretStr('ecofinds_secret_key_change_in_production')
    ALGORITHM: str = 'HS256'
    ACCESS_TOKEN_EXPIRE_HOURS: int = 24
    AUTH_COOKIE_NAME: str = 'ecofinds_auth'
    BCRYPT_ROUNDS: int = 10

    # CORS
    # Comma-separated string or JSON list
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = ['http://localhost:3000']

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.strip().startswith('['):
            return json.loads(v)
        if isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        return list(v)

    # Catalog paging
    DEFAULT_PAGE_SIZE: int = 12
    MAX_PAGE_SIZE: int = 100

    # Images, served back at /uploads
    UPLOAD_DIR: str = str(BASE_DIR / 'uploads')
    MAX_UPLOAD_SIZE_MB: int = 5
    IMAGE_DOWNLOAD_TIMEOUT: float = 10.0  # Seconds per remote image fetch


settings = Settings()  # type: ignore
