from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Inventario"

    # Database (DATABASE_URL wins over the POSTGRES_* parts when set)
    DATABASE_URL: Optional[str] = None
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "inventario"

    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0
    REDIS_MAX_CONNECTIONS: int = 50
    REDIS_ENABLED: bool = True
    CACHE_TTL: int = 86400

    LOG_LEVEL: str = "INFO"
    BARCODE_LOG_LEVEL: str = "INFO"

    # Cost codec / barcode generator, fixed for the lifetime of the process
    COST_TABLE: Literal["A", "B"] = "B"
    BARCODE_LAYOUT: Literal["A", "B"] = "B"
    BARCODE_MAX_ATTEMPTS: int = Field(10, ge=1)

    class Config:
        env_file = ".env"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

settings = Settings()
