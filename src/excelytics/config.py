from functools import lru_cache
from typing import List

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Uploads
    max_upload_size_mb: PositiveInt = 10
    allowed_extensions: str = ".xlsx,.xls,.csv"

    # Analysis
    preview_rows: PositiveInt = 5
    data_quality_threshold: float = Field(default=90.0, ge=0, le=100)

    # cors
    allowed_origins: str = "http://localhost:3000"

    log_level: str | int = "INFO"

    @property
    def allowed_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    @property
    def allowed_extensions_list(self) -> List[str]:
        return [ext.strip().lower() for ext in self.allowed_extensions.split(",") if ext.strip()]

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    class Config:
        case_sensitive = False
        env_file = ".env"
        extra = 'ignore'


@lru_cache
def get_settings() -> Settings:
    return Settings()
