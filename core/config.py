from __future__ import annotations
import os
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Base .env load first
load_dotenv()

class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # ignore unknown env keys to avoid crashes
    )

    # Environment
    environment: Literal["development", "staging", "production", "test"] = Field(default="development")
    log_level: str = Field(default="INFO")
    app_port: int = Field(default=8501, ge=1, le=65535)

    # Paths
    data_dir: Path = Field(default=Path(os.getenv("DATA_DIR", "data")))
    logs_dir: Path = Field(default=Path(os.getenv("LOGS_DIR", "data/output")))
    log_file: Path | None = None
    sample_data_file: Path | None = None

    # Revenue API
    revenue_source: Literal["api", "file"] = Field(default="file")
    api_base_url: str | None = Field(default=os.getenv("API_BASE_URL"))
    api_timeout_s: float = Field(default=10.0, gt=0)

    # Display
    currency: str = Field(default="USD")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = str(value).upper() if value else "INFO"
        allowed = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}
        if level not in allowed:
            # Fallback to INFO instead of raising to avoid boot failure
            return "INFO"
        return level

    @field_validator("api_base_url", mode="before")
    @classmethod
    def _strip_base_url(cls, value: str | None) -> str | None:
        if value is None:
            return None
        s = str(value).strip().rstrip("/")
        return s or None

    @model_validator(mode="after")
    def _derive_paths_and_ensure_dirs(self) -> "AppConfig":
        # Layered environment loading: .env.<ENVIRONMENT> overrides base
        env_file_variant = Path(f".env.{self.environment}")
        if env_file_variant.exists():
            load_dotenv(dotenv_path=env_file_variant, override=True)
            self.api_base_url = self._strip_base_url(os.getenv("API_BASE_URL", self.api_base_url))
            self.revenue_source = os.getenv("REVENUE_SOURCE", self.revenue_source)

        if self.log_file is None:
            self.log_file = self.logs_dir / "app.log"
        if self.sample_data_file is None:
            self.sample_data_file = self.data_dir / "sample_revenue.json"

        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)
        return self

config = AppConfig()
