from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field(alias="DATABASE_URL")

    # Quoting service, as seen from the policy side
    quoting_service_url: str = Field(
        default="http://localhost:8000/api/v1/quotations", alias="QUOTING_SERVICE_URL"
    )
    quoting_service_timeout: float = Field(default=10.0, alias="QUOTING_SERVICE_TIMEOUT")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Allowed CORS origin
    frontend_url: str | None = Field(default=None, alias="FRONTEND_URL")

    @field_validator("frontend_url", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: str | None) -> str | None:
        """Convert empty strings to None for optional string fields."""
        if v == "":
            return None
        return v

    @field_validator("quoting_service_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
