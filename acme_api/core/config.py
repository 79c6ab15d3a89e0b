from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field(alias="DATABASE_URL")

    # Prefix under which the API routers are mounted
    global_prefix: str = Field(default="/api", alias="GLOBAL_PREFIX")

    # Frontend URL allowed by CORS
    frontend_url: str | None = Field(default=None, alias="FRONTEND_URL")

    @field_validator("global_prefix", mode="before")
    @classmethod
    def normalize_prefix(cls, v: str | None) -> str:
        """Ensure the prefix starts with a slash and has no trailing slash."""
        if not v:
            return ""
        return "/" + v.strip("/")

    @field_validator("frontend_url", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: str | None) -> str | None:
        """Convert empty strings to None for optional string fields."""
        if v == "":
            return None
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
