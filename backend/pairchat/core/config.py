from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    debug: bool = Field(default=False)
    api_prefix: str = Field(default="/api")
    project_name: str = Field(default="Pairchat Matchmaking Service")
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=3001, validation_alias="PORT")
    client_url: str = Field(default="http://localhost:5173", validation_alias="CLIENT_URL")
    cors_allow_methods: list[str] = Field(default_factory=lambda: ["GET", "POST"])
    cors_allow_headers: list[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = Field(default=True)
    websocket_ping_interval: int = Field(default=20)
    socketio_path: str = Field(default="/socket.io")
    translation_api_url: str = Field(
        default="http://localhost:5000/translate",
        validation_alias="TRANSLATION_API_URL",
    )
    translation_api_key: str | None = Field(default=None, validation_alias="TRANSLATION_API_KEY")
    translation_timeout_seconds: float = Field(default=5.0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_allow_origins(self) -> list[str]:
        origins = [origin.strip() for origin in self.client_url.split(",")]
        return [origin for origin in origins if origin]


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings: Annotated[Settings, "Application settings"] = get_settings()
