from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__
from .domain.entities.event_defaults import EventDefaults

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_ENV_PATH, env_file_encoding="utf-8", extra="ignore")

    EVENTS_PLATFORM: str = "python"
    EVENTS_SDK_NAME: str = "error-events"
    EVENTS_SDK_VERSION: str = __version__

    EVENTS_RELEASE: str | None = None
    EVENTS_ENVIRONMENT: str | None = None
    EVENTS_SERVER_NAME: str | None = None

    EVENTS_STORE_PATH: str = "./logs/events.json"
    EVENTS_LOG_LEVEL: str = "WARNING"

    def event_defaults(self) -> EventDefaults:
        return EventDefaults(
            platform=self.EVENTS_PLATFORM,
            sdk_name=self.EVENTS_SDK_NAME,
            sdk_version=self.EVENTS_SDK_VERSION,
        )


settings = Settings()
