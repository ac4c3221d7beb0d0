from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore", frozen=True)

    SERVICE_NAME: str = "service"
    SERVICE_HOST: str = "0.0.0.0"
    SERVICE_PORT: int = 8100
    LOG_LEVEL: str = "INFO"
    PROBE_PATHS: tuple[str, ...] = ("/healthz", "/readyz")


def load_settings(service_name: str) -> ServiceSettings:
    return ServiceSettings(SERVICE_NAME=service_name)
