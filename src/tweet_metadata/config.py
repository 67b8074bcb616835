import logging
import os
from dataclasses import dataclass


def _env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None:
        return default
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_number(name: str, default: str, cast=int):
    raw = _env(name, default) or default
    try:
        return cast(raw)
    except ValueError:
        raise RuntimeError(f"Invalid value for {name}: {raw!r}") from None


@dataclass(frozen=True)
class Config:
    api_key: str
    api_secret: str
    bearer_token: str
    api_base_url: str
    fetch: bool
    http_timeout: float
    retry_max_attempts: int
    retry_wait_min: float
    retry_wait_max: float
    log_level: str

    @property
    def fetch_enabled(self) -> bool:
        if not self.fetch:
            return False
        return bool(self.bearer_token or (self.api_key and self.api_secret))


def load_config() -> Config:
    log_level = (_env("LOG_LEVEL", "INFO") or "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"Invalid LOG_LEVEL: {log_level}")

    return Config(
        api_key=_env("TWITTER_API_KEY", "") or "",
        api_secret=_env("TWITTER_API_SECRET", "") or "",
        bearer_token=_env("TWITTER_BEARER_TOKEN", "") or "",
        api_base_url=(_env("TWITTER_API_BASE_URL", "https://api.twitter.com") or "https://api.twitter.com").rstrip("/"),
        fetch=_env_bool("TWITTER_FETCH", True),
        http_timeout=_env_number("HTTP_TIMEOUT", "30", float),
        retry_max_attempts=_env_number("RETRY_MAX_ATTEMPTS", "3"),
        retry_wait_min=_env_number("RETRY_WAIT_MIN", "1", float),
        retry_wait_max=_env_number("RETRY_WAIT_MAX", "10", float),
        log_level=log_level,
    )
