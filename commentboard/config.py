import os
from datetime import timedelta

from dotenv import load_dotenv


load_dotenv()


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return int(value)


def _env_list(name: str) -> list[str]:
    raw = os.getenv(name, "").strip()
    return [item.strip() for item in raw.split(",") if item.strip()]


def _cors_allowed_origins() -> list[str]:
    # Credentialed CORS cannot use a wildcard origin.
    # Defaults include localhost on any port.
    default_origins = [
        r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    ]
    env_origins = [
        origin for origin in _env_list("CORS_ALLOWED_ORIGINS") if origin != "*"
    ]
    return env_origins + [
        origin for origin in default_origins if origin not in env_origins
    ]


class Config:
    DATA_FILE = os.getenv("COMMENTBOARD_DATA_FILE", "db.json")

    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-secret")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=_env_int("JWT_ACCESS_TOKEN_DAYS", 7))
    JWT_REFRESH_TOKEN_EXPIRES = timedelta(days=_env_int("JWT_REFRESH_TOKEN_DAYS", 30))

    AVATAR_URL_TEMPLATE = os.getenv(
        "AVATAR_URL_TEMPLATE",
        "https://i.pravatar.cc/48?u={email}"
    )

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    CORS_ALLOWED_ORIGINS = _cors_allowed_origins()

    SOCKETIO_CORS_ALLOWED_ORIGINS = _env_list("SOCKETIO_CORS_ALLOWED_ORIGINS") or "*"
