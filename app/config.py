import os

from dotenv import load_dotenv


load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# Credentialed CORS cannot use a wildcard origin.
# Defaults cover the Vite dev server and localhost on any port.
_DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
]


def _cors_origins(raw: str) -> list[str]:
    env_origins = [
        item.strip() for item in raw.split(",")
        if item.strip() and item.strip() != "*"
    ]
    return env_origins + [
        origin for origin in _DEFAULT_CORS_ORIGINS
        if origin not in env_origins
    ]


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///blog.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Tables are normally created through /api/setup or `flask init-db`.
    DB_AUTO_CREATE = _env_bool("DB_AUTO_CREATE", False)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    JSON_SORT_KEYS = False

    CORS_ALLOWED_ORIGINS = _cors_origins(os.getenv("CORS_ALLOWED_ORIGINS", ""))
