import os
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


APP_ENV = os.getenv("APP_ENV", "development")

DEFAULT_DATABASE_URL = "sqlite:///./echowell.db"
DATABASE_URL = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
DATABASE_ECHO = _get_bool(os.getenv("DATABASE_ECHO"), default=False)

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

PUBLIC_DIR = Path(os.getenv("PUBLIC_DIR", str(Path(__file__).resolve().parent.parent / "public")))

CORS_ORIGINS = _get_list(os.getenv("CORS_ORIGINS"), ["http://localhost:3000"])


def validate_runtime_config() -> None:
    if APP_ENV.lower() == "production" and os.getenv("DATABASE_URL") is None:
        raise RuntimeError("DATABASE_URL must be set in production.")
    if not 1 <= PORT <= 65535:
        raise RuntimeError(f"PORT must be between 1 and 65535, got {PORT}.")
