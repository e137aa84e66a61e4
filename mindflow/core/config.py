# mindflow/core/config.py
import os
import secrets
import logging

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv(usecwd=True))

logger = logging.getLogger(__name__)


def _parse_origins(origins_str: str) -> list[str]:
    out: list[str] = []
    for s in (origins_str or "").split(","):
        s = s.strip()
        if s and s not in ("*", "null"):
            out.append(s)
    return out


class Settings:
    ENV = os.getenv("ENV", "production")

    # JWT_SECRET is mandatory outside development
    JWT_SECRET = os.getenv("JWT_SECRET")

    if not JWT_SECRET:
        if ENV == "development":
            JWT_SECRET = secrets.token_urlsafe(32)
            logger.warning("JWT_SECRET not set, using a temporary secret for this process")
        else:
            raise RuntimeError("JWT_SECRET environment variable is not set")

    JWT_ALG = os.getenv("JWT_ALG", "HS256")
    # 0 means tokens never expire
    JWT_EXPIRE_MINUTES = int(os.getenv("JWT_EXPIRE_MINUTES", "0"))
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./mindflow.db")
    ALLOWED_ORIGINS = _parse_origins(
        os.getenv("ALLOWED_ORIGINS", "http://localhost:5173,http://localhost:8080")
    )

    AI_GATEWAY_URL = os.getenv("AI_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1")
    AI_GATEWAY_API_KEY = os.getenv("AI_GATEWAY_API_KEY")
    AI_MODEL = os.getenv("AI_MODEL", "google/gemini-2.5-flash")
    AI_MAX_TOKENS = int(os.getenv("AI_MAX_TOKENS", "500"))
    AI_TIMEOUT_SECONDS = float(os.getenv("AI_TIMEOUT_SECONDS", "30"))
    if not AI_GATEWAY_API_KEY:
        logger.warning("AI_GATEWAY_API_KEY not set, mood analysis will be unavailable")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    PORT = int(os.getenv("PORT", "3001"))


settings = Settings()
