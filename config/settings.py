"""
Application settings loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str = "change-me-jwt-secret-key"   # HMAC secret for session tokens
    jwt_expiry_seconds: int = 86400                 # 24 hours
    bcrypt_rounds: int = 10                         # bcrypt work factor

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 5000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]
    app_version: str = "1.0.0"

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }


config = Settings()
