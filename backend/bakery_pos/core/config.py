import secrets

from pydantic_settings import BaseSettings


def _generate_secret() -> str:
    """Generate a random secret key if none is provided via env."""
    return secrets.token_urlsafe(64)


class Settings(BaseSettings):
    PROJECT_NAME: str = "Bakery POS"
    SECRET_KEY: str = _generate_secret()  # MUST be set via .env in production
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480  # 8 hours (1 shift)
    ALGORITHM: str = "HS256"
    SESSION_STORAGE_KEY: str = "bakery_user"
    SEED_DEMO_DATA: bool = True
    LOG_LEVEL: str = "INFO"
    CURRENCY_SYMBOL: str = "₹"

    class Config:
        env_file = ".env"


settings = Settings()
