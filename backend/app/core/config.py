# backend/app/core/config.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_env: str = "dev"

    database_url: str = "sqlite:///./hotel.db"

    # Put this on the host as HOTEL_JWT_SECRET_KEY
    jwt_secret_key: str = "dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 10080

    # comma-separated allowlist, e.g. "https://admin.example.com,http://localhost:3000"
    cors_origins: str = "http://localhost:3000"

    log_level: str = "INFO"

    # first operator account, created only when the accounts table is empty
    seed_admin_username: str = "admin"
    seed_admin_email: str = "admin@hotel.local"
    seed_admin_password: str = "admin123"

    class Config:
        env_file = ".env"
        env_prefix = "HOTEL_"

    @property
    def allow_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
