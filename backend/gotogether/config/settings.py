from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    # Database
    DB_USER: str = Field("gotogether_dev_user")
    DB_PASSWORD: str = Field("supersecretpassword")
    DB_NAME: str = Field("gotogether")
    DB_HOST: str = Field("localhost")
    DB_PORT: int = Field(5432)
    # Full SQLAlchemy URL, overrides the DB_* parts when set
    DATABASE_URL: str | None = Field(None)

    # App
    API_HOST: str = Field("0.0.0.0")
    API_PORT: int = Field(3000)
    DEBUG: bool = Field(False)
    CORS_ORIGIN_REGEX: str = Field(r"https?://(localhost|127\.0\.0\.1)(:\d+)?")

    # Identity provider (bearer token verification)
    IDENTITY_JWT_SECRET: str = Field("supersecret")
    IDENTITY_JWT_ALGORITHM: str = Field("HS256")
    IDENTITY_JWT_AUDIENCE: str | None = Field(None)
    IDENTITY_JWT_ISSUER: str | None = Field(None)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_file_encoding="utf-8"
    )

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def sync_database_url(self) -> str:
        """URL with a synchronous driver, used by Alembic."""
        url = self.database_url
        return (
            url.replace("postgresql+asyncpg", "postgresql+psycopg2")
            .replace("sqlite+aiosqlite", "sqlite")
        )


settings = Settings()
