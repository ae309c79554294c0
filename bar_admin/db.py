from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    database_url: str = Field(alias="DATABASE_URL")
    cors_allowed_origins: str | None = Field(default=None, alias="CORS_ALLOWED_ORIGINS")
    trusted_hosts: str | None = Field(default=None, alias="TRUSTED_HOSTS")
    sql_echo: bool = Field(default=False, alias="SQL_ECHO")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def DATABASE_URL(self) -> str:
        return self.database_url

    @property
    def CORS_ALLOWED_ORIGINS_LIST(self) -> list[str]:
        return _split_csv(self.cors_allowed_origins)

    @property
    def TRUSTED_HOSTS_LIST(self) -> list[str]:
        return _split_csv(self.trusted_hosts)

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        cleaned = (value or "").strip()
        if not cleaned:
            raise ValueError("DATABASE_URL must be set")
        # postgres:// is what most hosted providers hand out; SQLAlchemy wants postgresql://
        if cleaned.startswith("postgres://"):
            cleaned = "postgresql://" + cleaned[len("postgres://"):]
        return cleaned


def _split_csv(raw: str | None) -> list[str]:
    if not raw:
        return []
    unique: list[str] = []
    for item in raw.split(","):
        value = item.strip()
        if value and value not in unique:
            unique.append(value)
    return unique


settings = Settings()

engine = create_engine(settings.database_url, pool_pre_ping=True, echo=settings.sql_echo)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


class Base(DeclarativeBase):
    pass


# Dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
