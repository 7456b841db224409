import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    db_host: str = "localhost"
    db_port: int = 3306
    db_user: str | None = None
    db_password: str | None = None
    db_name: str | None = None
    db_driver: str = "mysql+pymysql"
    db_connect_timeout: int = 10
    database_url: str | None = None
    db_create_tables: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def url(self) -> URL | str:
        if self.database_url:
            return self.database_url
        return URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            db_host=os.getenv("DB_HOST", "localhost"),
            db_port=int(os.getenv("DB_PORT", "3306")),
            db_user=os.getenv("DB_USER"),
            db_password=os.getenv("DB_PASSWORD"),
            db_name=os.getenv("DB_NAME"),
            db_driver=os.getenv("DB_DRIVER", "mysql+pymysql"),
            db_connect_timeout=int(os.getenv("DB_CONNECT_TIMEOUT", "10")),
            database_url=os.getenv("DATABASE_URL") or None,
            db_create_tables=_env_bool("DB_CREATE_TABLES"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )


settings = Settings.from_env()
