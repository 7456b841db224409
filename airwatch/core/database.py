from sqlalchemy import BigInteger, Integer, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from airwatch.core.config import settings
from airwatch.core.logger import get_logger

logger = get_logger(__name__)


def _connect_args() -> dict:
    if settings.database_url and settings.database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {"connect_timeout": settings.db_connect_timeout}


engine = create_engine(settings.url, connect_args=_connect_args(), pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# SQLite only autoincrements INTEGER PRIMARY KEY columns
BigIntPK = BigInteger().with_variant(Integer, "sqlite")


def get_db():
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def check_connection(bind=None) -> bool:
    """Open one connection to the store and report whether it worked.

    A failure is logged and the process keeps serving; requests will then
    fail individually with a store fault.
    """
    bind = bind or engine
    try:
        with bind.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("database_connection_failed")
        return False
    logger.info("database_connected")
    return True


def create_tables(bind=None) -> None:
    # models must be imported so their tables are registered on Base.metadata
    from airwatch.models import device, sensor_data, user  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
