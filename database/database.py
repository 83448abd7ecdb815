from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from core.config_loader import get_config


def create_db_engine(url: str) -> Engine:
    return create_engine(url, pool_pre_ping=True)


# Built from config.yaml (DATABASE_URL overrides it)
engine = create_db_engine(get_config().database.url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def configure_database(url: str) -> Engine:
    """Rebind SessionLocal to a new database, e.g. one named by `main.py --config`."""
    global engine
    engine = create_db_engine(url)
    SessionLocal.configure(bind=engine)
    return engine


def get_engine() -> Engine:
    return engine
