from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.settings import get_settings
from db.base import Base

DATABASE_URL = get_settings().database_url

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {},
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    # models must be imported so their tables are registered
    import db.node  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
