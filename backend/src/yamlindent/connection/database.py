import os
from contextlib import contextmanager
import logging
from sqlalchemy import (
    create_engine,
    Column,
    Integer,
    String,
    DateTime,
)
from sqlalchemy.orm import declarative_base, sessionmaker

db_connection = os.getenv("DB_CONNECTION")
if db_connection:
    engine = create_engine(db_connection, pool_pre_ping=True, pool_recycle=3600)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
else:
    SessionLocal = None

Base = declarative_base()

log = logging.getLogger(__name__)


@contextmanager
def get_db():
    if SessionLocal is None:
        log.debug("Database connection not configured, skipping record")
        yield
    else:
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()


class Detection(Base):
    __tablename__ = "detections"

    id = Column(Integer, primary_key=True, autoincrement=True)

    in_yaml = Column(String)
    in_time = Column(DateTime(timezone=True))
    # Null when the document carries no indentation signal or detection failed
    spaces = Column(Integer, default=None)
    error = Column(String, default=None)


structures = {
    "detections": Detection,
}
