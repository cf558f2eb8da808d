"""Generate database session. Connection settings come from the environment."""

import os
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base

DATABASE_URL = os.getenv("GAME_OF_LIFE_DATABASE_URL", "sqlite:///./game_of_life.db")
SQL_ECHO = os.getenv("GAME_OF_LIFE_SQL_ECHO", "").lower() in {"1", "true", "yes"}

# SQLite connections are shared between threads of the web server
connect_args = (
    {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
)
engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine)

# Ensure all tables are created
Base.metadata.create_all(bind=engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
