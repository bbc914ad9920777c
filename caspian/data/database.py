# caspian/data/database.py
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from caspian.utils.settings import DB_POOL_SIZE, DB_POOL_TIMEOUT

Base = declarative_base()


def _is_memory_sqlite(url: str) -> bool:
    return url == "sqlite://" or ":memory:" in url or "mode=memory" in url


def build_engine(
    url: str,
    pool_size: int = DB_POOL_SIZE,
    pool_timeout: int = DB_POOL_TIMEOUT,
) -> Engine:
    """
    Jeden engine = jedna pula połączeń na cały proces.
    Pula ma stały limit (bez overflow), kolejne requesty czekają na wolne połączenie.
    """
    if url.startswith("sqlite"):
        if _is_memory_sqlite(url):
            # sqlite w pamięci - baza żyje tylko w jednym połączeniu (testy/dev)
            engine = create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            engine = create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=QueuePool,
                pool_size=pool_size,
                max_overflow=0,
                pool_timeout=pool_timeout,
            )

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(
        url,
        pool_size=pool_size,
        max_overflow=0,
        pool_timeout=pool_timeout,
        pool_pre_ping=True,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db(request: Request) -> Iterator[Session]:
    # połączenie wraca do puli na każdej ścieżce wyjścia
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
