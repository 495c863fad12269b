from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from relaydesk.core.config import settings


def _engine_kwargs(dsn: str) -> dict:
    # SQLite (local/dev) has no connection pool to size
    if dsn.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_recycle": 3600,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": 30,
    }


engine = create_engine(settings.MYSQL_DSN, **_engine_kwargs(settings.MYSQL_DSN))

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
