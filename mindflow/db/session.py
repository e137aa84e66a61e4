# mindflow/db/session.py
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from mindflow.core.config import settings

logger = logging.getLogger(__name__)

DEFAULT_DB_URL = "sqlite:///./mindflow.db"
LOCAL_HOSTS = (None, "localhost", "127.0.0.1")


def normalize_db_url(url: str) -> str:
    """
    Resolve DATABASE_URL to something create_engine accepts.

    Empty means the local SQLite file. Heroku-style postgres:// URLs get the
    psycopg2 driver, and remote Postgres hosts get sslmode=require unless the
    URL already picks an sslmode.
    """
    if not url:
        return DEFAULT_DB_URL

    parsed = make_url(url)
    if parsed.drivername in ("postgres", "postgresql"):
        parsed = parsed.set(drivername="postgresql+psycopg2")
    if parsed.get_backend_name() == "postgresql" and "sslmode" not in parsed.query:
        if parsed.host not in LOCAL_HOSTS:
            parsed = parsed.update_query_dict({"sslmode": "require"})
    return parsed.render_as_string(hide_password=False)


DATABASE_URL = normalize_db_url(settings.DATABASE_URL)

engine_kwargs = dict(pool_pre_ping=True)
connect_args = {}

if DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False
    # in-memory databases live on a single shared connection
    if DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
        engine_kwargs["poolclass"] = StaticPool
elif DATABASE_URL.startswith("postgresql"):
    engine_kwargs.update({
        "pool_size": 5,
        "max_overflow": 10,
        "pool_timeout": 30,
        "pool_recycle": 1800,
    })

engine = create_engine(DATABASE_URL, connect_args=connect_args, echo=False, **engine_kwargs)
logger.info("Database engine created for %s", make_url(DATABASE_URL).get_backend_name())

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
