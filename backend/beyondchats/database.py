"""
SQLAlchemy engine and session. Supports PostgreSQL and SQLite.
Sync usage; one session per request via get_db.
"""
import logging
import uuid

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from beyondchats.config import settings

logger = logging.getLogger(__name__)

_is_sqlite = "sqlite" in settings.database_url
_connect_args = {"check_same_thread": False} if _is_sqlite else {}
engine = create_engine(
    settings.database_url,
    pool_pre_ping=not _is_sqlite,
    connect_args=_connect_args,
    echo=False,  # Set True for SQL logging during development
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


if _is_sqlite:
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # SQLite ignores ON DELETE clauses unless this is set per connection
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_db():
    """Create tables and make sure the demo user exists. Call once at app startup."""
    # Import all models so they register with Base before create_all
    from beyondchats.models import user, pdf, chat, quiz, progress  # noqa: F401
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        ensure_demo_user(db)
    finally:
        db.close()


def ensure_demo_user(db):
    """Insert the single-tenant demo user if missing; return it."""
    from beyondchats.models.user import User
    user_id = uuid.UUID(settings.demo_user_id)
    user = db.query(User).filter(User.id == user_id).first()
    if user:
        return user
    user = User(id=user_id, email=settings.demo_user_email, name=settings.demo_user_name)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Created demo user %s", settings.demo_user_email)
    return user


def get_db():
    """Dependency: yield a DB session, close after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
