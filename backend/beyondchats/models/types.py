"""
DB types that work on both SQLite and PostgreSQL.
"""
import uuid
from datetime import datetime, timezone

from sqlalchemy import String, TypeDecorator


class UuidType(TypeDecorator):
    """UUID that stores as string(36) so it works on SQLite and PostgreSQL."""
    impl = String(36)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(value)


def utcnow() -> datetime:
    """Application-side timestamp; microsecond resolution keeps same-second rows ordered."""
    return datetime.now(timezone.utc)
