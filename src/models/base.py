"""Shared helpers for in-memory record types."""
from datetime import UTC, datetime

from uuid6 import uuid7


def generate_id() -> str:
    """Generate a time-ordered (UUIDv7) string identifier."""
    return str(uuid7())


def utc_now() -> datetime:
    """Current wall-clock time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)
