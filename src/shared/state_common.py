import uuid
from datetime import datetime, timezone
from typing import Optional


def format_timestamp(dt: datetime) -> str:
    # Millisecond precision with a trailing Z, the shape the dashboard parses
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now(dt: Optional[datetime] = None) -> str:
    return format_timestamp(dt or datetime.now(timezone.utc))


def new_record_id() -> str:
    return str(uuid.uuid4())
