from datetime import datetime, timezone

from pydantic import BaseModel, Field


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. ``2024-01-01T00:00:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class GreetingResponse(BaseModel):
    """Response schema for GET /."""
    message: str = "Hello World!"
    version: str = "1.0.0"
    timestamp: str = Field(default_factory=utc_timestamp)
