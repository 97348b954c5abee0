"""
Shared pydantic base and helpers for the stored records.
"""
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utc_timestamp() -> str:
    """Return the current UTC time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class Record(BaseModel):
    """Base class for records persisted in the data file."""
    model_config = ConfigDict(populate_by_name=True)
