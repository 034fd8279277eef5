from datetime import datetime, timezone
from typing import Optional

RFC3339 = "%Y-%m-%dT%H:%M:%SZ"

def to_rfc3339(value: Optional[datetime]) -> Optional[str]:
    """
    Formate un datetime en RFC3339 UTC à la seconde ("2025-01-01T10:00:00Z").
    Un datetime naïf est considéré comme déjà en UTC (SQLite ne garde pas le fuseau).
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(RFC3339)
