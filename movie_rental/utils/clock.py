from datetime import datetime, timezone


def utcnow() -> datetime:
    """Naive UTC timestamp; every DateTime column in the schema is stored naive."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
