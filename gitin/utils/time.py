from datetime import datetime, timedelta, timezone

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

def days_ago_dt(days: int, now: datetime | None = None) -> datetime:
    return (now or utcnow()) - timedelta(days=days)
