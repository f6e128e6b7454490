from datetime import datetime
from decimal import Decimal

SECONDS_PER_DAY = 24 * 60 * 60


def rental_days(date_out: datetime, date_returned: datetime) -> int:
    """
    Whole days between date_out and date_returned; partial days are dropped.
    A return stamped before date_out (clock skew) counts as 0 days.
    """
    if not date_out or not date_returned:
        return 0
    elapsed = (date_returned - date_out).total_seconds()
    if elapsed <= 0:
        return 0
    return int(elapsed // SECONDS_PER_DAY)


def calculate_rental_fee(date_out: datetime, date_returned: datetime, daily_rate) -> Decimal:
    rate = Decimal(str(daily_rate or 0))
    days = rental_days(date_out, date_returned)
    return (rate * Decimal(days)).quantize(Decimal("0.01"))
