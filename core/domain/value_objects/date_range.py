"""Reporting period value object."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days covered by a reflection."""

    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(
                f"DateRange start must not be after end, got: {self.start} > {self.end}"
            )

    @classmethod
    def last_days(cls, days: int, today: Optional[date] = None) -> "DateRange":
        """
        Build the range of the last ``days`` days ending today.

        Args:
            days: Number of days covered (at least 1)
            today: Override for the current day

        Returns:
            DateRange ending on ``today``
        """
        if days < 1:
            raise ValueError(f"days must be at least 1, got: {days}")
        end = today or date.today()
        return cls(start=end - timedelta(days=days - 1), end=end)

    def to_dict(self) -> dict[str, str]:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}
