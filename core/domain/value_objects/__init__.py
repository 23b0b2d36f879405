"""Domain value objects."""

from .date_range import DateRange
from .execution_id import ExecutionID

__all__ = [
    "DateRange",
    "ExecutionID",
]
