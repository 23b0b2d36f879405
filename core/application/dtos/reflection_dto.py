"""
Reflection DTOs.

Inputs and outputs of the reflection (business) operation port.
"""
from dataclasses import dataclass, field
from typing import Optional

from core.domain.value_objects import DateRange


@dataclass(frozen=True)
class ReflectionOptions:
    """Options passed to the reflection operation."""

    date_range: DateRange
    dry_run: bool = False


@dataclass(frozen=True)
class ReflectionSummary:
    """Headline numbers of a generated reflection."""

    pr_count: int
    total_work_hours: float
    time_entry_count: int = 0


@dataclass(frozen=True)
class ReflectionResult:
    """
    Successful reflection output.

    ``page_url`` is set when the page was published remotely,
    ``local_file_path`` when the report fell back to a local file.
    """

    summary: ReflectionSummary
    page_url: Optional[str] = None
    local_file_path: Optional[str] = None
    warnings: tuple[str, ...] = field(default_factory=tuple)
