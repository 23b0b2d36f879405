"""Orchestration models - execution outcome variants."""

from dataclasses import dataclass
from typing import Optional, Union

from core.domain.errors import UNEXPECTED_ERROR_KIND, ReflectionError


@dataclass(frozen=True)
class SuccessOutcome:
    """The reflection operation returned a result."""

    page_url: Optional[str]
    commit_count: int
    work_hours: float
    duration_ms: int


@dataclass(frozen=True)
class KnownFailureOutcome:
    """The reflection operation returned a known reflection error."""

    error: ReflectionError
    message: str
    duration_ms: int

    @property
    def error_type(self) -> str:
        return self.error.kind.value


@dataclass(frozen=True)
class UnexpectedFailureOutcome:
    """The reflection operation raised instead of returning."""

    message: str
    stack_trace: Optional[str]
    duration_ms: int

    @property
    def error_type(self) -> str:
        return UNEXPECTED_ERROR_KIND


ExecutionOutcome = Union[SuccessOutcome, KnownFailureOutcome, UnexpectedFailureOutcome]
FailureOutcome = Union[KnownFailureOutcome, UnexpectedFailureOutcome]
