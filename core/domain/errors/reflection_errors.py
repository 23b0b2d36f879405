"""
Reflection Errors.

Expected failures of the reflection (business) operation.
"""
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class ReflectionErrorKind(str, Enum):
    """Known failure kinds of the reflection operation."""

    CONFIG_INVALID = "CONFIG_INVALID"
    DATA_COLLECTION_FAILED = "DATA_COLLECTION_FAILED"
    PAGE_CREATION_FAILED = "PAGE_CREATION_FAILED"


# Logged errorType for faults raised by the operation instead of returned
UNEXPECTED_ERROR_KIND = "UNEXPECTED_ERROR"


@dataclass(frozen=True)
class ConfigInvalid:
    """Required configuration is missing."""

    kind: ClassVar[ReflectionErrorKind] = ReflectionErrorKind.CONFIG_INVALID

    missing_fields: tuple[str, ...]


@dataclass(frozen=True)
class DataCollectionFailed:
    """A data source could not be read."""

    kind: ClassVar[ReflectionErrorKind] = ReflectionErrorKind.DATA_COLLECTION_FAILED

    source: str
    message: str


@dataclass(frozen=True)
class PageCreationFailed:
    """The reflection page could not be published."""

    kind: ClassVar[ReflectionErrorKind] = ReflectionErrorKind.PAGE_CREATION_FAILED

    message: str


ReflectionError = Union[ConfigInvalid, DataCollectionFailed, PageCreationFailed]


def format_reflection_error(error: ReflectionError) -> str:
    """
    Render a reflection error as a single human-readable line.

    Args:
        error: Known reflection error

    Returns:
        Deterministic message for the error kind
    """
    if isinstance(error, ConfigInvalid):
        return f"missing configuration fields: {', '.join(error.missing_fields)}"
    if isinstance(error, DataCollectionFailed):
        return f"data collection failed ({error.source}): {error.message}"
    if isinstance(error, PageCreationFailed):
        return f"page creation failed: {error.message}"
    raise TypeError(f"Unknown reflection error: {error!r}")
