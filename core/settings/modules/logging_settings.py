from __future__ import annotations

from typing import Literal

from pydantic import Field

from core.settings.base import ReflectionBaseSettings


class LoggingSettings(ReflectionBaseSettings):
    """
    Audit log settings.

    ``redaction_hex_min_length`` is the shortest bare hex run masked as a
    secret; lower it to catch shorter tokens, raise it if ordinary hex data
    (commit SHAs, ids) is being masked. It must exceed the four characters
    a mask keeps visible, otherwise masked text would match again.
    """

    log_file_path: str = Field(
        default="~/.reflection-weekly/logs/execution.log", alias="LOG_FILE_PATH"
    )
    log_level: Literal["debug", "info", "warn", "error"] = Field(
        default="info", alias="LOG_LEVEL"
    )
    redaction_hex_min_length: int = Field(
        default=32, ge=5, alias="LOG_REDACTION_HEX_MIN_LENGTH"
    )
