"""Execution identifier value object."""

import threading
import time
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class ExecutionID:
    """
    Unique identifier of one execution attempt.

    Built from a fixed prefix and a nanosecond clock reading. Readings are
    forced strictly increasing within the process, so two attempts started in
    the same clock tick still get distinct ids.
    """

    value: str

    DEFAULT_PREFIX: ClassVar[str] = "sched"
    _lock: ClassVar[threading.Lock] = threading.Lock()
    _last_reading: ClassVar[int] = 0

    @classmethod
    def generate(cls, prefix: str = DEFAULT_PREFIX) -> "ExecutionID":
        """Generate a new ExecutionID."""
        with cls._lock:
            reading = max(time.time_ns(), ExecutionID._last_reading + 1)
            ExecutionID._last_reading = reading
        return cls(value=f"{prefix}-{reading}")

    def __str__(self) -> str:
        return self.value
