from __future__ import annotations

from typing import Any, Callable, Optional

from pydantic import Field, ImportString

from core.settings.base import ReflectionBaseSettings


class ReflectionSettings(ReflectionBaseSettings):
    """
    Reflection operation settings.

    ``use_case_factory`` is a dotted path (``package.module:factory`` or
    ``package.module.factory``) to a zero-argument callable returning the
    reflection use case. Without it, nothing can be run.
    """

    default_period_days: int = Field(default=7, ge=1, alias="REFLECTION_DEFAULT_PERIOD_DAYS")
    use_case_factory: Optional[ImportString[Callable[[], Any]]] = Field(
        default=None, alias="REFLECTION_USE_CASE_FACTORY"
    )
