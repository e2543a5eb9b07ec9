"""Culture identifiers and the current display culture."""

from __future__ import annotations

import contextlib
import contextvars
from typing import Iterator

from .config import get_settings

INVARIANT_CULTURE = ""

_current_culture: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "unitkit_culture", default=None
)


def normalize_culture(name: str | None) -> str:
    """Normalise a culture name to ``ll-RR`` form (``"nb_no"`` -> ``"nb-NO"``)."""

    if name is None:
        return INVARIANT_CULTURE
    text = name.strip().replace("_", "-")
    if not text:
        return INVARIANT_CULTURE
    language, _, region = text.partition("-")
    if not region:
        return language.lower()
    return f"{language.lower()}-{region.upper()}"


def get_current_culture() -> str:
    """Culture in effect for the current context, else the configured default."""

    culture = _current_culture.get()
    if culture is None:
        return normalize_culture(get_settings().default_culture)
    return culture


@contextlib.contextmanager
def use_culture(name: str) -> Iterator[str]:
    """Temporarily switch the display culture for the current context."""

    culture = normalize_culture(name)
    token = _current_culture.set(culture)
    try:
        yield culture
    finally:
        _current_culture.reset(token)


__all__ = ["INVARIANT_CULTURE", "get_current_culture", "normalize_culture", "use_culture"]
