"""Runtime and generator settings."""

from __future__ import annotations

import os
import pathlib
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

_PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[2]


class Settings(BaseModel):
    """Process-wide configuration, read once from the environment."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    default_culture: str = Field(
        default="en-US",
        description="Culture used for abbreviations when none is given or set in context",
    )
    fallback_culture: str = Field(
        default="en-US",
        description="Reference culture consulted when a culture lacks an abbreviation",
    )
    definitions_dir: pathlib.Path = Field(
        default=_PROJECT_ROOT / "definitions",
        description="Directory holding the unit family definition files",
    )
    output_dir: pathlib.Path = Field(
        default=_PROJECT_ROOT / "src" / "unitkit",
        description="Package directory the generator writes into",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        values: dict[str, str] = {}
        if os.environ.get("UNITKIT_CULTURE"):
            values["default_culture"] = os.environ["UNITKIT_CULTURE"]
        if os.environ.get("UNITKIT_FALLBACK_CULTURE"):
            values["fallback_culture"] = os.environ["UNITKIT_FALLBACK_CULTURE"]
        if os.environ.get("UNITKIT_DEFINITIONS"):
            values["definitions_dir"] = os.environ["UNITKIT_DEFINITIONS"]
        if os.environ.get("UNITKIT_OUTPUT"):
            values["output_dir"] = os.environ["UNITKIT_OUTPUT"]
        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide :class:`Settings` instance."""

    return Settings.from_env()


__all__ = ["Settings", "get_settings"]
