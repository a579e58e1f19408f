"""Environment-driven runtime settings.

Recognised variables:

- QUADTREE_DEFAULT_DEPTH: depth used when `from_point` is called without one (1..26, default 26)
- QUADTREE_GEOJSON_INDENT: indent passed to json.dumps for GeoJSON output (unset = compact)
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, Field

from quadtree_address.contracts import MAX_DEPTH

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Validated library settings."""

    default_depth: int = Field(default=MAX_DEPTH, ge=1, le=MAX_DEPTH)
    geojson_indent: int | None = Field(default=None, ge=0)


def load_settings() -> Settings:
    """Build settings from environment variables."""
    values: dict[str, object] = {}
    raw_depth = os.getenv("QUADTREE_DEFAULT_DEPTH")
    if raw_depth is not None and raw_depth.strip():
        values["default_depth"] = raw_depth.strip()
    raw_indent = os.getenv("QUADTREE_GEOJSON_INDENT")
    if raw_indent is not None and raw_indent.strip():
        values["geojson_indent"] = raw_indent.strip()

    settings = Settings.model_validate(values)
    logger.debug("loaded settings %s", settings.model_dump())
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process-wide settings, loading them on first use."""
    return load_settings()
