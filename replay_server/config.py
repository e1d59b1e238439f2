"""Runtime configuration and logging setup.

Every value has a default that matches a local development run; the
``REPLAY_*`` environment variables override them at startup.
"""
from __future__ import annotations

import logging
import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field

# -----------------------------
# Settings
# -----------------------------

ENV_PREFIX = "REPLAY_"

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class Settings(BaseModel):
    """Server settings, validated by pydantic."""

    host: str = "::1"
    port: int = Field(default=3000, ge=0, le=65535)
    static_root: str = "www"
    # Cadence of the spectator stream, in milliseconds.
    stream_interval_ms: int = Field(default=500, gt=0)
    log_level: str = "INFO"
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    @property
    def stream_interval(self) -> float:
        return self.stream_interval_ms / 1000.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from *environ* (defaults to ``os.environ``).

        Raises
        ------
        pydantic.ValidationError
            If an override cannot be coerced to the field's type.
        """
        env = os.environ if environ is None else environ
        overrides: dict = {}
        for field in ("host", "port", "static_root", "stream_interval_ms", "log_level"):
            value = env.get(ENV_PREFIX + field.upper())
            if value is not None:
                overrides[field] = value
        origins = env.get(ENV_PREFIX + "CORS_ORIGINS")
        if origins is not None:
            overrides["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]
        return cls.model_validate(overrides)


def configure_logging(level: str = "INFO") -> None:
    """Install the root handler once for the whole process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


__all__ = ["Settings", "configure_logging", "ENV_PREFIX"]
