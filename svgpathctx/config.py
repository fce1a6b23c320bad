"""Configuration from environment variables, plus path-building defaults."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class Settings(BaseSettings):
    svgpathctx_env: str = "development"
    svgpathctx_log_level: str = "info"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


@dataclass
class PathConfig:
    """Controls geometric queries and stroke defaults."""

    # Bezier sampling when flattening a path into a polygon
    samples_per_curve: int = 12

    # Dash multiplier for stroke-dasharray (dash = stroke_width * dash_gap_size)
    dash_gap_size: float = 1.5


def configure_logging(level: str | None = None) -> int:
    """Install the root log handler. Returns the numeric level applied."""
    name = (level or settings.svgpathctx_log_level).upper()
    numeric = getattr(logging, name, logging.INFO)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    return numeric
