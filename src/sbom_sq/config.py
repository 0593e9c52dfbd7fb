from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent


def _bool_env(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _log_level_env(name: str, default: str = "WARNING") -> str:
    value = os.getenv(name, default).strip().upper()
    if isinstance(logging.getLevelName(value), int):
        return value
    return default


@dataclass(slots=True)
class Settings:
    spdx_file: Path
    report_dir: Path
    templates_dir: Path
    color: bool
    log_level: str


@lru_cache
def get_settings() -> Settings:
    return Settings(
        spdx_file=Path(os.getenv("SQ_SPDX_FILE", "sbom.spdx.json")),
        report_dir=Path(os.getenv("SQ_REPORT_DIR", "Reports")),
        templates_dir=Path(os.getenv("SQ_TEMPLATE_DIR", PACKAGE_DIR / "templates")),
        color=_bool_env("SQ_COLOR", True),
        log_level=_log_level_env("SQ_LOG_LEVEL"),
    )
