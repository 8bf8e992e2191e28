"""
Runtime settings, read once from the environment (and a local .env file).

SWIFT_REFERENCE_DATA_DIR: directory holding the per-country reference
    datasets (<CC>.json). Defaults to the datasets shipped with `lookups`.
SWIFT_LOG_LEVEL: level name used by `configure_logging` (default WARNING).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent

REFERENCE_DATA_DIR = Path(os.getenv("SWIFT_REFERENCE_DATA_DIR", str(BASE_DIR / "lookups" / "data")))

LOG_LEVEL = os.getenv("SWIFT_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for scripts and interactive use.

    The level is applied even when the root logger already has handlers.
    """
    resolved = (level or LOG_LEVEL).upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)
