# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from typing import Tuple
import os

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
from dotenv import load_dotenv

load_dotenv()  # Load from .env file in project root

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8083/inlong/manager/api")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_TOKEN = os.getenv("API_TOKEN", "")

# UI language: "en" or "zh"
_UI_LANGUAGE = os.getenv("UI_LANGUAGE", "en")


def _parse_status_codes(raw: str) -> Tuple[int, ...]:
    return tuple(int(code) for code in raw.split(",") if code.strip())


# Group statuses for which the resource can no longer be edited:
# 0 = draft, 101/102 = frozen while approval is pending or being processed
_READONLY_STATUSES = _parse_status_codes(os.getenv("READONLY_STATUSES", "0,101,102"))


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "InLong Access Console"
    VERSION: str = "1.0.0"

    # HTTP API Backend Settings
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_TOKEN: str = _API_TOKEN

    # Routes
    ACCESS_LIST_PATH: str = "/access"
    ACCESS_CREATE_PREFIX: str = "/access/create"
    ACCESS_DETAIL_PREFIX: str = "/access/detail"
    STEP_QUERY_PARAM: str = "step"

    # Access group statuses rendered read-only
    READONLY_STATUSES: Tuple[int, ...] = _READONLY_STATUSES

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_TO_FILE: bool = os.getenv("LOG_TO_FILE", "true").lower() in ("true", "1", "yes")
    LOG_FILE: str = "access_console.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # UI Settings
    UI_LANGUAGE: str = _UI_LANGUAGE
    TOAST_DURATION_MS: int = 3000
    STEP_INDICATOR_WIDTH: int = 600
