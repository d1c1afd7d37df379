"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; override them via
environment variables in a real deployment.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    return int(value)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Report List API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  When empty only the console handler
    # is attached.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Routes are exposed as ``{api_prefix}/{list_mode}``, e.g.
    # ``/api/p01a04``.  The mode also names the CSV export file.
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    list_mode: str = os.getenv("LIST_MODE", "p01a04")

    # Number of synthetic records loaded into the store at startup.
    seed_count: int = int(os.getenv("SEED_COUNT", "23"))
    # Registration date assigned to records created without ``regDate``.
    default_reg_date: str = os.getenv("DEFAULT_REG_DATE", "2025-10-06")

    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
    # Optional upper bound for ``size``.  Larger requests are capped to
    # it rather than rejected; unset means no limit.
    max_page_size: Optional[int] = _optional_int(os.getenv("MAX_PAGE_SIZE"))

    # Comma‑separated list of origins allowed to call the API from a
    # browser.  ``*`` allows any origin.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*"))
    )

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    @property
    def export_filename(self) -> str:
        return f"{self.list_mode}_list.csv"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
