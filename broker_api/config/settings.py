"""Settings loader backed by environment variables."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class BrokerConfig:
    """Application configuration container."""
    # Catalog
    catalog_path: Optional[str] = None

    # In-memory broker
    instance_limit: int = 100
    dashboard_url_base: str = ""

    # Logging
    log_level: str = "INFO"
    broker_logger_name: str = "broker"

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for ``log_level``."""
        return logging.getLevelName(self.log_level.upper())


def _get_int(var_name: str, default: int, minimum: int = 0) -> int:
    """Read an integer environment variable, rejecting junk and values below minimum."""
    raw = os.environ.get(var_name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"Environment variable {var_name} must be an integer, got {raw!r}.")
    if value < minimum:
        raise RuntimeError(f"Environment variable {var_name} must be >= {minimum}, got {value}.")
    return value


def _get_log_level(var_name: str, default: str) -> str:
    """Read a logging level name from the environment."""
    level = os.environ.get(var_name, default).strip().upper() or default
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"Environment variable {var_name} is not a valid log level: {level!r}.")
    return level


def load_settings() -> BrokerConfig:
    """Load application settings from the environment."""
    # Catalog file (optional; built-in catalog otherwise)
    catalog_path = os.environ.get("BROKER_CATALOG_PATH", "").strip() or None
    if catalog_path and not Path(catalog_path).is_file():
        raise RuntimeError(f"BROKER_CATALOG_PATH points to a missing file: {catalog_path}")

    instance_limit = _get_int("BROKER_INSTANCE_LIMIT", default=100)
    dashboard_url_base = os.environ.get("BROKER_DASHBOARD_URL", "").strip()

    log_level = _get_log_level("BROKER_LOG_LEVEL", "INFO")
    broker_logger_name = os.environ.get("BROKER_LOGGER_NAME", "").strip() or "broker"

    catalog_label = catalog_path or "built-in"
    limit_label = instance_limit if instance_limit else "unlimited"
    print(f"[settings] catalog={catalog_label}; instance_limit={limit_label}; log_level={log_level}")

    return BrokerConfig(
        catalog_path=catalog_path,
        instance_limit=instance_limit,
        dashboard_url_base=dashboard_url_base,
        log_level=log_level,
        broker_logger_name=broker_logger_name,
    )
