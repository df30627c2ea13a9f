# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env file.
#   Provides typed config objects to all other modules.
#
# CLASSES:
# --------
# - GatewayConfig (dataclass)
#     url: str               (default "http://localhost:4000")
#     timeout_seconds: float (default 10.0)
#
# - TelemetryConfig (dataclass)
#     enabled: bool          (default False)
#     events_file: str       (default ".gateway_emit/telemetry.jsonl")
#
# - AppConfig (dataclass)
#     gateway: GatewayConfig
#     telemetry: TelemetryConfig
#     service_path: str      (default current working directory)
#     log_level: str         (default "WARNING")
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the cached singleton (tests, long-lived shells).
#
# USAGE:
# ------
#   from gateway_emit.config import get_config
#   config = get_config()
#   print(config.gateway.url)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


DEFAULT_GATEWAY_URL = "http://localhost:4000"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class GatewayConfig:
    """Event Gateway endpoint configuration."""
    url: str = DEFAULT_GATEWAY_URL
    timeout_seconds: float = 10.0


@dataclass
class TelemetryConfig:
    """Usage tracking configuration."""
    enabled: bool = False
    events_file: str = ".gateway_emit/telemetry.jsonl"


@dataclass
class AppConfig:
    """Main application configuration."""
    gateway: GatewayConfig = field(default_factory=GatewayConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)
    service_path: str = field(default_factory=os.getcwd)
    log_level: str = "WARNING"


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # .env in the working directory wins over one next to the package
    load_dotenv(dotenv_path=Path.cwd() / ".env")
    load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")

    gateway_config = GatewayConfig(
        url=os.getenv("EVENT_GATEWAY_URL") or DEFAULT_GATEWAY_URL,
        timeout_seconds=float(os.getenv("EVENT_GATEWAY_TIMEOUT", "10.0"))
    )

    telemetry_config = TelemetryConfig(
        enabled=_env_flag("TELEMETRY_ENABLED"),
        events_file=os.getenv("TELEMETRY_FILE", ".gateway_emit/telemetry.jsonl")
    )

    _config_instance = AppConfig(
        gateway=gateway_config,
        telemetry=telemetry_config,
        service_path=os.getenv("SERVICE_PATH") or os.getcwd(),
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper()
    )

    return _config_instance


def reset_config() -> None:
    global _config_instance
    _config_instance = None
