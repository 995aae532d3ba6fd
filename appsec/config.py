"""
Centralized Configuration Module

API connection settings and logging configuration.
Import from here instead of hardcoding values.
"""

import os
import sys
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from .session import DEFAULT_TIMEOUT

# Initialize logger for this module
logger = logging.getLogger(__name__)


# ============================================================================
# Environment Loading
# ============================================================================

def load_environment(env_file: Optional[str] = None):
    """
    Load environment variables from .env file.

    Args:
        env_file: Optional path to .env file. If None, uses default .env
    """
    if env_file:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=True)
            logger.info(f"Loaded environment from: {env_file}")
        else:
            logger.warning(f"Environment file not found: {env_file}")
    else:
        load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# ============================================================================
# API Settings
# ============================================================================

@dataclass
class ApiConfig:
    """Appsec API connection configuration"""
    base_url: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> 'ApiConfig':
        """
        Read settings from the environment.

        APPSEC_BASE_URL wins over APPSEC_HOST; a bare host is served over https.
        """
        base_url = os.getenv("APPSEC_BASE_URL")
        host = os.getenv("APPSEC_HOST")
        if not base_url and host:
            base_url = f"https://{host}"

        timeout_str = os.getenv("APPSEC_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(timeout_str)
        except ValueError:
            raise ValueError(f"APPSEC_TIMEOUT must be a number, got {timeout_str!r}")

        return cls(
            base_url=base_url or None,
            timeout=timeout,
            verify_ssl=_env_bool("APPSEC_VERIFY_SSL", True),
        )


# ============================================================================
# Logging Configuration
# ============================================================================

class LogConfig:
    """Logging configuration for the CLI; library code only uses module loggers"""

    # Results go to stdout, so the CLI stays quiet unless asked
    LOG_LEVEL = os.getenv("APPSEC_LOG_LEVEL", "WARNING").upper()

    LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
    # Debug traces carry timestamps and source lines for request timing
    DEBUG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    Configure CLI logging on stderr, optionally mirrored to a file.

    Args:
        verbose: Log request traces at DEBUG level
        log_file: Optional path that receives the same records
    """
    log_level = logging.DEBUG if verbose else getattr(logging, LogConfig.LOG_LEVEL, logging.WARNING)
    log_format = LogConfig.DEBUG_FORMAT if verbose else LogConfig.LOG_FORMAT

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=LogConfig.LOG_DATE_FORMAT,
        handlers=handlers,
    )

    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logger.debug(f"Logging configured: level={logging.getLevelName(log_level)}, file={log_file}")


# ============================================================================
# Validation
# ============================================================================

def validate_config(config: ApiConfig):
    """
    Validate configuration before building a client.
    Raises ValueError if critical configuration is missing.
    """
    errors = []

    if not config.base_url:
        errors.append("No API endpoint configured (set APPSEC_HOST or APPSEC_BASE_URL)")
    elif not config.base_url.startswith(("http://", "https://")):
        errors.append(f"APPSEC_BASE_URL must start with http:// or https://, got {config.base_url!r}")

    if config.timeout <= 0:
        errors.append(f"APPSEC_TIMEOUT must be positive, got {config.timeout}")

    if not config.verify_ssl:
        logger.warning("TLS certificate verification disabled")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)

    logger.debug(f"Configuration validated: {config.base_url}")


# Load environment on module import
load_environment()

__all__ = [
    'ApiConfig',
    'LogConfig',
    'load_environment',
    'setup_logging',
    'validate_config',
]
