"""
Centralized configuration with environment variable overrides.

Venue identity and chat limits are configurable here. Pricing constants,
assistant copy and the venue preview link are fixed in code.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from happyhearts.logging_context import configure_logging

load_dotenv()

logger = logging.getLogger(__name__)


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class BusinessConfig:
    """Venue identity shown by the console caller."""

    name: str = os.getenv("BUSINESS_NAME", "HAPPY HEARTS")
    assistant_name: str = os.getenv("ASSISTANT_NAME", "HappyHearts Assistant")
    tagline: str = os.getenv(
        "BUSINESS_TAGLINE",
        "Fast, friendly booking support for HAPPY HEARTS – An Event Space.",
    )


@dataclass(frozen=True)
class ChatConfig:
    """Limits applied by the caller before a message reaches the engine."""

    max_message_length: int = _safe_int("MAX_MESSAGE_LENGTH", "400")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    business: BusinessConfig = field(default_factory=BusinessConfig)
    chat: ChatConfig = field(default_factory=ChatConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if not config.business.name.strip():
        raise ValueError("BUSINESS_NAME must not be empty")
    if config.chat.max_message_length < 1:
        raise ValueError(
            f"MAX_MESSAGE_LENGTH must be >= 1, got {config.chat.max_message_length}"
        )


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    configure_logging(getattr(logging, config.log_level.upper(), logging.INFO))
    logger.info("Configuration loaded for '%s'", config.business.name)
    return config


# Singleton instance
settings = load_config()
