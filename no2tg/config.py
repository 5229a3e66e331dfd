"""no2tg configuration management."""

import logging
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from .communication.template import DEFAULT_FOOTER
from .errors import ConfigurationError

logger = logging.getLogger("no2tg.config")

RESOLV_CONF = "/etc/resolv.conf"


class Settings(BaseSettings):
    """Settings loaded from environment variables or .env file."""

    # Notion
    notion_auth_key: Optional[str] = Field(
        default=None, validation_alias="NOTION_AUTH_KEY", description="Notion integration token",
    )
    notion_database_id: Optional[str] = Field(
        default=None, validation_alias="NOTION_DATABASE_ID", description="Publishing database ID",
    )

    # Telegram
    telegram_bot_token: Optional[str] = Field(
        default=None, validation_alias="TELEGRAM_BOT_TOKEN", description="Telegram bot token",
    )
    telegram_chat_id: Optional[str] = Field(
        default=None, validation_alias="TELEGRAM_CHAT_ID", description="Target channel or chat ID",
    )

    # Proxy
    proxy: bool = Field(default=False, description="Route HTTP traffic through a proxy")
    proxy_address: Optional[str] = Field(default=None, description="Explicit proxy URL")
    proxy_at_wsl: bool = Field(default=False, description="Use the Windows host as proxy from WSL")
    proxy_at_wsl_port: int = Field(default=7890, description="Proxy port on the Windows host")

    # Publishing
    auto_change_status: bool = Field(default=False, description="Mark pages Published after sending")
    footer: str = Field(default=DEFAULT_FOOTER, description="Channel attribution line")

    # Runtime
    timeout: float = Field(default=30.0, description="HTTP timeout in seconds")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    model_config = {
        "env_prefix": "NO2TG_",
        "env_file": ".env",
        "extra": "ignore",
        "populate_by_name": True,
    }


def load_settings() -> Settings:
    """Load settings from environment."""
    return Settings()


def require(settings: Settings, *fields: str) -> None:
    """Raise ConfigurationError if any of ``fields`` is unset."""
    missing = [name for name in fields if not getattr(settings, name)]
    if missing:
        names = ", ".join(Settings.model_fields[name].validation_alias or name for name in missing)
        raise ConfigurationError(f"Missing required settings: {names}")


def _wsl_host_ip(resolv_conf: str = RESOLV_CONF) -> Optional[str]:
    """Read the Windows host IP from the WSL nameserver entry."""
    try:
        with open(resolv_conf, encoding="utf-8") as f:
            for line in f:
                parts = line.split()
                if len(parts) >= 2 and parts[0] == "nameserver":
                    return parts[1]
    except OSError as e:
        logger.warning(f"Cannot read {resolv_conf}: {e}")
    return None


def resolve_proxy(settings: Settings, resolv_conf: str = RESOLV_CONF) -> Optional[str]:
    """Return the proxy URL to use, or None for direct connections.

    The WSL host proxy takes precedence over an explicit address.
    """
    if not settings.proxy:
        return None

    address = settings.proxy_address

    if settings.proxy_at_wsl:
        host_ip = _wsl_host_ip(resolv_conf)
        if host_ip:
            address = f"http://{host_ip}:{settings.proxy_at_wsl_port}"

    if not address:
        logger.warning("Proxy enabled but no proxy address could be resolved.")
        return None

    logger.debug(f"Using proxy {address}")
    return address
