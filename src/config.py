import os
from dataclasses import dataclass
from typing import Any

import yaml

from src.constants import ANIME3RB_BASE_URL, DEFAULT_CONFIG_PATH, DEFAULT_REQUEST_TIMEOUT


@dataclass(frozen=True)
class Settings:
    """Runtime settings of the bot."""

    site_url: str = ANIME3RB_BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    page_token: str | None = None
    verify_token: str | None = None
    recipient_id: str | None = None


def load_config(path: str = DEFAULT_CONFIG_PATH) -> dict[str, Any] | None:
    """Loads the configuration from a YAML file."""
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except FileNotFoundError:
        return None


def load_settings(path: str = DEFAULT_CONFIG_PATH) -> Settings:
    """
    Builds the settings from the config file and the environment.

    PAGE_TOKEN and VERIFY_TOKEN from the environment take precedence
    over the file. A missing file yields the defaults.
    """
    config_data = load_config(path) or {}
    settings = config_data.get("settings") or {}

    recipient_id = settings.get("recipient_id")

    return Settings(
        site_url=settings.get("site_url", ANIME3RB_BASE_URL),
        request_timeout=float(settings.get("request_timeout", DEFAULT_REQUEST_TIMEOUT)),
        page_token=os.environ.get("PAGE_TOKEN") or settings.get("page_token"),
        verify_token=os.environ.get("VERIFY_TOKEN") or settings.get("verify_token"),
        recipient_id=str(recipient_id) if recipient_id else None,
    )
