"""Configuration adapters."""

from bart_client.adapters.config.app_config import DEFAULT_API_KEY, BartConfig

__all__ = ["DEFAULT_API_KEY", "BartConfig"]
