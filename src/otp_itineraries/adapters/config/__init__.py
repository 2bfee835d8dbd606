"""Configuration adapters."""

from otp_itineraries.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
