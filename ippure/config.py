"""
Runtime configuration management for ippure.

This module holds the fixed endpoint and User-Agent, and reads the
environment-driven debug settings.
"""

import os

DEFAULT_API_URL = "https://my.ippure.com/v1/info"
USER_AGENT = "Surge/IPPure-Info"


class RuntimeConfig:
    """Configuration manager backed by ``IPPURE_*`` environment variables."""

    def get_endpoint_url(self) -> str:
        """Return the fixed HTTPS info endpoint."""
        return DEFAULT_API_URL

    def get_user_agent(self) -> str:
        """Return the User-Agent header sent with the info request."""
        return USER_AGENT

    def is_debug_mode(self) -> bool:
        """
        Check if debug mode is enabled.

        Returns:
            True if debug mode is enabled
        """
        debug_value = os.getenv('IPPURE_DEBUG', 'false').lower()
        return debug_value in ('true', '1', 'yes', 'on')

    def get_debug_level(self) -> str:
        """
        Get debug level for controlling verbosity.

        Returns:
            Debug level: 'basic', 'detailed', or 'verbose'
        """
        if not self.is_debug_mode():
            return 'off'

        level = os.getenv('IPPURE_DEBUG_LEVEL', 'basic').lower()
        if level in ('basic', 'detailed', 'verbose'):
            return level
        return 'basic'

# Global configuration instance
config = RuntimeConfig()
