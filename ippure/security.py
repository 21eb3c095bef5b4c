"""
Security utilities for ippure.

This module sanitizes error text before it reaches the logs.
"""

import re


class SecurityValidator:
    """Security validation utilities."""

    def __init__(self):
        """Initialize security validator."""
        # Credential shapes that must never reach a log line
        self._credential_patterns = [
            r'[Aa]pi[_\s-]*[Kk]ey[:\s=]+[\w\-]{8,}',
            r'[Tt]oken[:\s=]+[\w\-]{8,}',
            r'[Aa]uthorization[:\s=]+[\w\-]{8,}',
            r'Bearer\s+[\w\-]{8,}',
        ]

    def sanitize_log_text(self, text: str, max_length: int = 500) -> str:
        """
        Sanitize error text before logging it.

        Credentials and local source paths are redacted, control characters
        are hex-escaped and the result is truncated.

        Args:
            text: Text to sanitize
            max_length: Maximum allowed length

        Returns:
            Sanitized text
        """
        if not text:
            return ""

        sanitized = str(text)

        for pattern in self._credential_patterns:
            sanitized = re.sub(pattern, '[REDACTED]', sanitized)

        sanitized = re.sub(r'/[a-zA-Z0-9/_\-\.]+\.py', '[PATH]', sanitized)

        sanitized = sanitized[:max_length]

        escaped = ""
        for char in sanitized:
            if char.isprintable() or char in {' ', '\t'}:
                escaped += char
            else:
                escaped += f"\\x{ord(char):02x}"

        return escaped

# Global security validator instance
security = SecurityValidator()
