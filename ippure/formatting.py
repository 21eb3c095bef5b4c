"""
Pure formatting helpers used to render the info summary.
"""

from typing import Any, Optional

NOT_AVAILABLE = "N/A"

# Regional indicator symbol letter A
_REGIONAL_INDICATOR_A = 0x1F1E6


def format_number(value: Any) -> str:
    """Render a JSON number the way the host displays it (``39.0`` -> ``39``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def country_flag(code: Optional[str]) -> str:
    """
    Convert a two-letter ISO country code into a flag emoji.

    Args:
        code: ISO 3166-1 alpha-2 code, any case

    Returns:
        Pair of regional indicator symbols, or "" for missing/invalid codes
    """
    if not isinstance(code, str) or len(code) != 2:
        return ""

    code = code.upper()
    if not all('A' <= c <= 'Z' for c in code):
        return ""

    return "".join(chr(_REGIONAL_INDICATOR_A + ord(c) - ord('A')) for c in code)


def mask_ip(ip: Optional[str]) -> str:
    """
    Partially redact an IP address.

    IPv6 (anything containing ':') keeps its first two groups, IPv4 keeps its
    first two octets. The address is not validated.

    Args:
        ip: Address to mask

    Returns:
        Masked address, or "N/A" when no address is given
    """
    if not ip:
        return NOT_AVAILABLE

    ip = str(ip)
    if ':' in ip:
        parts = ip.split(':')
        return ":".join(parts[:2]) + ":*:*"

    parts = ip.split('.')
    second = parts[1] if len(parts) > 1 else ""
    return f"{parts[0]}.{second}.*.*"


def risk_label(score: Any) -> str:
    """Render a fraud score as ``"<score>/100"`` or "N/A" when absent."""
    if score is None:
        return NOT_AVAILABLE
    return f"{format_number(score)}/100"
