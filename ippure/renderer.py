"""
Rendering of the info document into panel title and content.
"""

from typing import List, Tuple
from .formatting import NOT_AVAILABLE, country_flag, format_number, mask_ip, risk_label
from .models import InfoResponse
from .options import Options

PRODUCT_NAME = "IPPure"
FAILURE_TITLE = f"{PRODUCT_NAME} ❌"
FAILURE_PREFIX = "查询失败: "
NOTIFICATION_SUBTITLE = "IPPure 网络信息"

RESIDENTIAL_TAG = "🏠 原生住宅 IP"
NON_RESIDENTIAL_TAG = "🖥️ 非住宅 IP"
BROADCAST_TAG = "📡 广播 IP"


def build_title(info: InfoResponse, options: Options) -> str:
    """Flag-prefixed (optionally masked) IP address."""
    if options.mask:
        ip = mask_ip(info.ip)
    else:
        ip = str(info.ip) if info.ip else NOT_AVAILABLE

    flag = country_flag(info.country_code) if options.flag else ""
    return f"{flag} {ip}" if flag else ip


def build_lines(info: InfoResponse, options: Options) -> List[str]:
    """
    Build the content lines for enabled sections.

    The location line is always present; other sections are skipped
    entirely when disabled or when they have nothing to show.

    Args:
        info: Parsed info document
        options: Parsed arguments

    Returns:
        Content lines in display order
    """
    location = ", ".join(str(part) for part in (info.city, info.region, info.country) if part)
    lines = [f"📍 {location}"]

    asn_parts = []
    if options.asn and info.asn:
        asn_parts.append(f"AS{format_number(info.asn)}")
    if options.org and info.as_organization:
        asn_parts.append(str(info.as_organization))
    if asn_parts:
        lines.append(f"🏢 {' · '.join(asn_parts)}")

    if options.risk and info.fraud_score is not None:
        lines.append(f"🛡️ 风险: {risk_label(info.fraud_score)}")

    if options.geo:
        lat = NOT_AVAILABLE if info.latitude in (None, "") else format_number(info.latitude)
        lon = NOT_AVAILABLE if info.longitude in (None, "") else format_number(info.longitude)
        lines.append(f"🌐 {lat}, {lon}")

    if options.residential:
        tags = []
        if info.is_residential is True:
            tags.append(RESIDENTIAL_TAG)
        elif info.is_residential is False:
            tags.append(NON_RESIDENTIAL_TAG)
        if info.is_broadcast is True:
            tags.append(BROADCAST_TAG)
        if tags:
            lines.append(" | ".join(tags))

    return lines


def render_info(info: InfoResponse, options: Options) -> Tuple[str, str]:
    """Return (title, content) for a successful query."""
    return build_title(info, options), "\n".join(build_lines(info, options))


def render_failure(error: Exception) -> Tuple[str, str]:
    """Return (title, content) for a failed query."""
    return FAILURE_TITLE, f"{FAILURE_PREFIX}{error}"
