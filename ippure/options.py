"""
Argument parsing for the panel/event script.

The host passes a single ``KEY=VALUE&KEY=VALUE`` string. Parsing never
fails: every malformed or missing value falls back to its default.
"""

import re
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional

DEFAULT_TIMEOUT = 10
DEFAULT_ICON = "globe.asia.australia"
DEFAULT_ICON_COLOR = "#6699FF"
DEFAULT_EVENT_DELAY = 3

_LEADING_INT = re.compile(r'^[+-]?\d+')

# Sections that are on unless explicitly set to "0"
_TOGGLE_KEYS = {
    'flag': 'FLAG',
    'asn': 'ASN',
    'org': 'ORG',
    'risk': 'RISK',
    'residential': 'RESIDENTIAL',
    'geo': 'GEO',
}


class DisplayMode(Enum):
    """Where the rendered summary ends up."""
    PANEL = "PANEL"  # Returned to the host's status panel only
    EVENT = "EVENT"  # Also posted as a notification after a network change

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Options:
    """Typed view of the argument string."""
    mode: DisplayMode = DisplayMode.PANEL
    flag: bool = True
    asn: bool = True
    org: bool = True
    risk: bool = True
    residential: bool = True
    geo: bool = True
    mask: bool = False
    timeout: int = DEFAULT_TIMEOUT
    icon: str = DEFAULT_ICON
    icon_color: str = DEFAULT_ICON_COLOR
    event_delay: int = DEFAULT_EVENT_DELAY

    @property
    def is_event(self) -> bool:
        return self.mode == DisplayMode.EVENT

    def as_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['mode'] = str(self.mode)
        return data


def split_arguments(raw: Optional[str]) -> Dict[str, str]:
    """
    Split ``KEY=VALUE&KEY=VALUE`` into a dictionary.

    Only the first ``=`` separates key from value. Keys and values are
    trimmed, pairs with an empty key are dropped and later keys win.

    Args:
        raw: Raw argument string, possibly None

    Returns:
        Mapping of keys to values
    """
    params: Dict[str, str] = {}
    if not raw:
        return params

    for pair in raw.split('&'):
        key, _, value = pair.partition('=')
        key = key.strip()
        if key:
            params[key] = value.strip()
    return params


def _parse_int(value: Optional[str]) -> Optional[int]:
    """Read the leading integer of a value, ``"5s"`` gives 5."""
    if not value:
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    return int(match.group(0))


def parse_arguments(raw: Optional[str]) -> Options:
    """
    Build Options from the host argument string.

    Args:
        raw: Raw argument string, possibly None or empty

    Returns:
        Options with defaults for every missing or invalid value
    """
    params = split_arguments(raw)

    mode = DisplayMode.EVENT if params.get('TYPE') == DisplayMode.EVENT.value else DisplayMode.PANEL
    toggles = {field: params.get(key) != '0' for field, key in _TOGGLE_KEYS.items()}

    timeout = _parse_int(params.get('TIMEOUT'))
    if timeout is None or timeout <= 0:
        timeout = DEFAULT_TIMEOUT

    event_delay = _parse_int(params.get('EVENT_DELAY'))
    if event_delay is None or event_delay < 0:
        event_delay = DEFAULT_EVENT_DELAY

    return Options(
        mode=mode,
        mask=params.get('MASK') == '1',
        timeout=timeout,
        icon=params.get('ICON') or DEFAULT_ICON,
        icon_color=params.get('ICON_COLOR') or DEFAULT_ICON_COLOR,
        event_delay=event_delay,
        **toggles
    )
