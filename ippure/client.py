"""
IPPure info endpoint client.

Issues the single GET request per run and turns request failures into
``TransportError`` and undecodable bodies into ``ParseError``.
"""

import logging
import requests
from typing import Dict, Any
from .config import config
from .errors import TransportError, ParseError
from .security import security

logger = logging.getLogger(__name__)


def fetch_info(url: str, timeout: float) -> Dict[str, Any]:
    """
    Fetch and decode the info document.

    Args:
        url: HTTPS endpoint to query
        timeout: Request timeout in seconds

    Returns:
        Decoded JSON object

    Raises:
        TransportError: The request failed or returned an error status
        ParseError: The body is not a JSON object
    """
    headers = {
        'User-Agent': config.get_user_agent()
    }

    try:
        response = requests.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.warning(f"Info request failed: {security.sanitize_log_text(str(e))}")
        raise TransportError(e) from e

    try:
        document = response.json()
    except ValueError as e:
        logger.warning("Info response is not valid JSON")
        raise ParseError(response.text) from e

    if not isinstance(document, dict):
        logger.warning(f"Info response is {type(document).__name__}, expected object")
        raise ParseError(response.text)

    return document
