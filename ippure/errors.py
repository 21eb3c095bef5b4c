"""
Error types raised while querying the info endpoint.

Both errors are caught by the agent and turned into the failure panel, so
callers of ``IPPureAgent.run`` never see them.
"""

from typing import Optional

PARSE_ERROR_PREFIX = "JSON 解析失败: "
SNIPPET_LENGTH = 100


class IPPureError(Exception):
    """Base class for query failures."""


class TransportError(IPPureError):
    """The request could not complete (connection, DNS, timeout, HTTP status)."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)


class ParseError(IPPureError):
    """The response body was not a JSON object."""

    def __init__(self, body: Optional[str]):
        self.snippet = (body or "")[:SNIPPET_LENGTH]
        super().__init__(PARSE_ERROR_PREFIX + self.snippet)


class RenderError(IPPureError):
    """The document decoded but a field could not be rendered."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)
