"""
Base host interface.

A host is the automation environment the script runs in. It owns the HTTP
client, the notification sink and the completion callback; the agent only
talks to it through this interface.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any
from ..models import RenderResult


class BaseHost(ABC):
    """Capabilities the agent needs from its host."""

    @abstractmethod
    def fetch_json(self, url: str, timeout: float) -> Dict[str, Any]:
        """
        Fetch a URL and decode its JSON body.

        Args:
            url: URL to request
            timeout: Request timeout in seconds

        Returns:
            Decoded JSON object

        Raises:
            TransportError: The request could not complete
            ParseError: The body is not a JSON object
        """
        pass

    @abstractmethod
    def notify(self, subtitle: str, title: str, content: str) -> None:
        """
        Post a push notification.

        Args:
            subtitle: Fixed category label
            title: Notification title
            content: Notification body
        """
        pass

    @abstractmethod
    def complete(self, result: RenderResult) -> None:
        """
        Hand the final record to the host. Called exactly once per run.

        Args:
            result: Rendered panel
        """
        pass
