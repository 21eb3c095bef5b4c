"""Host collaborators that supply fetching, notifications and completion."""

from .base import BaseHost
from .console import ConsoleHost

__all__ = ['BaseHost', 'ConsoleHost']
