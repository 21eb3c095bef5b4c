"""
Console host.

Runs the agent from a terminal: requests does the fetching, notifications
go to stderr and the result record is printed to stdout as JSON.
"""

import sys
import json
from typing import Dict, Any, Optional, TextIO
from .base import BaseHost
from ..client import fetch_info
from ..debug import debug_host_method
from ..models import RenderResult


class ConsoleHost(BaseHost):
    """Host implementation for command-line use."""

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        """
        Initialize the console host.

        Args:
            stdout: Stream for the result record (default sys.stdout)
            stderr: Stream for notifications (default sys.stderr)
        """
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.notifications = []
        self.result: Optional[RenderResult] = None

    @debug_host_method
    def fetch_json(self, url: str, timeout: float) -> Dict[str, Any]:
        return fetch_info(url, timeout)

    def notify(self, subtitle: str, title: str, content: str) -> None:
        self.notifications.append((subtitle, title, content))
        print(f"[{subtitle}] {title}", file=self.stderr)
        for line in content.split('\n'):
            print(f"  {line}", file=self.stderr)

    def complete(self, result: RenderResult) -> None:
        self.result = result
        print(json.dumps(result.to_dict(), ensure_ascii=False), file=self.stdout)
