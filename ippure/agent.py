"""
Main agent orchestrator for the IPPure panel and event script.

This module runs one query per invocation: parse the host argument, wait
out the event debounce, fetch the info document and hand the rendered
summary back to the host.
"""

import sys
import time
import argparse
import logging
import os
from typing import Callable, Optional, Tuple
from .config import config
from .debug import debug_logger
from .errors import IPPureError, RenderError
from .hosts import BaseHost, ConsoleHost
from .models import InfoResponse, RenderResult
from .options import parse_arguments
from .renderer import NOTIFICATION_SUBTITLE, render_failure, render_info
from .security import security

logger = logging.getLogger(__name__)


class IPPureAgent:
    """Runs a single query against the info endpoint for a host."""

    def __init__(self, host: BaseHost, sleep: Optional[Callable[[float], None]] = None):
        """
        Initialize the agent.

        Args:
            host: Host supplying fetching, notification and completion
            sleep: Function used for the event debounce delay (default time.sleep)
        """
        self.host = host
        self.sleep = sleep or time.sleep

    def run(self, raw_argument: Optional[str] = None) -> RenderResult:
        """
        Perform one query and deliver the result to the host.

        Query failures never escape: they are rendered into the failure
        title and content. In event mode a notification is posted on both
        the success and the failure path.

        Args:
            raw_argument: ``KEY=VALUE&...`` string supplied by the host

        Returns:
            The record passed to ``host.complete``
        """
        start_time = time.time()

        debug_logger.log_run_start(raw_argument)
        debug_logger.log_config_info()

        options = parse_arguments(raw_argument)
        debug_logger.log_options(options.as_dict())

        if options.is_event and options.event_delay > 0:
            debug_logger.log('basic', f"Event mode, waiting {options.event_delay}s before querying")
            self.sleep(options.event_delay)

        url = config.get_endpoint_url()
        succeeded = True
        try:
            document = self.host.fetch_json(url, options.timeout)
            debug_logger.log_query_result(url, document)
            title, content = self._render(document, options)
        except IPPureError as e:
            succeeded = False
            logger.warning(f"IPPure query failed: {security.sanitize_log_text(str(e))}")
            debug_logger.log_query_error(url, e)
            title, content = render_failure(e)

        if options.is_event:
            self.host.notify(NOTIFICATION_SUBTITLE, title, content)

        result = RenderResult(
            title=title,
            content=content,
            icon=options.icon,
            icon_color=options.icon_color
        )
        self.host.complete(result)

        debug_logger.log_run_complete(title, time.time() - start_time, succeeded)
        return result

    def _render(self, document, options) -> Tuple[str, str]:
        """Render a fetched document, turning field type faults into RenderError."""
        try:
            return render_info(InfoResponse.from_document(document), options)
        except (AttributeError, TypeError, ValueError) as e:
            raise RenderError(e) from e


def main(argv=None):
    """Command-line entry point for the IPPure panel script."""
    parser = argparse.ArgumentParser(
        description='Query IPPure for the current IP address and print a panel record',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Argument keys (joined with '&'):
  TYPE=PANEL|EVENT     - EVENT also posts a notification (default PANEL)
  FLAG, ASN, ORG, RISK,
  RESIDENTIAL, GEO=0   - Hide a section (all shown by default)
  MASK=1               - Mask the IP address
  TIMEOUT=10           - Request timeout in seconds
  ICON, ICON_COLOR     - Panel icon and color
  EVENT_DELAY=3        - Seconds to wait before querying in EVENT mode

Environment Variables:
  IPPURE_DEBUG=true          - Enable debug mode with diagnostic output
  IPPURE_DEBUG_LEVEL=basic   - Debug verbosity: basic, detailed, verbose

Examples:
  python -m ippure                                # Panel with all sections
  python -m ippure "MASK=1&GEO=0"                 # Masked IP, no coordinates
  python -m ippure "TYPE=EVENT&EVENT_DELAY=0"     # Notify immediately
"""
    )

    parser.add_argument('argument', nargs='?', default='',
                       help='KEY=VALUE&KEY=VALUE argument string')
    parser.add_argument('--debug', action='store_true',
                       help='Enable debug mode with low-level diagnostic output')
    parser.add_argument('--debug-level', choices=['basic', 'detailed', 'verbose'], default='basic',
                       help='Debug verbosity level (default: basic)')

    args = parser.parse_args(argv)

    if args.debug:
        os.environ['IPPURE_DEBUG'] = 'true'
        os.environ['IPPURE_DEBUG_LEVEL'] = args.debug_level

    agent = IPPureAgent(ConsoleHost())

    try:
        agent.run(args.argument)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
