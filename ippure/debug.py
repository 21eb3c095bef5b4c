"""
Debug utilities for ippure.

This module provides debugging output for host calls, the info query and
the overall run when debug mode is enabled.
"""

import sys
import time
import json
from typing import Any, Dict, Optional, Callable
from functools import wraps
from .config import config


class DebugLogger:
    """Debug logger for low-level diagnostics."""

    def __init__(self):
        """Initialize debug logger."""
        self.start_time = time.time()
        self.host_call_count = 0

    def log(self, level: str, message: str, data: Optional[Dict[str, Any]] = None):
        """
        Log debug message with optional data.

        Args:
            level: Debug level ('basic', 'detailed', 'verbose')
            message: Debug message
            data: Optional data to include
        """
        if not config.is_debug_mode():
            return

        current_level = config.get_debug_level()

        level_hierarchy = {'basic': 0, 'detailed': 1, 'verbose': 2}
        if level_hierarchy.get(level, 0) > level_hierarchy.get(current_level, 0):
            return

        timestamp = time.time() - self.start_time
        prefix = f"[DEBUG +{timestamp:.3f}s]"

        print(f"{prefix} {message}", file=sys.stderr)

        if data and current_level in ('detailed', 'verbose'):
            self._print_data(data, current_level)

    def _print_data(self, data: Dict[str, Any], level: str):
        """Print debug data with appropriate formatting."""
        try:
            if level == 'verbose':
                formatted = json.dumps(data, indent=2, default=str, ensure_ascii=False)
                for line in formatted.split('\n'):
                    print(f"[DEBUG]   {line}", file=sys.stderr)
            else:
                for key, value in data.items():
                    if isinstance(value, dict):
                        print(f"[DEBUG]   {key}: {len(value)} items", file=sys.stderr)
                    elif isinstance(value, list):
                        print(f"[DEBUG]   {key}: [{len(value)} items]", file=sys.stderr)
                    elif isinstance(value, str) and len(value) > 100:
                        print(f"[DEBUG]   {key}: '{value[:97]}...'", file=sys.stderr)
                    else:
                        print(f"[DEBUG]   {key}: {value}", file=sys.stderr)
        except (TypeError, ValueError):
            print("[DEBUG]   <data formatting error>", file=sys.stderr)

    def log_host_call(self, host_name: str, method: str, args: tuple = ()):
        """Log host method call."""
        self.host_call_count += 1

        args_str = ", ".join(str(arg) for arg in args[:2])
        if len(args) > 2:
            args_str += f", ... (+{len(args)-2} more)"

        self.log('basic', f"Host call #{self.host_call_count}: {host_name}.{method}({args_str})")

    def log_host_result(self, host_name: str, method: str, result: Any, execution_time: float):
        """Log host method result."""
        self.log('basic', f"Host result: {host_name}.{method} -> {self._summarize_result(result)} ({execution_time:.3f}s)")

    def log_host_error(self, host_name: str, method: str, error: Exception, execution_time: float):
        """Log host method error."""
        error_type = type(error).__name__
        error_msg = str(error)[:100]

        self.log('basic', f"Host error: {host_name}.{method} -> {error_type}: {error_msg} ({execution_time:.3f}s)")

    def _summarize_result(self, result: Any) -> str:
        """Create a summary of the result for logging."""
        if result is None:
            return "None"
        elif isinstance(result, dict):
            return f"dict({len(result)} keys)"
        elif isinstance(result, list):
            return f"list({len(result)} items)"
        elif isinstance(result, str):
            return f"str({len(result)} chars)"
        else:
            return type(result).__name__

    def log_run_start(self, raw_argument: Optional[str]):
        """Log start of a run."""
        self.log('basic', f"Starting run with argument: {raw_argument!r}")

    def log_options(self, options: Dict[str, Any]):
        """Log the parsed options."""
        self.log('detailed', "Parsed options:", options)

    def log_query_result(self, url: str, document: Dict[str, Any]):
        """Log a successful info query and, in verbose mode, the payload."""
        self.log('basic', f"Query succeeded: {url} -> {self._summarize_result(document)}")
        self.log('verbose', "Info payload:", document)

    def log_query_error(self, url: str, error: Exception):
        """Log a failed info query."""
        self.log('basic', f"Query failed: {url} -> {type(error).__name__}: {str(error)[:100]}")

    def log_run_complete(self, title: str, total_time: float, succeeded: bool):
        """Log completion of a run."""
        status = "ok" if succeeded else "failed"
        self.log('basic', f"Completed run ({status}): {title!r}, {total_time:.3f}s total")

    def log_config_info(self):
        """Log current configuration in debug mode."""
        if not config.is_debug_mode():
            return

        debug_info = {
            'debug_level': config.get_debug_level(),
            'endpoint': config.get_endpoint_url(),
            'user_agent': config.get_user_agent(),
        }

        self.log('detailed', "Current configuration:", debug_info)


def debug_host_method(func: Callable) -> Callable:
    """
    Decorator to add debug logging to host methods.

    This decorator logs host method calls, results, and errors
    when debug mode is enabled.
    """
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        if not config.is_debug_mode():
            return func(self, *args, **kwargs)

        host_name = self.__class__.__name__
        method_name = func.__name__

        debug_logger.log_host_call(host_name, method_name, args)

        start_time = time.time()
        try:
            result = func(self, *args, **kwargs)
            execution_time = time.time() - start_time
            debug_logger.log_host_result(host_name, method_name, result, execution_time)
            return result
        except Exception as e:
            execution_time = time.time() - start_time
            debug_logger.log_host_error(host_name, method_name, e, execution_time)
            raise

    return wrapper


# Global debug logger instance
debug_logger = DebugLogger()
