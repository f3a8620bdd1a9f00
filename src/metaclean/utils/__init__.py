"""Utility module for metaclean."""

from metaclean.utils.logging import get_console, log_success, log_error, log_warning, log_info

__all__ = ["get_console", "log_success", "log_error", "log_warning", "log_info"]
