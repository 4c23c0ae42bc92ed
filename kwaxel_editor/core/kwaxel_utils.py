#!/usr/bin/env python3
"""
Common utilities for the Kwaxel editor
Debug logging shared by every module
"""

# Standard library imports
import os
import traceback
from datetime import datetime, timezone

# ================================================================================
# Debug Configuration
# ================================================================================

# Enabled with KWAXEL_DEBUG=1 or the launcher's --debug flag
DEBUG_MODE = os.environ.get("KWAXEL_DEBUG", "").strip().lower() not in ("", "0", "false", "no")


def set_debug_mode(enabled: bool) -> None:
    """Toggle debug output at runtime"""
    global DEBUG_MODE
    DEBUG_MODE = bool(enabled)


# ================================================================================
# Debug Logging Utilities
# ================================================================================


def debug_log(category: str, message: str, level: str = "INFO") -> None:
    """Debug logging with timestamps and categories

    Args:
        category: Category for the log message (e.g., "CONTROLLER", "HISTORY", "IMPORT")
        message: The log message to display
        level: Log level ("INFO", "WARNING", "ERROR", "DEBUG")
    """
    if not DEBUG_MODE:
        return

    timestamp = datetime.now(timezone.utc).strftime("%H:%M:%S.%f")[:-3]
    formatted_msg = f"[{timestamp}] [{category}] [{level}] {message}"

    # Color coding for different log levels
    if level == "ERROR":
        print(f"\033[91m{formatted_msg}\033[0m")  # Red
    elif level == "WARNING":
        print(f"\033[93m{formatted_msg}\033[0m")  # Yellow
    elif level == "DEBUG":
        print(f"\033[94m{formatted_msg}\033[0m")  # Blue
    else:
        print(formatted_msg)


def debug_exception(category: str, exception: Exception) -> None:
    """Log exceptions with full traceback

    Args:
        category: Category for the log message
        exception: The exception to log
    """
    debug_log(
        category, f"Exception: {type(exception).__name__}: {exception!s}", "ERROR"
    )
    if DEBUG_MODE:
        traceback.print_exc()


def clamp(value, minimum, maximum):
    """Clamp value into [minimum, maximum]"""
    return max(minimum, min(maximum, value))
