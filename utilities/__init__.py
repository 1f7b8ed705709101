"""Utility modules for the stream search client."""

from utilities.debug_logger import buffer as debug_buffer
from utilities.debug_logger import finalize as finalize_debug
from utilities.debug_logger import get_logger, init_debug
from utilities.logging_utils import log_exception, safe_log
from utilities.network import read_json_object, send_request

__all__ = [
    "debug_buffer",
    "finalize_debug",
    "get_logger",
    "init_debug",
    "log_exception",
    "read_json_object",
    "safe_log",
    "send_request",
]
