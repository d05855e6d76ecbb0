"""Utility modules for DeepL Search: logging and clipboard access."""

from utils.clipboard_utils import ClipboardUtils
from utils.logger_utils import TRACE, LoggerUtils

__all__: list[str] = ["TRACE", "ClipboardUtils", "LoggerUtils"]
