from __future__ import annotations

from typing import TYPE_CHECKING

import pyperclip

from utils.logger_utils import TRACE, LoggerUtils

if TYPE_CHECKING:
    import logging

__all__: list[str] = ["ClipboardUtils"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class ClipboardUtils:
    @staticmethod
    def copy(text: str) -> bool:
        """Write ``text`` to the system clipboard.

        Returns:
            bool: True if the clipboard was updated, False if no clipboard mechanism is available.
        """
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as err:
            logger.error("failed to copy to clipboard: %s (%s)", text, err)
            return False
        logger.log(TRACE, "copied to clipboard: %s", text)
        return True
