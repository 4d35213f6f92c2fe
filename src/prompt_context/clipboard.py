# src/prompt_context/clipboard.py
import logging

import pyperclip

from prompt_context.errors import ClipboardError

logger = logging.getLogger(__name__)


class PyperclipClipboard:
    """Clipboard sink backed by the system clipboard."""

    def write(self, text: str) -> None:
        logger.info("Copying %d chars to clipboard...", len(text))
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Failed to copy content to clipboard: {e}") from e
