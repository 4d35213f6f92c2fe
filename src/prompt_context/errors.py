# src/prompt_context/errors.py


class PromptContextError(Exception):
    """Base class for failures surfaced to the user."""


class ClipboardError(PromptContextError):
    """The bundle could not be written to the clipboard."""


class OutputError(PromptContextError):
    """The bundle could not be written to the requested output file."""
