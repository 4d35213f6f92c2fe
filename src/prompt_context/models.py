# src/prompt_context/models.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FileKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class Stat:
    kind: FileKind
    size_bytes: int


@dataclass(frozen=True)
class RenderedBlock:
    """One file (or skip notice) in the bundle."""
    header_line: str
    body: str
    skipped: bool = False

    def render(self) -> str:
        return f"{self.header_line}\n{self.body}"


@dataclass(frozen=True)
class BuildResult:
    content: str
    processed_count: int
    skipped_count: int
    cancelled: bool = False


@dataclass(frozen=True)
class TextRange:
    """
    A selected span of a document. Positions are 0-based.
    When the end position is known, emptiness is decided by position, so a
    selected blank line is not an empty selection.
    """
    start_line: int
    start_char: int
    text: str
    end_line: Optional[int] = None
    end_char: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        if self.end_line is not None and self.end_char is not None:
            return (self.end_line, self.end_char) <= (self.start_line, self.start_char)
        return self.text == ""


class BundleMode(str, Enum):
    FILES = "files"
    SELECTION = "selection"


class BundleStatus(str, Enum):
    COPIED = "copied"
    EMPTY = "empty"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class ContextBundle:
    """Final outcome of one invocation, ready for the clipboard."""
    content: str
    mode: BundleMode
    processed_count: int = 0
    skipped_count: int = 0
    cancelled: bool = False
    tokens: int = 0

    @property
    def status(self) -> BundleStatus:
        if self.content:
            return BundleStatus.COPIED
        if self.cancelled:
            return BundleStatus.CANCELLED
        return BundleStatus.EMPTY
