# src/prompt_context/core/header.py
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Tuple

from prompt_context.core.paths import PathLike, normalize_path

logger = logging.getLogger(__name__)

# Extension -> line comment prefix, used by the CLI host to comment a header line.
LINE_COMMENT_PREFIXES = {
    ".py": "#", ".sh": "#", ".bash": "#", ".zsh": "#", ".rb": "#", ".pl": "#",
    ".r": "#", ".toml": "#", ".yaml": "#", ".yml": "#", ".cfg": "#", ".ini": ";",
    ".js": "//", ".jsx": "//", ".ts": "//", ".tsx": "//", ".mjs": "//", ".cjs": "//",
    ".java": "//", ".kt": "//", ".scala": "//", ".go": "//", ".rs": "//", ".swift": "//",
    ".c": "//", ".h": "//", ".cpp": "//", ".hpp": "//", ".cc": "//", ".cs": "//",
    ".php": "//", ".dart": "//",
    ".sql": "--", ".lua": "--", ".hs": "--",
    ".tex": "%", ".erl": "%",
    ".vim": '"',
}


@dataclass
class Document:
    """An editable text buffer with a caret, standing in for an editor document."""
    path: Path
    lines: List[str] = field(default_factory=lambda: [""])
    caret: Tuple[int, int] = (0, 0)
    trailing_newline: bool = False

    @classmethod
    def from_file(cls, path: PathLike) -> "Document":
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        trailing = text.endswith("\n")
        if trailing:
            text = text[:-1]
        return cls(path=path, lines=text.split("\n"), trailing_newline=trailing)

    @property
    def text(self) -> str:
        return "\n".join(self.lines) + ("\n" if self.trailing_newline else "")

    def line_at(self, index: int) -> str:
        return self.lines[index]

    def insert(self, line: int, column: int, text: str) -> None:
        """Inserts text (which may contain newlines) at a position."""
        current = self.lines[line]
        merged = current[:column] + text + current[column:]
        self.lines[line:line + 1] = merged.split("\n")

    def replace_line(self, index: int, text: str) -> None:
        self.lines[index] = text

    def save(self) -> None:
        self.path.write_text(self.text, encoding="utf-8")


def comment_for_extension(extension: str) -> Callable[[str], str]:
    """Builds a comment synthesizer for a file type. Unknown types are left as-is."""
    prefix = LINE_COMMENT_PREFIXES.get(extension.lower())

    def _comment(line: str) -> str:
        if prefix is None:
            return line
        return f"{prefix} {line}"

    return _comment


def has_path_header(document: Document, root: PathLike) -> bool:
    return normalize_path(document.path, root) in document.line_at(0)


def insert_path_header(document: Document, root: PathLike, comment_line: Callable[[str], str]) -> bool:
    """
    Stamps the document's relative path as a comment on line 1.

    No-op when line 1 already contains the path, so repeated calls never
    duplicate the header. The caret keeps its place in the text, shifted down
    by the inserted line. Returns True when a header was added. Edit failures
    are logged and reported as False.
    """
    if has_path_header(document, root):
        logger.info("Path header already present.")
        return False

    line, column = document.caret
    snapshot = list(document.lines)
    try:
        document.insert(0, 0, normalize_path(document.path, root) + "\n")
        document.replace_line(0, comment_line(document.line_at(0)))
    except Exception:
        logger.exception("Add path header failed for %s", document.path)
        document.lines = snapshot
        return False

    document.caret = (line + 1, column)
    logger.info("Path header added.")
    return True
