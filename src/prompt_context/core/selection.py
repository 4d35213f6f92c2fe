# src/prompt_context/core/selection.py
import re
from typing import List, Optional, Sequence, Tuple

from prompt_context.core.paths import PathLike, file_extension, language_tag, normalize_path
from prompt_context.models import TextRange

GAP_MARKER = "\n\n... (Gap) ...\n\n"

_LINE_BREAK = re.compile(r"\r?\n")


def parse_line_spec(spec: str) -> List[Tuple[int, int]]:
    """
    Parses '3-4,10' into [(3, 4), (10, 10)]. Line numbers are 1-based and inclusive.
    Raises ValueError on malformed input.
    """
    spans = []
    for part in spec.split(","):
        part = part.strip()
        if not part:
            continue
        start_str, sep, end_str = part.partition("-")
        try:
            start = int(start_str)
            end = int(end_str) if sep else start
        except ValueError:
            raise ValueError(f"Invalid line range: '{part}'") from None
        if start < 1 or end < start:
            raise ValueError(f"Invalid line range: '{part}'")
        spans.append((start, end))
    if not spans:
        raise ValueError(f"No line ranges in '{spec}'")
    return spans


def ranges_from_lines(lines: Sequence[str], spans: Sequence[Tuple[int, int]]) -> List[TextRange]:
    """Turns 1-based line spans of a document into selected ranges, in the order given."""
    ranges = []
    for start, end in spans:
        if start > len(lines):
            raise ValueError(f"Line {start} is past the end of the document ({len(lines)} lines)")
        end = min(end, len(lines))
        # Whole-line selection: ends at the start of the line after the span
        ranges.append(TextRange(
            start_line=start - 1,
            start_char=0,
            text="\n".join(lines[start - 1:end]),
            end_line=end,
            end_char=0,
        ))
    return ranges


def number_lines(selection: TextRange) -> str:
    """Prefixes each line of the range with its 1-based line number."""
    first = selection.start_line + 1
    lines = _LINE_BREAK.split(selection.text)
    return "\n".join(f"{first + i:<4} | {line}" for i, line in enumerate(lines))


def render_selection(
    path: PathLike,
    selections: Sequence[TextRange],
    root: PathLike,
    language_id: Optional[str] = None,
) -> Optional[str]:
    """
    Formats one or more selected ranges of a document as a single fenced block.

    Ranges are rendered in document order regardless of the order they were
    made in, and non-adjacent ranges are separated by a '(Gap)' marker.
    Returns None when there is nothing selected.
    """
    ranges: List[TextRange] = [s for s in selections if not s.is_empty]
    if not ranges:
        return None

    ranges.sort(key=lambda s: (s.start_line, s.start_char))
    lang = language_id or language_tag(file_extension(path))
    body = GAP_MARKER.join(number_lines(s) for s in ranges)
    return f"File: {normalize_path(path, root)} (Selection)\n```{lang}\n{body}\n```"
