# src/prompt_context/core/tree.py
import logging
import os
from typing import List, Sequence, Tuple

from prompt_context.core.ignore import filter_tree_entries
from prompt_context.core.paths import PathLike, normalize_path
from prompt_context.models import FileKind

logger = logging.getLogger(__name__)


def _sort_entries(entries: List[Tuple[str, FileKind]]) -> List[Tuple[str, FileKind]]:
    # Directories first, then alphabetical
    return sorted(entries, key=lambda e: (e[1] != FileKind.DIRECTORY, e[0]))


def generate_tree_context(targets: Sequence[str], root: PathLike, fs) -> str:
    """
    Generates a one-level tree of every directory that holds a selected target.

    Entries that are themselves selected targets are marked with ' (*)'.
    Only exact matches are marked; the contents of a selected folder are not.
    Returns '' when there are no targets.
    """
    if not targets:
        return ""

    selected = set(targets)
    parent_dirs = sorted({os.path.dirname(t) for t in targets})

    lines = ["Project Tree Context:"]
    for dir_path in parent_dirs:
        display = normalize_path(dir_path, root) or "."
        lines.append("")
        lines.append(f"Directory: {display}/")

        try:
            entries = _sort_entries(fs.read_directory(dir_path))
        except OSError as e:
            logger.warning("Failed to list %s: %s", dir_path, e)
            lines.append("(Error reading directory)")
            continue

        entries = filter_tree_entries(entries)
        for i, (name, kind) in enumerate(entries):
            is_last = (i == len(entries) - 1)
            connector = "└── " if is_last else "├── "
            display_name = f"{name}/" if kind == FileKind.DIRECTORY else name
            mark = " (*)" if os.path.join(dir_path, name) in selected else ""
            lines.append(f"{connector}{display_name}{mark}")

    return "\n".join(lines) + "\n\n"
