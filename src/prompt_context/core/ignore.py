# src/prompt_context/core/ignore.py
import os
from typing import Iterable, List, Tuple, TypeVar

from prompt_context.config import TREE_IGNORED_NAMES, ExclusionConfig
from prompt_context.core.paths import PathLike, file_extension

T = TypeVar("T")


def is_excluded_dir(path: PathLike, config: ExclusionConfig) -> bool:
    """A directory is skipped when its base name is on the fixed blacklist."""
    name = os.path.basename(os.fspath(path).rstrip("/\\"))
    return name in config.excluded_dirs


def is_excluded_extension(path: PathLike, config: ExclusionConfig) -> bool:
    ext = file_extension(path)
    return bool(ext) and ext in config.excluded_extensions


def filter_tree_entries(entries: Iterable[Tuple[str, T]]) -> List[Tuple[str, T]]:
    """Drops directory listing entries whose name is on the tree ignore list."""
    return [(name, kind) for name, kind in entries if name not in TREE_IGNORED_NAMES]
