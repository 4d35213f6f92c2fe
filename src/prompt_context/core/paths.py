# src/prompt_context/core/paths.py
import os
from pathlib import PurePath
from typing import Union

PathLike = Union[str, PurePath]


def to_posix(path: str) -> str:
    """Replaces every host separator with '/'. Idempotent."""
    path = path.replace(os.sep, "/")
    if os.altsep:
        path = path.replace(os.altsep, "/")
    return path


def relative_path(path: PathLike, root: PathLike) -> str:
    """
    Path relative to the workspace root, as text.
    Paths outside the root are returned unchanged; the root itself becomes ''.
    """
    path_str = os.fspath(path)
    root_str = os.fspath(root)
    if not root_str or not os.path.isabs(path_str):
        return path_str
    root_str = root_str.rstrip("/\\") or root_str
    if path_str == root_str:
        return ""
    prefix = root_str if root_str.endswith(("/", "\\")) else root_str + os.sep
    if path_str.startswith(prefix):
        return path_str[len(prefix):]
    return path_str


def normalize_path(path: PathLike, root: PathLike) -> str:
    """Display form of a path: relative to root, forward slashes only."""
    return to_posix(relative_path(path, root))


def file_extension(path: PathLike) -> str:
    """Lowercased extension including the dot, or '' when there is none."""
    return os.path.splitext(os.fspath(path))[1].lower()


def language_tag(extension: str) -> str:
    """Fence tag for a code block: 'py' for '.py', 'text' when there is no extension."""
    return extension.replace(".", "", 1) or "text"
