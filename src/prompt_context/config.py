# src/prompt_context/config.py
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

DEFAULT_MAX_FILE_SIZE_KB = 100

# Directories that are never entered during expansion.
EXCLUDED_DIRS = frozenset([
    ".git",
    "node_modules",
    "dist",
    "out",
    "build",
    ".idea",
    ".vscode",
])

# Names hidden from the tree summary. `build` is still listed there.
TREE_IGNORED_NAMES = frozenset([
    ".git",
    "node_modules",
    "dist",
    "out",
    ".vscode",
    ".idea",
])

BLOCK_SEPARATOR = "\n\n---\n\n"


@dataclass(frozen=True)
class ExclusionConfig:
    """Read-only filtering policy for one invocation."""
    max_file_size_kb: float = DEFAULT_MAX_FILE_SIZE_KB
    excluded_extensions: FrozenSet[str] = frozenset()
    excluded_dirs: FrozenSet[str] = field(default=EXCLUDED_DIRS)


def normalize_extension(raw: str) -> str:
    """'PNG', '*.png' and '.png' all become '.png'. Blank input gives ''."""
    ext = raw.strip().lower()
    if ext.startswith("*"):
        ext = ext[1:]
    if not ext:
        return ""
    if not ext.startswith("."):
        ext = "." + ext
    return ext


def load_config(
    max_file_size_kb: Optional[float] = None,
    excluded_extensions: Optional[Iterable[str]] = None,
) -> ExclusionConfig:
    """
    Builds the ExclusionConfig from whatever the configuration source supplied.
    Missing values fall back to the defaults (100 KB, no excluded extensions).
    """
    if max_file_size_kb is None:
        max_file_size_kb = DEFAULT_MAX_FILE_SIZE_KB
    if max_file_size_kb < 0:
        raise ValueError(f"max file size must not be negative: {max_file_size_kb}")

    extensions = set()
    for raw in excluded_extensions or []:
        # Accept comma separated chunks as well as single values
        for part in raw.split(","):
            ext = normalize_extension(part)
            if ext:
                extensions.add(ext)

    return ExclusionConfig(
        max_file_size_kb=max_file_size_kb,
        excluded_extensions=frozenset(extensions),
    )
