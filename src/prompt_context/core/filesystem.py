# src/prompt_context/core/filesystem.py
import os
import stat as stat_module
from typing import List, Tuple

from prompt_context.models import FileKind, Stat


class LocalFileSystem:
    """
    Filesystem provider backed by the local disk.
    Every method raises OSError on failure; callers decide how to recover.
    """

    def stat(self, path: str) -> Stat:
        st = os.stat(path)
        if stat_module.S_ISDIR(st.st_mode):
            kind = FileKind.DIRECTORY
        elif stat_module.S_ISREG(st.st_mode):
            kind = FileKind.FILE
        else:
            kind = FileKind.OTHER
        return Stat(kind=kind, size_bytes=st.st_size)

    def read_directory(self, path: str) -> List[Tuple[str, FileKind]]:
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                try:
                    if entry.is_dir():
                        kind = FileKind.DIRECTORY
                    elif entry.is_file():
                        kind = FileKind.FILE
                    else:
                        kind = FileKind.OTHER
                except OSError:
                    # Dangling symlink and friends
                    kind = FileKind.OTHER
                entries.append((entry.name, kind))
        # scandir order is arbitrary; keep traversal deterministic
        entries.sort(key=lambda e: e[0])
        return entries

    def read_file(self, path: str) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    def canonical(self, path: str) -> str:
        return os.path.realpath(path)
