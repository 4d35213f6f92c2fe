# src/prompt_context/core/scanner.py
import logging
import os
from collections import deque
from typing import List, Sequence, Set

from prompt_context.config import ExclusionConfig
from prompt_context.core.ignore import is_excluded_dir
from prompt_context.models import FileKind

logger = logging.getLogger(__name__)


def expand_targets(targets: Sequence[str], config: ExclusionConfig, fs, progress) -> List[str]:
    """
    Flattens a mixed list of files and folders into the files they contain.

    Breadth-first over a FIFO queue seeded with the targets in their given
    order. Each node is visited once, keyed by its canonical path, so a file
    selected alongside its folder (or reached through a symlink loop) is
    emitted only the first time. Excluded directories are dropped silently.

    Cancellation is checked once per dequeue; a cancelled run returns the
    files found so far.
    """
    results: List[str] = []
    visited: Set[str] = set()
    queue = deque(targets)

    while queue:
        if progress.is_cancelled():
            logger.debug("Expansion cancelled with %d files collected", len(results))
            break

        current = queue.popleft()
        try:
            key = fs.canonical(current)
        except OSError as e:
            logger.warning("Failed to resolve %s: %s", current, e)
            continue
        if key in visited:
            continue
        visited.add(key)

        try:
            st = fs.stat(current)
            if st.kind == FileKind.FILE:
                results.append(current)
            elif st.kind == FileKind.DIRECTORY:
                if is_excluded_dir(current, config):
                    continue

                progress.report(f"Scanning dir {os.path.basename(current)}...")
                for name, _kind in fs.read_directory(current):
                    queue.append(os.path.join(current, name))
        except OSError as e:
            logger.warning("Failed to access %s: %s", current, e)

    return results
