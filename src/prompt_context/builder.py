# src/prompt_context/builder.py
import logging
import os
from typing import Optional, Sequence

from prompt_context.config import BLOCK_SEPARATOR, ExclusionConfig
from prompt_context.core.filesystem import LocalFileSystem
from prompt_context.core.renderer import render_files
from prompt_context.core.scanner import expand_targets
from prompt_context.core.selection import render_selection
from prompt_context.core.tree import generate_tree_context
from prompt_context.models import BundleMode, ContextBundle, TextRange
from prompt_context.progress import NullProgress
from prompt_context.utils.tokenizer import estimate_tokens

logger = logging.getLogger(__name__)


def use_selection_mode(
    targets: Sequence[str],
    active_path: Optional[str],
    selections: Optional[Sequence[TextRange]],
) -> bool:
    """
    Selection mode applies when the active document has a non-empty selection,
    the user did not pick several targets, and the single target (if any) is
    the active document itself.
    """
    if active_path is None or not selections:
        return False
    if all(s.is_empty for s in selections):
        return False
    if len(targets) > 1:
        return False
    if len(targets) == 1 and os.path.abspath(targets[0]) != os.path.abspath(active_path):
        return False
    return True


def build_files_bundle(targets: Sequence[str], root: str, config: ExclusionConfig, fs, progress) -> ContextBundle:
    """Tree summary of the original targets followed by every rendered file."""
    parts = []
    if targets:
        progress.report("Generating project tree...")
        tree = generate_tree_context(targets, root, fs)
        if tree:
            parts.append(tree)

    files = expand_targets(targets, config, fs, progress)
    logger.debug("Expanded %d targets into %d files", len(targets), len(files))
    result = render_files(files, root, config, fs, progress)

    cancelled = result.cancelled or progress.is_cancelled()
    if not result.content:
        # A tree on its own is not worth copying
        return ContextBundle(
            content="",
            mode=BundleMode.FILES,
            processed_count=result.processed_count,
            skipped_count=result.skipped_count,
            cancelled=cancelled,
        )

    content = BLOCK_SEPARATOR.join(parts + [result.content]) if parts else result.content
    return ContextBundle(
        content=content,
        mode=BundleMode.FILES,
        processed_count=result.processed_count,
        skipped_count=result.skipped_count,
        cancelled=cancelled,
        tokens=estimate_tokens(content),
    )


def build_context(
    targets: Sequence[str],
    *,
    root: str,
    config: ExclusionConfig,
    fs=None,
    progress=None,
    active_path: Optional[str] = None,
    selections: Optional[Sequence[TextRange]] = None,
    language_id: Optional[str] = None,
) -> ContextBundle:
    """
    Builds the bundle for one invocation.

    Targets are captured as absolute paths once and never changed afterwards.
    In selection mode the filesystem is not touched at all.
    """
    fs = fs if fs is not None else LocalFileSystem()
    progress = progress if progress is not None else NullProgress()
    root = os.path.abspath(root)
    targets = [os.path.abspath(t) for t in targets]
    if not targets and active_path is not None:
        targets = [os.path.abspath(active_path)]

    if use_selection_mode(targets, active_path, selections):
        content = render_selection(os.path.abspath(active_path), selections, root, language_id)
        if content:
            return ContextBundle(
                content=content,
                mode=BundleMode.SELECTION,
                tokens=estimate_tokens(content),
            )

    return build_files_bundle(targets, root, config, fs, progress)


def copy_context(bundle: ContextBundle, clipboard) -> None:
    """Hands the finished bundle to the clipboard. Raises ClipboardError on failure."""
    clipboard.write(bundle.content)


def summary_message(bundle: ContextBundle, verb: str = "Copied") -> str:
    if bundle.mode == BundleMode.SELECTION:
        return f"{verb} selection! (~{bundle.tokens} tokens)"
    msg = f"{verb} {bundle.processed_count} files"
    if bundle.skipped_count > 0:
        msg += f" ({bundle.skipped_count} skipped)"
    msg += f" (~{bundle.tokens} tokens)."
    return msg
