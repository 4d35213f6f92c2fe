# src/prompt_context/core/renderer.py
import logging
import os
from typing import List, Sequence

from prompt_context.config import BLOCK_SEPARATOR, ExclusionConfig
from prompt_context.core.ignore import is_excluded_extension
from prompt_context.core.paths import PathLike, file_extension, language_tag, normalize_path
from prompt_context.models import BuildResult, RenderedBlock
from prompt_context.utils.text import decode_text, is_binary

logger = logging.getLogger(__name__)


def format_limit(limit_kb: float) -> str:
    """The limit as the user gave it: 100 -> '100', 0.5 -> '0.5', 1000000 -> '1000000'."""
    if float(limit_kb).is_integer():
        return str(int(limit_kb))
    return repr(float(limit_kb))


def fenced(lang: str, body: str) -> str:
    return f"```{lang}\n{body}\n```"


def render_file(path: str, root: PathLike, config: ExclusionConfig, fs) -> RenderedBlock:
    """
    Renders a single file as a fenced block or a skip notice.
    Raises OSError if the file cannot be stat'ed or read.
    """
    header = f"File: {normalize_path(path, root)}"
    ext = file_extension(path)

    if is_excluded_extension(path, config):
        return RenderedBlock(header, f"[Skipped: Binary/Asset file ({ext})]", skipped=True)

    size_kb = fs.stat(path).size_bytes / 1024
    if size_kb > config.max_file_size_kb:
        return RenderedBlock(
            header,
            f"[Skipped: Size {size_kb:.1f}KB > {format_limit(config.max_file_size_kb)}KB limit]",
            skipped=True,
        )

    data = fs.read_file(path)
    if is_binary(data):
        return RenderedBlock(header, "[Skipped: Binary content detected]", skipped=True)

    return RenderedBlock(header, fenced(language_tag(ext), decode_text(data)))


def render_files(files: Sequence[str], root: PathLike, config: ExclusionConfig, fs, progress) -> BuildResult:
    """
    Renders the flattened file list in order, tallying processed and skipped files.

    Every file yields exactly one block headed by 'File: {path}', except files
    that fail to read: those are logged and counted as skipped. Cancellation
    is checked once per file.
    """
    blocks: List[RenderedBlock] = []
    processed = 0
    skipped = 0
    cancelled = False

    for path in files:
        if progress.is_cancelled():
            cancelled = True
            break

        progress.report(f"Reading {os.path.basename(path)}...")
        try:
            block = render_file(path, root, config, fs)
        except OSError as e:
            logger.warning("Error reading %s: %s", path, e)
            skipped += 1
            continue

        blocks.append(block)
        if block.skipped:
            skipped += 1
        else:
            processed += 1

    return BuildResult(
        content=BLOCK_SEPARATOR.join(b.render() for b in blocks),
        processed_count=processed,
        skipped_count=skipped,
        cancelled=cancelled,
    )
