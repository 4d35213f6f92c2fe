# tests/test_builder.py
from unittest.mock import MagicMock

import pytest

from prompt_context.builder import build_context, copy_context, summary_message, use_selection_mode
from prompt_context.errors import ClipboardError
from prompt_context.models import BundleMode, BundleStatus, ContextBundle, TextRange

SELECTION = [TextRange(start_line=0, start_char=0, text="print('main')")]


def test_files_mode_prepends_tree(project, config, fs, progress):
    bundle = build_context([str(project / "src")], root=str(project), config=config, fs=fs, progress=progress)

    assert bundle.mode == BundleMode.FILES
    assert bundle.status == BundleStatus.COPIED
    assert bundle.processed_count == 2
    tree, first_file = bundle.content.split("\n\n---\n\n")[:2]
    assert tree.startswith("Project Tree Context:")
    assert "├── src/ (*)" in tree
    assert first_file.startswith("File: src/main.py\n```py\n")
    assert bundle.tokens == -(-len(bundle.content) // 4)

def test_selection_mode_skips_filesystem(project, config, progress):
    fs = MagicMock()
    main = str(project / "src" / "main.py")
    bundle = build_context(
        [main], root=str(project), config=config, fs=fs, progress=progress,
        active_path=main, selections=SELECTION,
    )
    assert bundle.mode == BundleMode.SELECTION
    assert bundle.content.startswith("File: src/main.py (Selection)\n```py\n1    | print('main')")
    assert fs.method_calls == []

def test_multiple_targets_override_selection(project, config, fs, progress):
    main = str(project / "src" / "main.py")
    bundle = build_context(
        [main, str(project / "README.md")], root=str(project), config=config, fs=fs, progress=progress,
        active_path=main, selections=SELECTION,
    )
    assert bundle.mode == BundleMode.FILES
    assert bundle.processed_count == 2

def test_active_document_used_when_no_targets(project, config, fs, progress):
    main = str(project / "src" / "main.py")
    bundle = build_context([], root=str(project), config=config, fs=fs, progress=progress, active_path=main)
    assert bundle.mode == BundleMode.FILES
    assert "File: src/main.py\n```py" in bundle.content

@pytest.mark.parametrize(
    "targets, selections, expected",
    [
        ([], SELECTION, True),
        (["/w/a.py"], SELECTION, True),
        (["/w/b.py"], SELECTION, False),
        (["/w/a.py", "/w/b.py"], SELECTION, False),
        (["/w/a.py"], [TextRange(0, 0, "")], False),
        (["/w/a.py"], None, False),
    ],
)
def test_use_selection_mode(targets, selections, expected):
    assert use_selection_mode(targets, "/w/a.py", selections) is expected

def test_nothing_found_is_empty_not_error(project, config, fs, progress):
    bundle = build_context([str(project / "node_modules")], root=str(project), config=config, fs=fs, progress=progress)
    assert bundle.status == BundleStatus.EMPTY
    assert bundle.content == ""

def test_cancelled_before_any_file(project, config, fs, make_progress):
    bundle = build_context(
        [str(project / "src")], root=str(project), config=config, fs=fs, progress=make_progress(cancel_after=0)
    )
    assert bundle.status == BundleStatus.CANCELLED

def test_copy_context_propagates_clipboard_failure():
    clipboard = MagicMock()
    clipboard.write.side_effect = ClipboardError("no clipboard")
    with pytest.raises(ClipboardError):
        copy_context(ContextBundle(content="x", mode=BundleMode.FILES), clipboard)

def test_summary_messages():
    files = ContextBundle(content="x", mode=BundleMode.FILES, processed_count=3, skipped_count=1, tokens=7)
    assert summary_message(files) == "Copied 3 files (1 skipped) (~7 tokens)."
    selection = ContextBundle(content="x", mode=BundleMode.SELECTION, tokens=2)
    assert summary_message(selection) == "Copied selection! (~2 tokens)"

def test_blank_line_selection_uses_selection_mode(tmp_path, config, fs, progress):
    path = tmp_path / "a.py"
    path.write_text("x = 1\n\ny = 2\n", encoding="utf-8")
    selection = [TextRange(start_line=1, start_char=0, text="", end_line=2, end_char=0)]

    bundle = build_context(
        [str(path)], root=str(tmp_path), config=config, fs=fs, progress=progress,
        active_path=str(path), selections=selection,
    )
    assert bundle.mode == BundleMode.SELECTION
    assert bundle.content == "File: a.py (Selection)\n```py\n2    | \n```"

def test_language_id_reaches_selection_fence(project, config, fs, progress):
    main = str(project / "src" / "main.py")
    bundle = build_context(
        [main], root=str(project), config=config, fs=fs, progress=progress,
        active_path=main, selections=SELECTION, language_id="python",
    )
    assert bundle.content.startswith("File: src/main.py (Selection)\n```python\n")
