# src/prompt_context/cli.py
import sys
import argparse
import logging
import os
from pathlib import Path

# Module imports
from prompt_context.builder import build_context, copy_context, summary_message
from prompt_context.clipboard import PyperclipClipboard
from prompt_context.config import load_config
from prompt_context.core.header import (
    Document,
    comment_for_extension,
    has_path_header,
    insert_path_header,
)
from prompt_context.core.paths import file_extension
from prompt_context.core.selection import parse_line_spec, ranges_from_lines
from prompt_context.errors import OutputError, PromptContextError
from prompt_context.models import BundleStatus
from prompt_context.progress import ConsoleProgress
from prompt_context.utils.tokenizer import DEFAULT_ENCODING, count_tokens

EXIT_CANCELLED = 130


def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="prompt-context",
        description="Bundle files, folders or line selections into one LLM-ready prompt context.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show progress and debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    copy = sub.add_parser("copy", help="Copy files/folders (or a line selection) as prompt context")
    copy.add_argument("paths", nargs="+", help="Files and folders to include")
    copy.add_argument("--root", type=str, default=os.getcwd(), help="Workspace root for relative paths")
    copy.add_argument("--lines", type=str, default=None, help="Line ranges of a single file, e.g. '3-4,10'")
    copy.add_argument("--max-size", type=float, default=None, help="Skip files larger than this many KB (default: 100)")
    copy.add_argument(
        "--exclude-ext",
        action="append",
        default=None,
        help="Comma-separated extensions to skip, e.g. '.png,.jpg' (repeatable)",
    )
    output = copy.add_mutually_exclusive_group()
    output.add_argument("-o", "--output", type=str, default=None, help="Write the bundle to a file instead of the clipboard")
    output.add_argument("--stdout", action="store_true", help="Print the bundle instead of copying it")
    copy.add_argument("--exact-tokens", action="store_true", help="Also report an exact tiktoken count")

    header = sub.add_parser("header", help="Stamp the file's relative path as a comment on line 1")
    header.add_argument("path", help="File to stamp")
    header.add_argument("--root", type=str, default=os.getcwd(), help="Workspace root for relative paths")
    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def write_output(content: str, output_file: Path) -> None:
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise OutputError(f"Error writing file: {e}") from e


def run_copy(args) -> int:
    try:
        config = load_config(args.max_size, args.exclude_ext)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    root = Path(os.path.abspath(args.root))
    targets = [os.path.abspath(p) for p in args.paths]

    active_path = None
    selections = None
    if args.lines:
        if len(targets) != 1 or not os.path.isfile(targets[0]):
            print("Error: --lines needs exactly one file", file=sys.stderr)
            return 1
        try:
            document = Document.from_file(targets[0])
            selections = ranges_from_lines(document.lines, parse_line_spec(args.lines))
        except (ValueError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        active_path = targets[0]

    progress = ConsoleProgress(verbose=args.verbose)
    with progress.interruptible():
        bundle = build_context(
            targets,
            root=str(root),
            config=config,
            progress=progress,
            active_path=active_path,
            selections=selections,
        )

    if bundle.status == BundleStatus.CANCELLED:
        print("Cancelled.", file=sys.stderr)
        return EXIT_CANCELLED
    if bundle.status == BundleStatus.EMPTY:
        print("Warning: No valid text files found to copy.", file=sys.stderr)
        return 0
    if bundle.cancelled:
        print("Cancelled: bundle is incomplete.", file=sys.stderr)

    if args.stdout:
        print(bundle.content)
        message = summary_message(bundle, verb="Printed")
    elif args.output:
        output_file = Path(args.output)
        write_output(bundle.content, output_file)
        message = summary_message(bundle, verb="Wrote") + f" -> {output_file}"
    else:
        copy_context(bundle, PyperclipClipboard())
        message = summary_message(bundle)

    print(message, file=sys.stderr)
    if args.exact_tokens:
        print(f"Exact tokens ({DEFAULT_ENCODING}): {count_tokens(bundle.content)}", file=sys.stderr)
    return 0


def run_header(args) -> int:
    path = Path(os.path.abspath(args.path))
    if not path.is_file():
        print(f"Error: Invalid file '{path}'", file=sys.stderr)
        return 1

    try:
        document = Document.from_file(path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read '{path}': {e}", file=sys.stderr)
        return 1

    root = Path(os.path.abspath(args.root))
    if has_path_header(document, root):
        print("Path header already present.", file=sys.stderr)
        return 0

    if not insert_path_header(document, root, comment_for_extension(file_extension(path))):
        print("Error: Could not add path header", file=sys.stderr)
        return 1
    try:
        document.save()
    except OSError as e:
        print(f"Error: Could not write '{path}': {e}", file=sys.stderr)
        return 1
    print("Path header added.", file=sys.stderr)
    return 0


def main(argv=None):
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args(argv)
        setup_logging(args.verbose)

        # 2. Dispatch
        if args.command == "header":
            code = run_header(args)
        else:
            code = run_copy(args)

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)

    except PromptContextError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
