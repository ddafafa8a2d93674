#!/usr/bin/env python3
"""
Book Translator CLI

Command-line interface for translating a book's markdown chapters.

Usage:
    python -m book_translator [options]
    GEMINI_API_KEY=... python -m book_translator
    python -m book_translator --language German -o ./book_de
    python -m book_translator --init-checkpoint     # first run, no github_shas.json yet

Options:
    -o, --output DIR      Output directory (default: ./book)
    --checkpoint FILE     Checkpoint file (default: ./github_shas.json)
    --model NAME          Completion model (default: gemini-2.5-pro)
    --language NAME       Target language for the bundled prompt
    --prompt FILE         Use a custom system prompt file
    --source-url URL      GitHub contents API URL to list
    --retry-delay SECS    Seconds to wait between completion retries
"""

import argparse
import sys

from book_translator.checkpoint import CheckpointStore
from book_translator.config import API_KEY_ENV_VAR, Settings
from book_translator.core import build_run
from book_translator.errors import BookTranslatorError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="book-translator",
        description=(
            "GitHub Markdown-to-LLM Book Translator\n\n"
            "Lists the markdown chapters of a GitHub directory, translates\n"
            "each changed chapter through a chat-completion API, and records\n"
            f"progress in a checkpoint file. Requires {API_KEY_ENV_VAR}."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m book_translator\n"
            "  python -m book_translator --init-checkpoint\n"
            "  python -m book_translator --language German -o ./book_de --checkpoint shas_de.json\n"
            "  python -m book_translator --prompt ./my_prompt.md --model gemini-2.5-flash\n"
        ),
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output directory (default: ./book)",
    )
    parser.add_argument(
        "--checkpoint",
        default=None,
        help="Checkpoint file mapping file names to shas (default: ./github_shas.json)",
    )
    parser.add_argument(
        "--model",
        default=None,
        help="Completion model identifier (default: gemini-2.5-pro)",
    )
    parser.add_argument(
        "--language",
        default=None,
        help="Target language substituted into the bundled prompt (default: 繁體中文（臺灣）)",
    )
    parser.add_argument(
        "--prompt",
        default=None,
        help="Path to a custom system prompt file",
    )
    parser.add_argument(
        "--source-url",
        default=None,
        help="GitHub contents API URL to list",
    )
    parser.add_argument(
        "--retry-delay",
        type=float,
        default=None,
        help="Seconds to wait between completion retries (default: 20)",
    )
    parser.add_argument(
        "--init-checkpoint",
        action="store_true",
        help="Create an empty checkpoint file if it does not exist",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_env(
            output_dir=args.output,
            checkpoint_path=args.checkpoint,
            model=args.model,
            language=args.language,
            prompt_path=args.prompt,
            listing_url=args.source_url,
            retry_delay=args.retry_delay,
        )
    except BookTranslatorError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)

    if args.init_checkpoint and CheckpointStore(settings.checkpoint_path).initialize():
        print(f"[INIT] Created empty checkpoint: {settings.checkpoint_path}")

    print("=" * 60)
    print("  BOOK TRANSLATOR - GitHub Markdown-to-LLM Translator")
    print("=" * 60)
    print()

    try:
        summary = build_run(settings).run()
    except BookTranslatorError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n[ABORTED] Checkpoint not saved", file=sys.stderr)
        sys.exit(130)

    print()
    print("-" * 60)
    print(
        f"  Done: {len(summary.translated)} translated, "
        f"{len(summary.skipped)} skipped, {len(summary.failed)} failed"
    )
    print(f"  Output: {settings.output_dir.resolve()}")
    print("-" * 60)


if __name__ == "__main__":
    main()
