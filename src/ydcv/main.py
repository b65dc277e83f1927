#!/usr/bin/env python
"""ydcv command-line entry point."""

import argparse
import logging
import sys

from dotenv import load_dotenv

from adapter.external.youdao import YoudaoConfig, YoudaoTranslatorAdapter
from adapter.terminal.formatters import get_formatter
from domain.model.errors import DomainError
from services.translation_service import TranslationService
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)

PROMPT = "> "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ydcv",
        description="Look up words and sentences on Youdao translate",
    )
    parser.add_argument("words", nargs="*", help="Words to look up (interactive if omitted)")
    parser.add_argument("-r", "--raw", action="store_true", help="Print the raw JSON response")
    parser.add_argument(
        "-c", "--color", choices=("auto", "always", "never"), default="auto",
        help="Colorize output (default: auto)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    return parser


def _lookup_one(service: TranslationService, word: str, raw: bool) -> bool:
    """Print one lookup. Returns False if the lookup failed."""
    try:
        print(service.explain(word, raw=raw))
    except DomainError as e:
        logger.debug("Lookup failed", extra={"word": word}, exc_info=True)
        print(service.formatter.red(f"  查询失败: {e}"), file=sys.stderr)
        return False
    return True


def _interactive(service: TranslationService, raw: bool) -> bool:
    """Prompt until EOF or Ctrl-C, including Ctrl-C during a lookup."""
    ok = True
    try:
        while True:
            line = input(PROMPT)
            if line.strip():
                ok = _lookup_one(service, line, raw) and ok
    except (EOFError, KeyboardInterrupt):
        print()
    return ok


def main(argv: list[str] | None = None) -> int:
    """Run the CLI. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    load_dotenv()
    setup_structured_logging(logging.DEBUG if args.verbose else logging.WARNING)

    config = YoudaoConfig.from_env()
    formatter = get_formatter(args.color, sys.stdout.isatty())

    with YoudaoTranslatorAdapter(config, timeout=args.timeout) as translator:
        service = TranslationService(translator, formatter)
        if not args.words:
            ok = _interactive(service, args.raw)
        else:
            ok = True
            for word in args.words:
                ok = _lookup_one(service, word, args.raw) and ok

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
