"""
Command line interface: rank the lines of a file against a query.

Usage:
    linerank QUERY [FILE] [-k N] [--scores] [--json] [--encoding ENC]

FILE defaults to stdin ("-" also means stdin).
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import ConfigError, Settings, load_env_files, load_settings
from .logging_config import setup_logging
from .search import search_with_scores

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linerank",
        description="Print the lines of a text most relevant to a query (TF-IDF)."
    )
    parser.add_argument("query", help="Free-text query")
    parser.add_argument("file", nargs="?", default="-", help="Input file (default: stdin)")
    parser.add_argument(
        "-k", "--top-k", type=int, default=settings.top_k,
        help=f"Maximum number of lines to print (default: {settings.top_k})"
    )
    parser.add_argument("--scores", action="store_true", help="Prefix each line with its score")
    parser.add_argument("--json", action="store_true", help="Print results as a JSON array")
    parser.add_argument(
        "--encoding", default=settings.encoding,
        help=f"Input file encoding (default: {settings.encoding})"
    )
    return parser


def read_text(path: str, encoding: str) -> str:
    """Read the whole input; newline translation is disabled to keep offsets exact"""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point, returns the process exit status"""
    load_env_files()
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    setup_logging(log_file=settings.log_file, console_level=settings.console_level)

    args = build_parser(settings).parse_args(argv)

    try:
        text = read_text(args.file, args.encoding)
        results = search_with_scores(text, args.query, args.top_k)
    except (OSError, LookupError, ValueError) as e:
        logger.debug("Search failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(f"{len(results)} results for {args.query!r} in {args.file}")

    if args.json:
        print(json.dumps([r.model_dump() for r in results], ensure_ascii=False, indent=2))
    elif args.scores:
        for r in results:
            print(f"{r.score:.4f}\t{r.text}")
    else:
        for r in results:
            print(r.text)

    return 0


if __name__ == "__main__":
    sys.exit(main())
