"""Build a keyword index from a document list and answer two-keyword queries.

Defaults come from ``LSE_*`` environment variables (see ``Settings``);
command-line flags take precedence.
"""

# ruff: noqa: T201  # CLI intentionally prints query results

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
from pathlib import Path
import sys
import textwrap

from pydantic import ValidationError

from little_search_engine.config import Settings
from little_search_engine.observability.logging import configure_logging
from little_search_engine.observability.metrics import get_metrics
from little_search_engine.search.engine import LittleSearchEngine
from little_search_engine.search.scanner import DocumentDecodeError, DocumentNotFoundError


logger = logging.getLogger(__name__)


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="little-search-engine",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent(
            """
            Examples:
              little-search-engine --docs docs.txt --noise-words noisewords.txt --query deep world
              little-search-engine --docs docs.txt --query alice rabbit --query tea party --plain-logs
            """
        ).strip(),
    )
    parser.add_argument("--docs", type=Path, help="File listing the documents to index (env: LSE_DOCS_FILE)")
    parser.add_argument(
        "--noise-words",
        type=Path,
        help="File of noise words to skip (env: LSE_NOISE_WORDS_FILE; default: built-in stop list)",
    )
    parser.add_argument(
        "--query",
        nargs=2,
        action="append",
        dest="queries",
        default=[],
        metavar=("KW1", "KW2"),
        help="Keyword pair to search for (repeatable)",
    )
    parser.add_argument("--limit", type=int, help="Maximum results per query (env: LSE_RESULT_LIMIT; default: 5)")
    parser.add_argument("--log-level", help="Logging level (env: LSE_LOG_LEVEL; default: info)")
    parser.add_argument("--plain-logs", action="store_true", help="Human-readable logs instead of JSON")
    parser.add_argument("--metrics", action="store_true", help="Print Prometheus metrics after the run")
    return parser


def _resolve_settings(args: argparse.Namespace) -> Settings:
    overrides: dict[str, object] = {}
    if args.docs is not None:
        overrides["docs_file"] = args.docs
    if args.noise_words is not None:
        overrides["noise_words_file"] = args.noise_words
    if args.limit is not None:
        overrides["result_limit"] = args.limit
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.plain_logs:
        overrides["log_json"] = False
    return Settings(**overrides)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    try:
        settings = _resolve_settings(args)
    except ValidationError as exc:
        print(f"Error: invalid configuration\n{exc}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level, settings.log_json)

    if settings.docs_file is None:
        parser.error("a document list is required (--docs or LSE_DOCS_FILE)")

    engine = LittleSearchEngine.from_settings(settings)
    try:
        result = engine.make_index(settings.docs_file, settings.noise_words_file)
    except (DocumentNotFoundError, DocumentDecodeError) as exc:
        logger.error("Indexing aborted: %s", exc)
        return 1

    print(f"Indexed {result.documents_indexed} documents; {result.keywords_indexed} keywords.")
    for kw1, kw2 in args.queries:
        matches = engine.top5_search(kw1, kw2)
        if matches is None:
            print(f"{kw1} OR {kw2}: no matches")
        else:
            print(f"{kw1} OR {kw2}: {', '.join(matches)}")

    if args.metrics:
        print(get_metrics().decode("utf-8"), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
