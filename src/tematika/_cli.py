"""Command-line entry point: classify one document and write a report."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ._chart import write_chart
from ._document import SUPPORTED_SUFFIXES, read_document
from ._errors import DocumentError, UnsupportedFormatError
from ._report import write_report
from ._serialize import pack_result

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    root_logger.addHandler(ch)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tematika",
        description="Determine the subject topic of a text document",
    )
    parser.add_argument("path", type=Path, help="Document to analyze (.txt, .docx)")
    parser.add_argument(
        "--report", type=Path, default=Path("report.txt"),
        help="Where to write the text report (default: report.txt)",
    )
    parser.add_argument(
        "--dump", type=Path, default=None,
        help="Also write the result as msgpack to this path",
    )
    parser.add_argument(
        "--chart", type=Path, default=None,
        help="Also write a PNG bar chart of topic scores to this path",
    )
    parser.add_argument(
        "--data-dir", type=Path, default=None,
        help="Directory with <topic>.txt dictionaries (default: bundled)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    from . import load

    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    path: Path = args.path
    if not path.is_file():
        logger.error("File not found: %s", path)
        print(f"Error: file not found - {path}", file=sys.stderr)
        return 1

    try:
        text = read_document(path)
    except UnsupportedFormatError as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        print(f"Supported formats: {', '.join(SUPPORTED_SUFFIXES)}", file=sys.stderr)
        return 2
    except (OSError, UnicodeDecodeError, DocumentError) as exc:
        logger.error("Cannot read %s: %s", path, exc)
        print(f"Error: cannot read file - {path}", file=sys.stderr)
        return 1

    result = load(args.data_dir).analyze(text)
    try:
        write_report(result, args.report)
        if args.dump is not None:
            args.dump.write_bytes(pack_result(result))
        if args.chart is not None:
            write_chart(result, args.chart)
    except OSError as exc:
        logger.error("Cannot write output: %s", exc)
        print(f"Error: cannot write output - {exc}", file=sys.stderr)
        return 1

    top = result.top_topic()
    print(f"Topic: {top.display_name}")
    print(f"Total words: {result.total_words}")
    print(f"Matches: {result.score(top)}")
    print(f"Report saved: {args.report}")
    if args.chart is not None:
        print(f"Chart saved: {args.chart}")
    return 0
