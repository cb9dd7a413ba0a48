"""Command line entry point: ingest a notes file and summarize it.

Usage:
    suppliernotes ingest supplier_notes.txt
    suppliernotes ingest supplier_notes.txt --export-dir out/ --config suppliernotes.toml
"""

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Sequence, TextIO

from suppliernotes.config import load_config
from suppliernotes.export import write_export
from suppliernotes.ingest import IngestionResult, SourceNotFoundError
from suppliernotes.logging import setup_logging
from suppliernotes.note import Sentiment


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="suppliernotes",
        description="Ingest supplier interaction notes into scored, supplier-attributed records.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    ingest = subparsers.add_parser("ingest", help="Parse a notes file and print a per-supplier summary")
    ingest.add_argument("notes_file", type=Path, help="Notes document to ingest")
    ingest.add_argument("--config", type=Path, default=None, help="TOML config file (default: auto-detect)")
    ingest.add_argument("--export-dir", type=Path, default=None, help="Write suppliers/notes JSONL here")
    ingest.add_argument("--verbose", "-v", action="store_true", help="Log debug details")
    return parser


def print_summary(result: IngestionResult, out: TextIO) -> None:
    """Print one line per supplier with note count and sentiment tallies."""
    for supplier in result.suppliers:
        records = result.records_for(supplier.supplier_id)
        tally = Counter(record.sentiment for record in records)
        out.write(
            f"{supplier.supplier_id}  {supplier.display_name:<32} "
            f"notes={len(records):<3} "
            f"+{tally[Sentiment.POSITIVE]} "
            f"-{tally[Sentiment.NEGATIVE]} "
            f"={tally[Sentiment.NEUTRAL]}\n"
        )
    out.write(
        f"{len(result.records)} notes, {len(result.suppliers)} suppliers, "
        f"{result.sections_dropped} fragments dropped, {result.notes_dropped} empty notes, "
        f"{len(result.failures)} failures\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logging("suppliernotes", level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Configuration error: %s", e)
        return 2

    orchestrator = config.build_orchestrator()
    try:
        result = orchestrator.ingest_file(args.notes_file)
    except SourceNotFoundError as e:
        logger.error("%s", e)
        return 1

    print_summary(result, sys.stdout)
    if args.export_dir is not None:
        manifest = write_export(result, args.export_dir)
        sys.stdout.write(f"Exported {manifest.note_count} notes to {args.export_dir}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
