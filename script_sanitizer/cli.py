"""script-sanitizer CLI entry point."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import jsonschema


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="script-sanitizer",
        description="Script sanitizer: rewrite moderation-risky terms in generated video scripts",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    filter_parser = sub.add_parser("filter", help="Rewrite risky terms in a Script batch JSON")
    _add_input_args(filter_parser)
    filter_parser.add_argument(
        "--output", required=True, metavar="scripts.json",
        help="Destination path for the filtered Script batch",
    )

    ingest_parser = sub.add_parser(
        "ingest",
        help="Validate a generator reply and assign script ids",
    )
    ingest_parser.add_argument(
        "--response", required=True, metavar="response.json",
        help="Path to the raw generator reply",
    )
    ingest_parser.add_argument(
        "--batch-id", required=True,
        help="Batch identifier the script ids are derived from",
    )
    ingest_parser.add_argument(
        "--output", required=True, metavar="scripts.json",
        help="Destination path for the Script batch",
    )
    ingest_parser.add_argument(
        "--history", metavar="history.json",
        help="Also record the batch as the newest entry of this history file",
    )
    ingest_parser.add_argument("--product-link", help="Product link the batch was generated for")
    ingest_parser.add_argument(
        "--timestamp-ms", type=int,
        help="Generation time in epoch milliseconds; also forms the history id",
    )

    history_parser = sub.add_parser("history", help="Manage a history file")
    history_sub = history_parser.add_subparsers(dest="history_command", metavar="ACTION")
    delete_parser = history_sub.add_parser("delete", help="Remove one entry by id")
    delete_parser.add_argument(
        "--history", required=True, metavar="history.json",
        help="History file to update in place",
    )
    delete_parser.add_argument("--id", required=True, dest="history_id", help="History entry id")

    export_parser = sub.add_parser("export", help="Export scripts as plain text")
    _add_input_args(export_parser)
    export_parser.add_argument(
        "--output", required=True, metavar="scripts.txt",
        help="Destination path for the text export",
    )

    scan_parser = sub.add_parser("scan", help="List risky terms found in a Script batch")
    _add_input_args(scan_parser, toggle=False)

    terms_parser = sub.add_parser("terms", help="Print the term map in application order")
    terms_parser.add_argument("--terms", metavar="terms.json", help="Custom term map JSON")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)
    if args.command == "history" and args.history_command is None:
        history_parser.print_help()
        sys.exit(1)
    try:
        if args.command == "filter":
            count = run_filter(args)
            print(f"OK: wrote {count} scripts to {args.output}")
        elif args.command == "ingest":
            count, history_id = run_ingest(args)
            print(f"OK: wrote {count} scripts to {args.output}")
            if history_id is not None:
                print(f"OK: recorded {history_id} in {args.history}")
        elif args.command == "history":
            remaining = run_history_delete(Path(args.history), args.history_id)
            print(f"OK: deleted {args.history_id}, {remaining} entries left in {args.history}")
        elif args.command == "export":
            count = run_export(args)
            print(f"OK: exported {count} scripts to {args.output}")
        elif args.command == "scan":
            run_scan(args)
        elif args.command == "terms":
            run_terms(args)
    except jsonschema.ValidationError as exc:
        print(f"ERROR: contract violation: {exc.message}")
        sys.exit(1)
    except (ValueError, OSError) as exc:
        message = str(exc)
        print(message if message.startswith("ERROR:") else f"ERROR: {message}")
        sys.exit(1)
    sys.exit(0)


def _add_input_args(parser: argparse.ArgumentParser, toggle: bool = True) -> None:
    parser.add_argument(
        "--scripts", required=True, metavar="scripts.json",
        help="Script batch JSON, or a history JSON file together with --history-id",
    )
    parser.add_argument(
        "--history-id", metavar="ID",
        help="Read the scripts of this entry from a history file",
    )
    parser.add_argument("--terms", metavar="terms.json", help="Custom term map JSON")
    if toggle:
        parser.add_argument(
            "--no-filter", dest="filter_enabled", action="store_false",
            help="Pass scripts through verbatim",
        )


def _load_rewriter(terms_path: Optional[str]):
    from script_sanitizer.rewriting.rewriter import TermRewriter
    from script_sanitizer.rewriting.term_map import DEFAULT_TERM_MAP
    from script_sanitizer.schemas.term_map_v1 import load_term_map

    if terms_path is None:
        return TermRewriter(DEFAULT_TERM_MAP)
    return TermRewriter(load_term_map(Path(terms_path)))


def _load_input_scripts(args: argparse.Namespace):
    from script_sanitizer.schemas.history_v1 import find_history_item, load_history
    from script_sanitizer.schemas.script_v1 import load_scripts

    path = Path(args.scripts)
    if args.history_id is not None:
        return find_history_item(load_history(path), args.history_id).scripts
    return load_scripts(path)


def run_filter(args: argparse.Namespace) -> int:
    """Load, filter (unless --no-filter), write.  Returns the script count."""
    from script_sanitizer.presentation import displayed_scripts
    from script_sanitizer.schemas.script_v1 import dump_scripts

    scripts = _load_input_scripts(args)
    rewriter = _load_rewriter(args.terms)
    shown = displayed_scripts(scripts, filter_enabled=args.filter_enabled, rewriter=rewriter)
    Path(args.output).write_text(dump_scripts(shown), encoding="utf-8")
    return len(shown)


def run_ingest(args: argparse.Namespace) -> Tuple[int, Optional[str]]:
    """Generator reply → Script batch file, optionally recorded in history.

    Returns (script count, history id or None).  Nothing is written when the
    reply violates the contract or the history file cannot be read.
    """
    from script_sanitizer.generation.ingest import (
        ingest_generator_response,
        make_history_item,
        parse_generator_reply,
    )
    from script_sanitizer.schemas.history_v1 import add_history_item, dump_history
    from script_sanitizer.schemas.script_v1 import dump_scripts

    history_path = Path(args.history) if args.history is not None else None
    if history_path is not None and (args.product_link is None or args.timestamp_ms is None):
        raise ValueError("ERROR: --history requires --product-link and --timestamp-ms")

    data = parse_generator_reply(Path(args.response).read_bytes())
    scripts = ingest_generator_response(data, args.batch_id)

    history = None
    if history_path is not None:
        item = make_history_item(args.product_link, scripts, args.timestamp_ms)
        history = add_history_item(_load_history_file(history_path), item)

    Path(args.output).write_text(dump_scripts(scripts), encoding="utf-8")
    if history is None:
        return len(scripts), None
    history_path.write_text(dump_history(history), encoding="utf-8")
    return len(scripts), history[0].id


def _load_history_file(path: Path):
    """History entries from *path*; a file that does not exist yet is empty."""
    from script_sanitizer.schemas.history_v1 import load_history

    if not path.exists():
        return []
    return load_history(path)


def run_history_delete(history_path: Path, history_id: str) -> int:
    """Drop one entry from a history file in place.  Returns the entries left.

    The file is left untouched when no entry has *history_id*.
    """
    from script_sanitizer.schemas.history_v1 import (
        delete_history_item,
        dump_history,
        find_history_item,
        load_history,
    )

    items = load_history(history_path)
    find_history_item(items, history_id)
    remaining = delete_history_item(items, history_id)
    history_path.write_text(dump_history(remaining), encoding="utf-8")
    return len(remaining)


def run_export(args: argparse.Namespace) -> int:
    from script_sanitizer.presentation import displayed_scripts, export_scripts_text

    scripts = _load_input_scripts(args)
    rewriter = _load_rewriter(args.terms)
    shown = displayed_scripts(scripts, filter_enabled=args.filter_enabled, rewriter=rewriter)
    Path(args.output).write_text(export_scripts_text(shown), encoding="utf-8")
    return len(shown)


def run_scan(args: argparse.Namespace) -> None:
    scripts = _load_input_scripts(args)
    hits = _load_rewriter(args.terms).scan_scripts(scripts)
    for hit in hits:
        print(f"{hit.script_id} {hit.field} {json.dumps(hit.term, ensure_ascii=False)} x{hit.count}")
    print(f"OK: {len(hits)} hits in {len(scripts)} scripts")


def run_terms(args: argparse.Namespace) -> None:
    term_map = _load_rewriter(args.terms).term_map
    for term in term_map.ordered_terms():
        print(f"{term} -> {term_map[term]}")
