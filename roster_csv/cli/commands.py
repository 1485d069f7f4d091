from __future__ import annotations

import argparse
import contextlib
import sys
from pathlib import Path

import pandas as pd
from dotenv import load_dotenv

from ..config.loader import ConfigError, load_config_or_default
from ..csvfile.errors import RosterFileError
from ..csvfile.format import COLUMNS
from ..logging.error_log import DiagnosticLogBuffer
from ..logging.init import log_summary, setup_logging
from ..models.config_models import RosterConfig
from ..models.import_outcome import ImportOutcome
from ..services.exporter import export_members, open_in_default_viewer
from ..services.importer import import_members
from ..services.progress import LineProgress
from ..services.roster import (
    InvalidFileTypeError,
    MemberRoster,
    ensure_csv_path,
    import_into_roster,
    render_import_message,
    resolve_roster_path,
)
from ..services.summary import render_summary_fields

"""CLI entrypoint.

Subcommands:
- import:  import a roster file, reconcile it against an optional roster file
- export:  re-export the accepted members of a roster file
- inspect: print the raw header and first rows without validation
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2

MESSAGE_FAILURE = "Failed to import members: {error}"
MESSAGE_ROSTER_INVALID = "Roster {path} has {count} invalid line(s); fix them before importing into it."


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env so ROSTER_CSV_* values take precedence over the config file."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="roster-csv", description="Member roster CSV import/export")
    p.add_argument("--config", type=Path, default=None, help="YAML config file (default: config/roster.yml)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    imp = sub.add_parser("import", help="Import members from a CSV file")
    imp.add_argument("--from", dest="source", default=None, help="CSV file to import (default: members.csv)")
    imp.add_argument("--roster", type=Path, default=None, help="Existing roster CSV to merge into and rewrite")

    exp = sub.add_parser("export", help="Re-export the valid members of a CSV file")
    exp.add_argument("--from", dest="source", required=True, help="CSV file to read members from")
    exp.add_argument("--to", dest="target", default=None, help="Output CSV (default: members.csv)")
    exp.add_argument("--no-open", action="store_true", help="Do not open the exported file")

    ins = sub.add_parser("inspect", help="Print the raw header and first rows")
    ins.add_argument("--from", dest="source", default=None, help="CSV file to inspect (default: members.csv)")
    ins.add_argument("--rows", type=int, default=5, help="Number of rows to show")
    return p.parse_args(argv)


def _progress(cfg: RosterConfig):
    if cfg.show_progress:
        return LineProgress(description="Importing")
    return contextlib.nullcontext()


def _flush_diagnostics(cfg: RosterConfig, outcome: ImportOutcome) -> None:
    if cfg.error_log_dir is None or not outcome.diagnostics:
        return
    buffer = DiagnosticLogBuffer(Path(cfg.error_log_dir))
    buffer.extend(str(outcome.source), outcome.diagnostics)
    written = buffer.flush()
    setup_logging().info(f"diagnostics written to {written}")


def _run_import(args: argparse.Namespace, cfg: RosterConfig) -> int:
    logger = setup_logging()
    try:
        ensure_csv_path(args.source)
    except InvalidFileTypeError as e:
        logger.error(str(e))
        return EXIT_FATAL

    source = resolve_roster_path(args.source, cfg.default_path)
    logger.info(f"Importing members from: {source}")
    try:
        roster = MemberRoster()
        if args.roster is not None and args.roster.exists():
            existing = import_members(args.roster, encoding=cfg.encoding)
            if existing.diagnostics:
                print(existing.report)
                logger.error(MESSAGE_ROSTER_INVALID.format(path=args.roster, count=existing.rejected_lines))
                return EXIT_FATAL
            roster = MemberRoster(existing.members)
            logger.debug(f"loaded {len(roster)} existing member(s) from {args.roster}")

        with _progress(cfg) as progress:
            outcome = import_members(source, encoding=cfg.encoding, progress=progress)
        summary = import_into_roster(outcome, roster)

        if args.roster is not None:
            export_members(roster.members, args.roster, encoding=cfg.encoding)
    except RosterFileError as e:
        logger.error(MESSAGE_FAILURE.format(error=e))
        return EXIT_FATAL

    print(render_import_message(summary))
    _flush_diagnostics(cfg, outcome)
    log_summary(render_summary_fields(summary))
    return EXIT_PARTIAL_FAILURE if summary.diagnostics else EXIT_SUCCESS_ALL


def _run_export(args: argparse.Namespace, cfg: RosterConfig) -> int:
    logger = setup_logging()
    try:
        ensure_csv_path(args.source)
    except InvalidFileTypeError as e:
        logger.error(str(e))
        return EXIT_FATAL

    source = resolve_roster_path(args.source, cfg.default_path)
    target = resolve_roster_path(args.target, cfg.default_path)
    hook = open_in_default_viewer if cfg.open_after_export and not args.no_open else None
    try:
        outcome = import_members(source, encoding=cfg.encoding)
        written = export_members(outcome.members, target, encoding=cfg.encoding, on_exported=hook)
    except RosterFileError as e:
        logger.error(f"export: {e}")
        return EXIT_FATAL

    if outcome.report:
        print(outcome.report)
    print(f"Exported {len(outcome.members)} member(s) to {written}")
    _flush_diagnostics(cfg, outcome)
    return EXIT_PARTIAL_FAILURE if outcome.diagnostics else EXIT_SUCCESS_ALL


def _inspect_data(args: argparse.Namespace, cfg: RosterConfig) -> int:
    source = resolve_roster_path(args.source, cfg.default_path)
    if not source.is_file():
        print(f"inspect: file not found: {source}")
        return EXIT_FATAL
    try:
        df = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            encoding=cfg.encoding,
            on_bad_lines="skip",
        )
    except pd.errors.EmptyDataError:
        print(f"inspect: file is empty: {source}")
        return EXIT_FATAL

    print(f"FILE: {source.name} rows={len(df)} cols={list(df.columns)}")
    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        print(f"  missing_columns={missing}")
    if not df.empty:
        print(df.head(args.rows).to_string(index=False))
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    # None only: an explicit [] must not fall back to sys.argv (pytest args)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(debug=args.debug)
    if args.debug:
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"), override=True)
    try:
        cfg = load_config_or_default(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.command == "import":
        return _run_import(args, cfg)
    if args.command == "export":
        return _run_export(args, cfg)
    return _inspect_data(args, cfg)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
