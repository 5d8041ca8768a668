#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Script: run_intake.py
Package: scripts
Purpose: CLI interface for the archive intake pipeline

Usage:
    python scripts/run_intake.py tmp/extracted
    python scripts/run_intake.py tmp/extracted --output records.json --csv records.csv
    python scripts/run_intake.py tmp/extracted --date 2024-09-05 --category maries
    python scripts/run_intake.py tmp/extracted --workers 4 --never-drop-folders
"""

import sys
from pathlib import Path
import argparse
import logging
from datetime import datetime

# Project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Local imports
from config.intake_config import INTAKE_CONFIG, OUTPUT_PATH
from dv_intake.processing.export import (
    export_filename,
    save_records_csv,
    save_records_json,
)
from dv_intake.processing.intake_processor import IntakeProcessor
from dv_intake.reconciliation.record_reconciler import RecordReconciler
from dv_intake.utils.errors import ArchiveFormatError, EmptyResultError
from dv_intake.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

EXIT_ARCHIVE_ERROR = 1
EXIT_EMPTY_RESULT = 2


# ============================================================================
# ARGUMENT PARSING
# ============================================================================

def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Consolidate saved diversity visa pages into one record per applicant",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/run_intake.py tmp/extracted
  python scripts/run_intake.py tmp/extracted --output records.json --csv records.csv
  python scripts/run_intake.py tmp/extracted --date 2024-09-05 --category maries
        """
    )

    parser.add_argument('root', type=str, help='Root of the decompressed archive')

    parser.add_argument(
        '--folder-key',
        choices=['relative', 'basename'],
        default=INTAKE_CONFIG['folder_key_policy'],
        help='Folder key written to each record (default: %(default)s)'
    )
    parser.add_argument(
        '--workers',
        type=int,
        default=INTAKE_CONFIG['num_workers'],
        help='Extraction threads (default: %(default)s)'
    )
    parser.add_argument('--date', type=str, help='Export date, names the artifact')
    parser.add_argument('--category', type=str, help='Export category, names the artifact')
    parser.add_argument(
        '--output',
        type=str,
        help='Records JSON path (default: data/output/<artifact or timestamp>.json)'
    )
    parser.add_argument('--csv', type=str, help='Also write records as CSV')

    # Reconciliation policy
    parser.add_argument('--drop-blank-entrants', action='store_true', default=None,
                        help='Blank out entrants whose three fields are all missing')
    parser.add_argument('--keep-last-per-folder', action='store_true', default=None,
                        help='Keep only the last record of each folder')
    parser.add_argument('--no-unmatched-visas', dest='emit_unmatched_visas',
                        action='store_false', default=None,
                        help='Drop application pages no entrant claims')
    parser.add_argument('--never-drop-folders', action='store_true', default=None,
                        help='Emit a blank record for folders that produced nothing')

    parser.add_argument('--verbose', action='store_true', help='Debug logging')

    return parser.parse_args(argv)


# ============================================================================
# MAIN
# ============================================================================

def main(argv=None) -> int:
    args = parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    artifact_name = None
    if args.date or args.category:
        try:
            artifact_name = export_filename(args.date, args.category)
        except ValueError as e:
            print(f"✗ {e}")
            return EXIT_ARCHIVE_ERROR

    reconciler = RecordReconciler(
        drop_blank_entrants=args.drop_blank_entrants,
        keep_last_per_folder=args.keep_last_per_folder,
        emit_unmatched_visas=args.emit_unmatched_visas,
        never_drop_folders=args.never_drop_folders,
    )
    processor = IntakeProcessor(
        args.root,
        folder_key_policy=args.folder_key,
        num_workers=args.workers,
        reconciler=reconciler,
        show_progress=True,
    )

    try:
        result = processor.process()
    except ArchiveFormatError as e:
        logger.error(e.message)
        print(f"✗ {e.message}")
        return EXIT_ARCHIVE_ERROR
    except EmptyResultError as e:
        print(f"✗ {e.message}")
        return EXIT_EMPTY_RESULT

    if args.output:
        output_path = Path(args.output)
    else:
        stem = Path(artifact_name).stem if artifact_name else datetime.now().strftime('%Y%m%d_%H%M%S')
        output_path = OUTPUT_PATH / f"{stem}.json"

    save_records_json(result.records, output_path)
    if args.csv:
        save_records_csv(result.records, args.csv)

    print("\n" + "=" * 60)
    print("INTAKE SUMMARY")
    print("=" * 60)
    print(f"Folders: {result.stats['folders']}")
    print(f"Documents: {result.stats['documents']}")
    for kind, count in result.stats['by_kind'].items():
        print(f"  {kind}: {count}")
    print(f"Unreadable files: {len(result.stats['unreadable'])}")
    print(f"Records: {result.stats['records']}")
    print(f"Output: {output_path}")
    if artifact_name:
        print(f"Export file: {artifact_name}")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
