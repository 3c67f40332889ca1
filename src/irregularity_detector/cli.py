#!/usr/bin/env python3

import argparse
import sys

from irregularity_detector.config import DEFAULT_THRESHOLDS, load_settings
from irregularity_detector.errors import DirectoryUnavailable, SignatureTableError
from irregularity_detector.report import print_report
from irregularity_detector.scan import scan_directory
from irregularity_detector.signatures import SignatureTable, load_signature_table


# --- Argument Parsing ---
def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="irregularity-scan",
        description="Flag files in a directory whose byte distribution looks packed, "
                    "encrypted or obfuscated, using Shannon entropy and an irregularity score.",
        epilog="High entropy (> 7.8) or a sharp irregularity spike (> 20) is flagged as a generic "
               "detection. Scores matching a known fingerprint within 1e-6 are reported by name. "
               "Settings may also come from IRREGULARITY_* environment variables or a .env file.",
    )
    parser.add_argument("directory", help="The directory path to analyze (not recursive).")
    parser.add_argument("--signatures", default=None,
                        help="JSON signature table (overrides IRREGULARITY_SIGNATURES).")
    parser.add_argument("--workers", type=int, default=None,
                        help="Number of files analyzed concurrently (overrides IRREGULARITY_WORKERS).")
    parser.add_argument("--count-each-rule", action="store_true", default=None,
                        help="List a generic detection once per fired rule instead of once per file.")
    parser.add_argument("--no-count-each-rule", dest="count_each_rule", action="store_false", default=None,
                        help="List each generic detection once, even if IRREGULARITY_COUNT_EACH_RULE is set.")
    parser.add_argument("--env-file", default=None,
                        help="Read settings from this .env file instead of searching for one.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        settings = load_settings(args.env_file)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    signatures_path = args.signatures or settings.signatures_path
    workers = args.workers if args.workers is not None else settings.workers
    count_each_rule = args.count_each_rule if args.count_each_rule is not None else settings.count_each_rule

    try:
        table = load_signature_table(signatures_path) if signatures_path else SignatureTable()
    except SignatureTableError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        results = scan_directory(
            args.directory,
            table,
            DEFAULT_THRESHOLDS,
            workers=max(1, workers),
            count_each_rule=count_each_rule,
        )
    except DirectoryUnavailable as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_report(results)
    return 0


if __name__ == "__main__":
    sys.exit(main())
