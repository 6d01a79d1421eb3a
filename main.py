"""
Daily Report Analyzer - Main Module
===================================

Parses a directory of Markdown daily reports (YYYY-MM-DD_日報.md) and
aggregates them into statistics for the dashboard.

Key Design Decisions:
1. Parsing never fails on malformed reports: missing fields fall back to defaults
2. Reports that cannot be loaded are skipped and logged, never fatal
3. Reports are loaded concurrently; analytics always follow ascending date order
4. The task category taxonomy is configurable through a JSON file

This module serves as the CLI entry point and orchestrates the workflow by
importing functions and classes from the nippo package.
"""

import argparse
import logging

from nippo.categorizer import DEFAULT_TAXONOMY, TaxonomyError, load_taxonomy
from nippo.config import LOG_LEVELS, AnalyzerConfig
from nippo.data_loader import DirectoryLister, FileLoader, analyze_all
from nippo.logger import setup_logging
from nippo.reporter import (
    print_report_summary,
    print_category_breakdown,
    print_daily_data,
    generate_json_output,
    save_json_output
)

logger = logging.getLogger(__name__)


# =============================================================================
# CLI INTERFACE
# =============================================================================

def create_parser():
    """Create and return the argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog='Daily Report Analyzer',
        description='Parses Markdown daily reports and aggregates hours, ratings and task categories.',
        epilog='Example: python main.py --reports-dir reports --output analytics.json --verbose\n'
               'Defaults can also be set with NIPPO_REPORTS_DIR, NIPPO_OUTPUT, NIPPO_TAXONOMY, '
               'NIPPO_MAX_WORKERS, NIPPO_LOG_LEVEL and NIPPO_LOG_FILE.',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--reports-dir',
        type=str,
        help='Directory containing YYYY-MM-DD_日報.md files (default: current directory)'
    )

    parser.add_argument(
        '--output',
        type=str,
        help='Output file path for JSON analytics (default: report_analytics.json)'
    )

    parser.add_argument(
        '--taxonomy',
        type=str,
        help='JSON file with the task category taxonomy (default: built-in categories)'
    )

    parser.add_argument(
        '--workers',
        type=int,
        help='Number of reports loaded in parallel (default: 4)'
    )

    parser.add_argument(
        '--show-summary',
        action='store_true',
        help='Print totals and averages to console (default: False)'
    )

    parser.add_argument(
        '--show-categories',
        action='store_true',
        help='Print task counts and hours per category (default: False)'
    )

    parser.add_argument(
        '--show-daily',
        action='store_true',
        help='Print per-day hours, ratings and insights (default: False)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Show all outputs (summary, categories, daily data)'
    )

    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        help='Logging level (default: INFO)'
    )

    parser.add_argument(
        '--log-file',
        type=str,
        help='Also write logs to this file'
    )

    return parser


def build_config(args) -> AnalyzerConfig:
    return AnalyzerConfig.from_env().override(
        reports_dir=args.reports_dir,
        output=args.output,
        taxonomy_file=args.taxonomy,
        max_workers=args.workers,
        log_level=args.log_level,
        log_file=args.log_file
    )


def main(argv=None):
    """Main entry point for the application."""
    parser = create_parser()
    args = parser.parse_args(argv)

    print("\nDaily Report Analyzer")
    print("=" * 70)

    try:
        config = build_config(args)
        setup_logging(config.numeric_log_level, config.log_file)

        taxonomy = DEFAULT_TAXONOMY
        if config.taxonomy_file:
            taxonomy = load_taxonomy(config.taxonomy_file)
            print(f"  Loaded {len(taxonomy)} categories from {config.taxonomy_file}")

        # Load and analyze reports
        print(f"\nAnalyzing reports in {config.reports_dir}...")
        result = analyze_all(
            DirectoryLister(config.reports_dir),
            FileLoader(config.reports_dir),
            taxonomy=taxonomy,
            max_workers=config.max_workers
        )
        print(f"  Parsed {len(result.reports)} report(s)")

        if args.verbose or args.show_summary:
            print_report_summary(result)

        if args.verbose or args.show_categories:
            print_category_breakdown(result.analytics)

        if args.verbose or args.show_daily:
            print_daily_data(result.analytics)

        # Generate and save JSON output
        print("\nGenerating JSON output...")
        try:
            save_json_output(generate_json_output(result), config.output)
        except OSError as e:
            print(f"\nOutput Error: {e}", flush=True)
            print("   Check that the output directory exists and is writable.\n", flush=True)
            return 1

        print("\n" + "=" * 70)
        print("Analysis complete!")
        print("=" * 70 + "\n")

    except FileNotFoundError as e:
        print(f"\nFile Error: {e}", flush=True)
        print("   Check that the taxonomy file exists and the path is correct.\n", flush=True)
        return 1
    except TaxonomyError as e:
        print(f"\nTaxonomy Error: {e}", flush=True)
        print("   The taxonomy must be a JSON list of {\"category\": ..., \"keywords\": [...]} objects.\n", flush=True)
        return 1
    except ValueError as e:
        print(f"\nConfiguration Error: {e}", flush=True)
        print("   Check your command line options and NIPPO_* environment variables.\n", flush=True)
        return 1
    except OSError as e:
        print(f"\nFile Error: {e}", flush=True)
        print("   Check that the taxonomy file and log file paths are accessible.\n", flush=True)
        return 1
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"\nUnexpected error: {e}\n", flush=True)
        return 1

    return 0


if __name__ == '__main__':
    exit(main())
