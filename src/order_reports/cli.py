# ========================
# src/order_reports/cli.py
# ========================

"""
Command Line Entry Point

Runs the order report pipeline on the configured input files:

    order-reports --status Complete --origin O
"""

import argparse
import csv
import logging
import sys
from typing import List, Optional

from .pipeline import OrderPipeline, PipelineError
from .utils import Config, setup_logging
from .utils.config import VALID_LOG_LEVELS

logger = logging.getLogger(__name__)


def build_parser(config: Config) -> argparse.ArgumentParser:
    """Build the argument parser; defaults come from the configuration."""
    parser = argparse.ArgumentParser(
        prog="order-reports",
        description="Summarize orders by status and origin and average them per month."
    )
    parser.add_argument(
        "--status", default=config.DEFAULT_STATUS,
        help="Order status (Pending, Complete, Cancelled)"
    )
    parser.add_argument(
        "--origin", default=config.DEFAULT_ORIGIN,
        help="Order origin (P for Paraphysical, O for Online)"
    )
    parser.add_argument("--orders", default=config.ORDERS_FILE, help="Orders CSV file")
    parser.add_argument("--items", default=config.ITEMS_FILE, help="Order items CSV file")
    parser.add_argument("--output-dir", default=config.OUTPUT_DIR, help="Directory for the reports")
    parser.add_argument(
        "--log-level", default=config.LOG_LEVEL.upper(), type=str.upper,
        choices=VALID_LOG_LEVELS, help="Logging level"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function. Returns the process exit code."""
    config = Config()
    parser = build_parser(config)
    args, unknown = parser.parse_known_args(argv)

    setup_logging(
        log_level=args.log_level,
        log_file=config.LOG_FILE,
        log_dir=config.LOG_DIR
    )

    if unknown:
        # Unknown flags are reported but do not stop the run
        parser.print_usage(sys.stderr)
        logger.warning(f"Ignoring unrecognized arguments: {' '.join(unknown)}")

    try:
        pipeline = OrderPipeline(
            orders_file=args.orders,
            items_file=args.items,
            output_dir=args.output_dir,
            status=args.status,
            origin=args.origin,
            config=config
        )

        if not pipeline.validate_input():
            logger.error("Input validation failed. Exiting.")
            return 1

        results = pipeline.run()

    except (PipelineError, OSError, UnicodeDecodeError, csv.Error) as e:
        logger.error(f"Pipeline execution failed: {e}")
        return 1

    for report_type, file_path in results['saved_files'].items():
        print(f"{report_type}: {file_path}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
