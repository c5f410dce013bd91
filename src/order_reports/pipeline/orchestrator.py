# ========================
# src/order_reports/pipeline/orchestrator.py
# ========================

"""
Pipeline Orchestrator Module

Filters orders, summarizes them and coordinates a full report run.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .ingestion import CSVReader
from .parsing import RecordParser, parse_origin, parse_status
from .records import Order, OrderItem, OrderSummary, Origin, Status
from .storage import ReportWriter
from .transformation import group_items_by_order, monthly_averages, summarize_order
from ..utils.config import Config
from ..utils.performance_monitor import monitor_performance

logger = logging.getLogger(__name__)


def process_orders(orders: Sequence[Order],
                   items: Iterable[OrderItem],
                   status: Status,
                   origin: Origin) -> List[OrderSummary]:
    """
    Summarize the orders whose status and origin both match the filter.

    Args:
        orders (list[Order]): All parsed orders
        items (iterable[OrderItem]): All parsed order items
        status (Status): Status to keep
        origin (Origin): Origin to keep

    Returns:
        list[OrderSummary]: One summary per matching order, in input order
    """
    filtered_orders = [o for o in orders if o.status == status and o.origin == origin]
    logger.info(
        f"{len(filtered_orders)}/{len(orders)} orders match "
        f"status={status.value} origin={origin.value}"
    )

    grouped_items = group_items_by_order(items)
    return [summarize_order(order, grouped_items) for order in filtered_orders]


class OrderPipeline:
    """
    Runs one report: read both input files, parse, filter, summarize,
    average per month and write the two report files.
    """

    def __init__(self,
                 orders_file: str,
                 items_file: str,
                 output_dir: str,
                 status: str = "Complete",
                 origin: str = "O",
                 config: Optional[Config] = None):
        """
        Initialize the order pipeline.

        Args:
            orders_file (str): Path to the orders CSV file
            items_file (str): Path to the order items CSV file
            output_dir (str): Directory for the report files
            status (str): Status token to filter on, e.g. "Complete"
            origin (str): Origin token to filter on, "P" or "O"
            config (Config): Configuration object

        Raises:
            InvalidEnumError: If the status or origin token is not recognized
        """
        self.orders_file = orders_file
        self.items_file = items_file
        self.output_dir = output_dir
        self.config = config or Config()

        # Parse the filter up front so a bad flag fails before any I/O
        self.status = parse_status(status)
        self.origin = parse_origin(origin)

        self.orders_reader = CSVReader(self.orders_file, self.config.CSV_DELIMITER)
        self.items_reader = CSVReader(self.items_file, self.config.CSV_DELIMITER)
        self.parser = RecordParser()
        self.records_read = 0
        self.summaries_created = 0
        self.periods_reported = 0

        logger.info("OrderPipeline initialized:")
        logger.info(f"  Orders: {self.orders_file}")
        logger.info(f"  Items: {self.items_file}")
        logger.info(f"  Output: {self.output_dir}")
        logger.info(f"  Filter: status={self.status.value} origin={self.origin.value}")

    def run(self) -> dict:
        """
        Execute the complete pipeline from start to finish.

        Returns:
            dict: Summary of processing results and saved files
        """
        logger.info("Starting order report pipeline...")

        with monitor_performance("OrderPipeline") as monitor:
            order_rows = self.orders_reader.read_rows()
            item_rows = self.items_reader.read_rows()
            self.records_read = len(order_rows) + len(item_rows)
            monitor.update_progress(self.records_read)

            orders = self.parser.parse_orders(order_rows)
            items = self.parser.parse_items(item_rows)
            monitor.add_checkpoint('parsed', self.parser.get_statistics())

            summaries = process_orders(orders, items, self.status, self.origin)
            averages = monthly_averages(orders, summaries)
            self.summaries_created = len(summaries)
            self.periods_reported = len(averages)
            monitor.add_checkpoint('aggregated', {'summaries': len(summaries),
                                                  'periods': len(averages)})

            writer = ReportWriter(
                self.output_dir,
                summary_filename=self.config.SUMMARY_FILENAME,
                monthly_filename=self.config.MONTHLY_FILENAME
            )
            saved_files = writer.save_all(summaries, averages)

        results = {
            'pipeline_status': 'completed',
            'orders_file': self.orders_file,
            'items_file': self.items_file,
            'output_directory': self.output_dir,
            'filter': {'status': self.status.value, 'origin': self.origin.value},
            'saved_files': saved_files,
            'processing_stats': self._get_processing_stats(),
            'parsing_stats': self.parser.get_statistics()
        }

        logger.info("Pipeline finished successfully.")
        self._log_final_summary(results)

        return results

    def _get_processing_stats(self) -> dict:
        """Get processing statistics."""
        return {
            'records_read': self.records_read,
            'summaries_created': self.summaries_created,
            'monthly_periods': self.periods_reported,
        }

    def _log_final_summary(self, results: dict) -> None:
        """Log final pipeline summary."""
        processing_stats = results['processing_stats']
        parsing_stats = results['parsing_stats']

        logger.info("=" * 60)
        logger.info("PIPELINE EXECUTION SUMMARY")
        logger.info("=" * 60)
        logger.info(f"Orders parsed: {parsing_stats['orders_parsed']:,}")
        logger.info(f"Items parsed: {parsing_stats['items_parsed']:,}")
        logger.info(f"Orders summarized: {processing_stats['summaries_created']:,}")
        logger.info(f"Monthly periods: {processing_stats['monthly_periods']:,}")
        for report_type, file_path in results['saved_files'].items():
            logger.info(f"  {report_type}: {file_path}")
        logger.info("=" * 60)

    def validate_input(self) -> bool:
        """
        Validate that both input files exist and are readable.

        Returns:
            bool: True if input is valid
        """
        for input_file in (self.orders_file, self.items_file):
            input_path = Path(input_file)
            if not input_path.exists():
                logger.error(f"Input file does not exist: {input_file}")
                return False

            if not input_path.is_file():
                logger.error(f"Input path is not a file: {input_file}")
                return False

            try:
                with open(input_path, 'r', encoding='utf-8') as f:
                    f.readline()
            except OSError as e:
                logger.error(f"Cannot read input file: {e}")
                return False

        logger.info(f"Input validation passed: {self.orders_file}, {self.items_file}")
        return True
