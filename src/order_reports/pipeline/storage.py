# ========================
# src/order_reports/pipeline/storage.py
# ========================

"""
Data Storage Module

Writes the order summary and monthly average reports as CSV files.
"""

import csv
import logging
from pathlib import Path
from typing import Dict, Iterable, List

from .records import MonthlyAverage, OrderSummary

logger = logging.getLogger(__name__)

SUMMARY_HEADERS = ['order_id', 'total_amount', 'total_taxes']
MONTHLY_HEADERS = ['year', 'month', 'avg_amount', 'avg_taxes']


def format_amount(value: float) -> str:
    """Format a monetary value with two decimal places."""
    return f"{value:.2f}"


class ReportWriter:
    """
    Saves pipeline results to CSV report files in an output directory.
    """

    def __init__(self, output_dir: str = "data/processed",
                 summary_filename: str = "order_summary.csv",
                 monthly_filename: str = "monthly_avg.csv"):
        """
        Initialize the report writer.

        Args:
            output_dir (str): Directory to save output files
            summary_filename (str): File name of the per-order summary report
            monthly_filename (str): File name of the monthly average report
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.summary_filename = summary_filename
        self.monthly_filename = monthly_filename
        logger.info(f"ReportWriter initialized with output directory: {self.output_dir}")

    def save_all(self, summaries: Iterable[OrderSummary],
                 averages: Iterable[MonthlyAverage]) -> Dict[str, str]:
        """
        Save both reports.

        Returns:
            dict: Mapping of report type to saved file path
        """
        saved_files = {
            'order_summary': self.save_order_summaries(summaries),
            'monthly_averages': self.save_monthly_averages(averages),
        }
        logger.info(f"All reports saved successfully to {len(saved_files)} files")
        return saved_files

    def save_order_summaries(self, summaries: Iterable[OrderSummary]) -> str:
        """Save per-order summaries in the order they were produced."""
        file_path = self.output_dir / self.summary_filename
        rows = [
            [str(s.order_id), format_amount(s.total_amount), format_amount(s.total_taxes)]
            for s in summaries
        ]
        self._write_csv(file_path, SUMMARY_HEADERS, rows)
        return str(file_path)

    def save_monthly_averages(self, averages: Iterable[MonthlyAverage]) -> str:
        """Save monthly averages, sorted by year then month."""
        file_path = self.output_dir / self.monthly_filename
        ordered = sorted(averages, key=lambda a: (a.year, a.month))
        rows = [
            [a.year, a.month, format_amount(a.avg_amount), format_amount(a.avg_taxes)]
            for a in ordered
        ]
        self._write_csv(file_path, MONTHLY_HEADERS, rows)
        return str(file_path)

    def _write_csv(self, file_path: Path, headers: List[str], rows: List[List[str]]) -> None:
        """Write a header row and data rows to a CSV file."""
        try:
            with open(file_path, 'w', newline='', encoding='utf-8') as f:
                writer = csv.writer(f)
                writer.writerow(headers)
                writer.writerows(rows)

            logger.info(f"Saved {len(rows)} records to {file_path}")

        except Exception as e:
            logger.error(f"Error writing CSV file {file_path}: {e}")
            raise
