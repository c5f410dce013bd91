# ========================
# src/order_reports/pipeline/ingestion.py
# ========================

"""
Data Ingestion Module

Reads the orders and order items CSV files into raw rows for the parser.
"""

import csv
import logging
from typing import Iterable, List, Tuple

from .errors import EmptyInputError

logger = logging.getLogger(__name__)


def split_header(lines: Iterable[str], source: str,
                 delimiter: str = ',') -> Tuple[List[str], List[List[str]]]:
    """
    Parse delimited lines and separate the header row from the data rows.
    Blank lines are skipped.

    Raises:
        EmptyInputError: If there is no row at all
    """
    all_rows = [row for row in csv.reader(lines, delimiter=delimiter) if row]
    if not all_rows:
        logger.error(f"Input '{source}' is empty")
        raise EmptyInputError(source)
    return all_rows[0], all_rows[1:]


class CSVReader:
    """
    Reads a delimited file with a header row and hands back the data rows
    as lists of strings. The header is kept on the reader, not in the rows.
    """

    def __init__(self, file_path, delimiter: str = ','):
        """
        Initialize the CSV reader.

        Args:
            file_path (str): Path to the CSV file to read
            delimiter (str): Field delimiter
        """
        self.file_path = file_path
        self.delimiter = delimiter
        self.header = []
        logger.info(f"Initialized CSVReader for file: {file_path}")

    def read_rows(self) -> List[List[str]]:
        """
        Read the whole file and return its data rows.

        Returns:
            list[list[str]]: One list of fields per data row, header discarded

        Raises:
            FileNotFoundError: If the file does not exist
            EmptyInputError: If the file has no rows at all
        """
        try:
            with open(self.file_path, 'r', newline='', encoding='utf-8') as f:
                self.header, data_rows = split_header(f, str(self.file_path), self.delimiter)

        except FileNotFoundError:
            logger.error(f"File '{self.file_path}' was not found")
            raise
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            logger.error(f"Error reading CSV file: {e}")
            raise

        logger.info(f"CSV header: {self.header}")
        logger.info(f"Total rows read from {self.file_path}: {len(data_rows)}")

        return data_rows
