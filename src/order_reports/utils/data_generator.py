# ========================
# src/order_reports/utils/data_generator.py
# ========================

"""
Data Generation Utilities

Writes realistic sample orders and order items files for demos and manual runs.
"""

import csv
import logging
import random
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..pipeline.parsing import ORDER_FIELDS, ORDER_ITEM_FIELDS

logger = logging.getLogger(__name__)


class SampleDataGenerator:
    """
    Generates an orders file and a matching order items file.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize data generator.

        Args:
            seed (int): Random seed for reproducible data generation
        """
        self._rng = random.Random(seed)
        self._initialize_data_patterns()
        logger.info(f"SampleDataGenerator initialized with seed: {seed}")

    def _initialize_data_patterns(self) -> None:
        """Initialize data patterns and distributions."""
        # Product catalog: product_id -> base price
        self.products = {
            101: 1200.0,
            102: 800.0,
            103: 150.0,
            104: 2000.0,
            105: 80.0,
            106: 120.0,
            107: 25.0,
            108: 95.0,
            109: 45.0,
            110: 200.0,
        }

        self.statuses = ['Complete', 'Pending', 'Cancelled']
        self.status_weights = [0.7, 0.2, 0.1]

        self.origins = ['O', 'P']
        self.origin_weights = [0.6, 0.4]

        self.tax_rates = [0.0, 0.05, 0.1, 0.15]
        self.num_clients = 200

    def generate_dataset(self,
                         orders_file: str,
                         items_file: str,
                         num_orders: int,
                         max_items_per_order: int = 5,
                         start_date: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Generate both input files.

        Args:
            orders_file (str): Output path of the orders CSV
            items_file (str): Output path of the order items CSV
            num_orders (int): Number of orders to generate
            max_items_per_order (int): Upper bound of lines per order
            start_date (datetime): Start of the one-year date range

        Returns:
            dict: Generation statistics
        """
        logger.info(f"Generating {num_orders:,} orders...")

        if start_date is None:
            start_date = datetime(2024, 1, 1)

        stats = {
            'total_orders': num_orders,
            'total_items': 0,
            'start_date': start_date,
            'status_counts': {},
            'origin_counts': {},
        }

        orders = []
        items = []
        for order_id in range(1, num_orders + 1):
            order = self._generate_order(order_id, start_date)
            orders.append(order)
            self._count(stats['status_counts'], order[3])
            self._count(stats['origin_counts'], order[4])

            for _ in range(self._rng.randint(1, max_items_per_order)):
                items.append(self._generate_item(order_id))

        stats['total_items'] = len(items)

        self._write_csv(orders_file, ORDER_FIELDS, orders)
        self._write_csv(items_file, ORDER_ITEM_FIELDS, items)

        logger.info(f"Dataset generated: {orders_file}, {items_file}")
        logger.info(f"Status breakdown: {stats['status_counts']}")
        logger.info(f"Origin breakdown: {stats['origin_counts']}")

        return stats

    def _generate_order(self, order_id: int, start_date: datetime) -> List[Any]:
        order_date = start_date + timedelta(
            days=self._rng.randint(0, 364),
            hours=self._rng.randint(0, 23),
            minutes=self._rng.randint(0, 59)
        )
        status = self._rng.choices(self.statuses, weights=self.status_weights)[0]
        origin = self._rng.choices(self.origins, weights=self.origin_weights)[0]

        return [
            order_id,
            self._rng.randint(1, self.num_clients),
            order_date.strftime("%Y-%m-%dT%H:%M:%S"),
            status,
            origin,
        ]

    def _generate_item(self, order_id: int) -> List[Any]:
        product_id = self._rng.choice(list(self.products))
        price = round(self.products[product_id] * self._rng.uniform(0.8, 1.2), 2)

        return [
            order_id,
            product_id,
            self._rng.randint(1, 10),
            price,
            self._rng.choice(self.tax_rates),
        ]

    @staticmethod
    def _count(counter: Dict[str, int], key: str) -> None:
        counter[key] = counter.get(key, 0) + 1

    @staticmethod
    def _write_csv(file_path: str, headers, rows: List[List[Any]]) -> None:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(headers)
            writer.writerows(rows)
        logger.debug(f"Wrote {len(rows):,} rows to {file_path}")
