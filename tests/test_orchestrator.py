# ========================
# tests/test_orchestrator.py
# ========================

import unittest
import tempfile
import os
import sys
import csv
from itertools import product
from pathlib import Path

# Add the package sources to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src'))

from order_reports.pipeline.errors import InvalidEnumError, MalformedRecordError
from order_reports.pipeline.orchestrator import OrderPipeline, process_orders
from order_reports.pipeline.records import Order, OrderItem, Origin, Status
from order_reports.utils.config import Config

ORDER_HEADER = ['id', 'client_id', 'order_date', 'status', 'origin']
ITEM_HEADER = ['order_id', 'product_id', 'quantity', 'price', 'tax']


class TestProcessOrders(unittest.TestCase):

    def setUp(self):
        # One order for every (status, origin) combination
        self.orders = [
            Order(id=i, client_id=10, order_date='2024-01-01', status=status, origin=origin)
            for i, (status, origin) in enumerate(product(Status, Origin), start=1)
        ]
        self.items = [
            OrderItem(order_id=order.id, product_id=1, quantity=order.id, price=10.0, tax=0.1)
            for order in self.orders
        ]

    def test_filter_keeps_exact_matches_only(self):
        for status, origin in product(Status, Origin):
            summaries = process_orders(self.orders, self.items, status, origin)
            expected = [o.id for o in self.orders if o.status == status and o.origin == origin]
            self.assertEqual([s.order_id for s in summaries], expected,
                             f"Failed for filter: {status}, {origin}")

    def test_scenario_single_order(self):
        orders = [Order(1, 7, '2024-03-15T00:00:00', Status.COMPLETE, Origin.ONLINE)]
        items = [OrderItem(1, 101, 2, 10.0, 0.05)]

        summaries = process_orders(orders, items, Status.COMPLETE, Origin.ONLINE)

        self.assertEqual(len(summaries), 1)
        self.assertEqual(summaries[0].order_id, 1)
        self.assertAlmostEqual(summaries[0].total_amount, 20.0)
        self.assertAlmostEqual(summaries[0].total_taxes, 1.0)

    def test_items_of_filtered_out_orders_are_ignored(self):
        orders = [Order(1, 7, '2024-03-15', Status.COMPLETE, Origin.ONLINE)]
        items = [OrderItem(1, 101, 1, 5.0, 0.0), OrderItem(99, 101, 100, 5.0, 0.0)]

        summaries = process_orders(orders, items, Status.COMPLETE, Origin.ONLINE)

        self.assertEqual([(s.order_id, s.total_amount) for s in summaries], [(1, 5.0)])

    def test_preserves_order_sequence(self):
        orders = [
            Order(5, 1, '2024-01-01', Status.PENDING, Origin.PARAPHYSICAL),
            Order(2, 1, '2024-01-01', Status.PENDING, Origin.PARAPHYSICAL),
            Order(9, 1, '2024-01-01', Status.PENDING, Origin.PARAPHYSICAL),
        ]
        summaries = process_orders(orders, [], Status.PENDING, Origin.PARAPHYSICAL)
        self.assertEqual([s.order_id for s in summaries], [5, 2, 9])
        self.assertTrue(all(s.total_amount == 0.0 for s in summaries))


class TestOrderPipeline(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        self.base = Path(self.temp_dir.name)
        self.orders_file = str(self.base / 'order.csv')
        self.items_file = str(self.base / 'order_item.csv')
        self.output_dir = str(self.base / 'out')

    def _write(self, path, rows):
        with open(path, 'w', newline='', encoding='utf-8') as f:
            csv.writer(f).writerows(rows)

    def _read(self, path):
        with open(path, newline='', encoding='utf-8') as f:
            return list(csv.reader(f))

    def _write_sample_inputs(self):
        self._write(self.orders_file, [
            ORDER_HEADER,
            ['1', '100', '2024-03-15T00:00:00', 'Complete', 'O'],
            ['2', '101', '2024-03-20T10:00:00', 'Complete', 'O'],
            ['3', '102', '2024-04-01T09:00:00', 'Complete', 'O'],
            ['4', '103', '2024-03-02T09:00:00', 'Pending', 'O'],
            ['5', '104', '2024-03-02T09:00:00', 'Complete', 'P'],
        ])
        self._write(self.items_file, [
            ITEM_HEADER,
            ['1', '11', '2', '10.0', '0.05'],
            ['2', '12', '3', '10.0', '0.1'],
            ['2', '13', '0', '99.0', '0.1'],
            ['4', '14', '1', '500.0', '0.1'],
            ['5', '15', '1', '800.0', '0.1'],
        ])

    def test_run_writes_both_reports(self):
        self._write_sample_inputs()
        pipeline = OrderPipeline(self.orders_file, self.items_file, self.output_dir,
                                 status='Complete', origin='O', config=Config())

        self.assertTrue(pipeline.validate_input())
        results = pipeline.run()

        self.assertEqual(results['pipeline_status'], 'completed')
        self.assertEqual(results['filter'], {'status': 'Complete', 'origin': 'O'})
        self.assertEqual(results['parsing_stats'], {'orders_parsed': 5, 'items_parsed': 5})
        self.assertEqual(results['processing_stats']['summaries_created'], 3)
        self.assertEqual(results['processing_stats']['monthly_periods'], 2)

        self.assertEqual(self._read(results['saved_files']['order_summary']), [
            ['order_id', 'total_amount', 'total_taxes'],
            ['1', '20.00', '1.00'],
            ['2', '30.00', '3.00'],
            ['3', '0.00', '0.00'],
        ])
        self.assertEqual(self._read(results['saved_files']['monthly_averages']), [
            ['year', 'month', 'avg_amount', 'avg_taxes'],
            ['2024', '03', '25.00', '2.00'],
            ['2024', '04', '0.00', '0.00'],
        ])

    def test_configured_filenames(self):
        self._write_sample_inputs()
        config = Config({'summary_filename': 'output5.csv', 'monthly_filename': 'monthly.csv'})
        results = OrderPipeline(self.orders_file, self.items_file, self.output_dir,
                                status='Complete', origin='P', config=config).run()

        self.assertEqual(Path(results['saved_files']['order_summary']).name, 'output5.csv')
        self.assertEqual(self._read(results['saved_files']['order_summary'])[1], ['5', '800.00', '80.00'])

    def test_invalid_filter_fails_before_reading(self):
        with self.assertRaises(InvalidEnumError):
            OrderPipeline(self.orders_file, self.items_file, self.output_dir, status='complete')
        with self.assertRaises(InvalidEnumError):
            OrderPipeline(self.orders_file, self.items_file, self.output_dir, origin='Online')

    def test_malformed_row_aborts_run(self):
        self._write(self.orders_file, [ORDER_HEADER, ['1', '100', '2024-03-15', 'Complete', 'O']])
        self._write(self.items_file, [ITEM_HEADER, ['1', '11', 'two', '10.0', '0.05']])

        pipeline = OrderPipeline(self.orders_file, self.items_file, self.output_dir)

        with self.assertRaises(MalformedRecordError) as ctx:
            pipeline.run()
        self.assertEqual(ctx.exception.row_number, 1)
        self.assertFalse((Path(self.output_dir) / 'order_summary.csv').exists())

    def test_validate_input_missing_file(self):
        self._write(self.orders_file, [ORDER_HEADER])
        pipeline = OrderPipeline(self.orders_file, self.items_file, self.output_dir)
        self.assertFalse(pipeline.validate_input())


if __name__ == '__main__':
    unittest.main()
