# ========================
# tests/test_cli.py
# ========================

import unittest
import tempfile
import logging
import os
import sys
import csv
from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from pathlib import Path
from unittest import mock

# Add the package sources to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src'))

from order_reports.cli import build_parser, main
from order_reports.utils.config import Config


class TestCommandLine(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        self.base = Path(self.temp_dir.name)

        # main() reconfigures the root logger; put it back afterwards
        root_logger = logging.getLogger()
        saved_handlers = list(root_logger.handlers)
        saved_level = root_logger.level

        def restore_logging():
            for handler in list(root_logger.handlers):
                if handler not in saved_handlers:
                    root_logger.removeHandler(handler)
                    handler.close()
            for handler in saved_handlers:
                if handler not in root_logger.handlers:
                    root_logger.addHandler(handler)
            root_logger.setLevel(saved_level)

        self.addCleanup(restore_logging)

        env = mock.patch.dict(os.environ, {'LOG_DIR': str(self.base / 'logs')})
        env.start()
        self.addCleanup(env.stop)

        self.orders_file = self.base / 'order.csv'
        self.items_file = self.base / 'order_item.csv'
        self.output_dir = self.base / 'out'
        self._write(self.orders_file, [
            ['id', 'client_id', 'order_date', 'status', 'origin'],
            ['1', '100', '2024-03-15T00:00:00', 'Complete', 'O'],
            ['2', '101', '2024-03-16T00:00:00', 'Pending', 'P'],
        ])
        self._write(self.items_file, [
            ['order_id', 'product_id', 'quantity', 'price', 'tax'],
            ['1', '11', '2', '10.0', '0.05'],
            ['2', '12', '1', '40.0', '0.1'],
        ])

    def _write(self, path, rows):
        with open(path, 'w', newline='', encoding='utf-8') as f:
            csv.writer(f).writerows(rows)

    def _read(self, path):
        with open(path, newline='', encoding='utf-8') as f:
            return list(csv.reader(f))

    def _run(self, *extra):
        argv = [
            '--orders', str(self.orders_file),
            '--items', str(self.items_file),
            '--output-dir', str(self.output_dir),
            '--log-level', 'warning',
            *extra
        ]
        stdout, stderr = StringIO(), StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            exit_code = main(argv)
        return exit_code, stdout.getvalue(), stderr.getvalue()

    def test_defaults(self):
        args = build_parser(Config()).parse_args([])
        self.assertEqual(args.status, 'Complete')
        self.assertEqual(args.origin, 'O')

    def test_default_filter_run(self):
        exit_code, stdout, _ = self._run()

        self.assertEqual(exit_code, 0)
        self.assertIn('order_summary', stdout)
        self.assertEqual(self._read(self.output_dir / 'order_summary.csv'), [
            ['order_id', 'total_amount', 'total_taxes'],
            ['1', '20.00', '1.00'],
        ])
        self.assertEqual(self._read(self.output_dir / 'monthly_avg.csv'), [
            ['year', 'month', 'avg_amount', 'avg_taxes'],
            ['2024', '03', '20.00', '1.00'],
        ])

    def test_status_and_origin_flags(self):
        exit_code, _, _ = self._run('--status', 'Pending', '--origin', 'P')

        self.assertEqual(exit_code, 0)
        self.assertEqual(self._read(self.output_dir / 'order_summary.csv')[1:], [['2', '40.00', '4.00']])

    def test_invalid_status_fails(self):
        exit_code, _, _ = self._run('--status', 'Shipped')

        self.assertEqual(exit_code, 1)
        self.assertFalse((self.output_dir / 'order_summary.csv').exists())

    def test_invalid_origin_fails(self):
        exit_code, _, _ = self._run('--origin', 'Online')
        self.assertEqual(exit_code, 1)

    def test_unknown_flag_is_not_fatal(self):
        exit_code, _, stderr = self._run('--verbose')

        self.assertEqual(exit_code, 0)
        self.assertIn('usage:', stderr)
        self.assertTrue((self.output_dir / 'order_summary.csv').exists())

    def test_missing_input_file(self):
        self.items_file.unlink()
        exit_code, _, _ = self._run()
        self.assertEqual(exit_code, 1)

    def test_malformed_input(self):
        self._write(self.orders_file, [['id', 'client_id'], ['1', '2']])
        exit_code, _, _ = self._run()
        self.assertEqual(exit_code, 1)


if __name__ == '__main__':
    unittest.main()
