# ========================
# src/order_reports/pipeline/__init__.py
# ========================

"""
Order Pipeline Package

Core components of the order report pipeline:
- records: Typed order, item and report records
- errors: Pipeline error types
- parsing: Raw row to record conversion
- transformation: Per-order summaries and monthly averages
- ingestion: CSV reading
- storage: Report output
- orchestrator: Filtering and run coordination
"""

from .errors import (
    EmptyInputError,
    InvalidEnumError,
    InvalidFormatError,
    MalformedRecordError,
    OrderLookupError,
    PipelineError,
)
from .records import MonthlyAverage, Order, OrderItem, OrderSummary, Origin, Status
from .parsing import RecordParser, parse_order, parse_order_item, parse_origin, parse_status
from .transformation import (
    extract_year_month,
    group_items_by_order,
    item_revenue,
    item_tax,
    monthly_averages,
    summarize_order,
)
from .ingestion import CSVReader, split_header
from .storage import ReportWriter
from .orchestrator import OrderPipeline, process_orders

__all__ = [
    'PipelineError',
    'InvalidEnumError',
    'MalformedRecordError',
    'InvalidFormatError',
    'OrderLookupError',
    'EmptyInputError',
    'Status',
    'Origin',
    'Order',
    'OrderItem',
    'OrderSummary',
    'MonthlyAverage',
    'RecordParser',
    'parse_status',
    'parse_origin',
    'parse_order',
    'parse_order_item',
    'item_revenue',
    'item_tax',
    'group_items_by_order',
    'summarize_order',
    'extract_year_month',
    'monthly_averages',
    'CSVReader',
    'split_header',
    'ReportWriter',
    'process_orders',
    'OrderPipeline'
]
