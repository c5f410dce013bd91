# ========================
# src/order_reports/pipeline/transformation.py
# ========================

"""
Data Transformation Module

Per-order revenue/tax summaries and monthly averages over those summaries.
All functions are pure: inputs are never mutated and no state outlives a call.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Sequence, Tuple

from .errors import InvalidFormatError, OrderLookupError
from .records import MonthlyAverage, Order, OrderItem, OrderSummary

logger = logging.getLogger(__name__)


def item_revenue(item: OrderItem) -> float:
    """Revenue of a line: quantity * price."""
    return item.quantity * item.price


def item_tax(item: OrderItem) -> float:
    """Tax owed on a line: revenue * tax rate (the rate is a multiplier, not a percent)."""
    return item_revenue(item) * item.tax


def group_items_by_order(items: Iterable[OrderItem]) -> Dict[int, List[OrderItem]]:
    """
    Group order items by their order id.

    Args:
        items (iterable[OrderItem]): Items from the items file

    Returns:
        dict: order_id -> list of items, in the order they were seen
    """
    grouped = defaultdict(list)
    for item in items:
        grouped[item.order_id].append(item)

    logger.debug(f"Grouped items into {len(grouped)} orders")
    return dict(grouped)


def summarize_order(order: Order, grouped: Dict[int, List[OrderItem]]) -> OrderSummary:
    """
    Sum revenue and tax over the items belonging to ``order``.
    An order without items gets a summary with zero totals.
    """
    order_items = grouped.get(order.id, [])
    total_amount = sum((item_revenue(item) for item in order_items), 0.0)
    total_taxes = sum((item_tax(item) for item in order_items), 0.0)

    return OrderSummary(order_id=order.id, total_amount=total_amount, total_taxes=total_taxes)


def extract_year_month(date: str) -> Tuple[str, str]:
    """
    Return the (year, month) tokens of a "YYYY-MM-..." date string.

    The tokens are taken as-is; "2024-13-01" yields ("2024", "13").

    Raises:
        InvalidFormatError: If the string has no '-' separating year and month
    """
    parts = date.split('-')
    if len(parts) < 2:
        raise InvalidFormatError(date)
    return parts[0], parts[1]


def monthly_averages(orders: Sequence[Order],
                     summaries: Iterable[OrderSummary]) -> List[MonthlyAverage]:
    """
    Average summary totals per (year, month) of the parent order's date.

    Args:
        orders (list[Order]): Orders the summaries were derived from
        summaries (iterable[OrderSummary]): Per-order summaries

    Returns:
        list[MonthlyAverage]: One entry per month, in the order each month was
        first seen. Sort by (year, month) if a stable order is needed.

    Raises:
        OrderLookupError: If a summary has no matching order
        InvalidFormatError: If a parent order has an unusable date
    """
    orders_by_id = {}
    for order in orders:
        orders_by_id.setdefault(order.id, order)

    buckets = defaultdict(lambda: {'amount': 0.0, 'taxes': 0.0, 'count': 0})

    for summary in summaries:
        order = orders_by_id.get(summary.order_id)
        if order is None:
            logger.error(f"Summary for order {summary.order_id} has no matching order")
            raise OrderLookupError(summary.order_id)

        bucket = buckets[extract_year_month(order.order_date)]
        bucket['amount'] += summary.total_amount
        bucket['taxes'] += summary.total_taxes
        bucket['count'] += 1

    averages = [
        MonthlyAverage(
            year=year,
            month=month,
            avg_amount=data['amount'] / data['count'],
            avg_taxes=data['taxes'] / data['count'],
        )
        for (year, month), data in buckets.items()
    ]

    logger.info(f"Computed monthly averages for {len(averages)} periods")
    return averages
