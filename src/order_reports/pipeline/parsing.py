# ========================
# src/order_reports/pipeline/parsing.py
# ========================

"""
Record Parsing Module

Converts raw CSV rows (lists of strings) into typed Order and OrderItem records.
Parsing is strict: the first invalid row raises and aborts the run.
"""

import logging
from typing import Dict, List, Sequence

from .errors import InvalidEnumError, MalformedRecordError
from .records import Order, OrderItem, Origin, Status

logger = logging.getLogger(__name__)

ORDER_FIELDS = ('id', 'client_id', 'order_date', 'status', 'origin')
ORDER_ITEM_FIELDS = ('order_id', 'product_id', 'quantity', 'price', 'tax')

_STATUS_BY_TOKEN = {status.value: status for status in Status}
_ORIGIN_BY_TOKEN = {origin.value: origin for origin in Origin}


def parse_status(token: str) -> Status:
    """
    Map an exact status token to a Status.

    Args:
        token (str): One of "Pending", "Complete" or "Cancelled"

    Returns:
        Status: The matching status

    Raises:
        InvalidEnumError: If the token is anything else (case matters)
    """
    try:
        return _STATUS_BY_TOKEN[token]
    except (KeyError, TypeError):
        raise InvalidEnumError('status', token, _STATUS_BY_TOKEN) from None


def parse_origin(token: str) -> Origin:
    """
    Map an origin token to an Origin: "P" is Paraphysical, "O" is Online.

    Raises:
        InvalidEnumError: If the token is anything else
    """
    try:
        return _ORIGIN_BY_TOKEN[token]
    except (KeyError, TypeError):
        raise InvalidEnumError('origin', token, _ORIGIN_BY_TOKEN) from None


def parse_order(fields: Sequence[str]) -> Order:
    """
    Build an Order from ``[id, client_id, order_date, status, origin]``.

    Raises:
        MalformedRecordError: On a wrong field count or a non-integer id
        InvalidEnumError: On an unknown status or origin token
    """
    _check_arity('order', fields, ORDER_FIELDS)
    order_id, client_id, order_date, status, origin = fields

    return Order(
        id=_to_int('order', fields, 'id', order_id),
        client_id=_to_int('order', fields, 'client_id', client_id),
        order_date=order_date,
        status=parse_status(status),
        origin=parse_origin(origin),
    )


def parse_order_item(fields: Sequence[str]) -> OrderItem:
    """
    Build an OrderItem from ``[order_id, product_id, quantity, price, tax]``.

    Raises:
        MalformedRecordError: On a wrong field count or a non-numeric value
    """
    _check_arity('order item', fields, ORDER_ITEM_FIELDS)
    order_id, product_id, quantity, price, tax = fields

    return OrderItem(
        order_id=_to_int('order item', fields, 'order_id', order_id),
        product_id=_to_int('order item', fields, 'product_id', product_id),
        quantity=_to_int('order item', fields, 'quantity', quantity),
        price=_to_float('order item', fields, 'price', price),
        tax=_to_float('order item', fields, 'tax', tax),
    )


def _check_arity(kind: str, fields: Sequence[str], expected: Sequence[str]) -> None:
    if len(fields) != len(expected):
        raise MalformedRecordError(
            kind, fields, f"expected {len(expected)} fields {list(expected)}, got {len(fields)}"
        )


def _to_int(kind: str, fields: Sequence[str], name: str, value: str) -> int:
    try:
        return int(value)
    except (ValueError, TypeError):
        raise MalformedRecordError(kind, fields, f"{name} is not an integer: {value!r}") from None


def _to_float(kind: str, fields: Sequence[str], name: str, value: str) -> float:
    try:
        return float(value)
    except (ValueError, TypeError):
        raise MalformedRecordError(kind, fields, f"{name} is not a number: {value!r}") from None


class RecordParser:
    """
    Parses whole row sets read from the orders and items files.
    Keeps simple counters so the run summary can report what was read.
    """

    def __init__(self):
        """Initialize the record parser."""
        self.orders_parsed = 0
        self.items_parsed = 0
        logger.info("RecordParser initialized")

    def parse_orders(self, rows: Sequence[Sequence[str]]) -> List[Order]:
        """
        Parse every data row of the orders file.

        Args:
            rows (list[list[str]]): Data rows with the header already removed

        Returns:
            list[Order]: Parsed orders, in file order
        """
        orders = self._parse_rows(rows, parse_order, 'orders')
        self.orders_parsed += len(orders)
        return orders

    def parse_items(self, rows: Sequence[Sequence[str]]) -> List[OrderItem]:
        """Parse every data row of the order items file."""
        items = self._parse_rows(rows, parse_order_item, 'order items')
        self.items_parsed += len(items)
        return items

    def _parse_rows(self, rows, parse_row, label: str) -> list:
        records = []
        for row_number, row in enumerate(rows, start=1):
            try:
                records.append(parse_row(row))
            except MalformedRecordError as e:
                error = e.with_row_number(row_number)
                logger.error(f"Failed to parse {label}: {error}")
                raise error from e
            except InvalidEnumError as e:
                logger.error(f"Failed to parse {label} at row {row_number}: {e}")
                raise

        logger.info(f"Parsed {len(records)} {label}")
        return records

    def get_statistics(self) -> Dict[str, int]:
        """Get parsing statistics."""
        return {
            'orders_parsed': self.orders_parsed,
            'items_parsed': self.items_parsed,
        }
