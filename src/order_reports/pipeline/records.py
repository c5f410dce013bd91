# ========================
# src/order_reports/pipeline/records.py
# ========================

"""
Record Types

Typed, immutable entities produced by the parser and the aggregator.
"""

from dataclasses import dataclass
from enum import Enum


class Status(Enum):
    """Order status. Values are the exact tokens used in the orders file."""

    PENDING = "Pending"
    COMPLETE = "Complete"
    CANCELLED = "Cancelled"


class Origin(Enum):
    """Channel the order was placed through: physical store or online."""

    PARAPHYSICAL = "P"
    ONLINE = "O"


@dataclass(frozen=True)
class Order:
    id: int
    client_id: int
    order_date: str
    status: Status
    origin: Origin


@dataclass(frozen=True)
class OrderItem:
    """A single order line. ``tax`` is a fractional rate (0.05 for 5%)."""

    order_id: int
    product_id: int
    quantity: int
    price: float
    tax: float


@dataclass(frozen=True)
class OrderSummary:
    order_id: int
    total_amount: float
    total_taxes: float


@dataclass(frozen=True)
class MonthlyAverage:
    year: str
    month: str
    avg_amount: float
    avg_taxes: float
