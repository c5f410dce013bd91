# ========================
# src/order_reports/__init__.py
# ========================

"""
Order Reports

Builds per-order revenue/tax summaries and monthly averages from
orders and order items CSV files.
"""

__version__ = "1.0.0"
