#!/usr/bin/env python3
# ========================
# main.py
# ========================

"""
Main Entry Point for the Order Report Pipeline

Reads data/order.csv and data/order_item.csv (or the configured files),
keeps the orders matching --status/--origin and writes the order summary
and monthly average reports.
"""

import sys

from order_reports.cli import main

if __name__ == '__main__':
    sys.exit(main())
