# ========================
# src/order_reports/utils/__init__.py
# ========================

"""
Utilities Package

Common utilities and helper functions for the order pipeline.
"""

from .config import Config
from .performance_monitor import monitor_performance, PerformanceMonitor
from .logging_setup import setup_logging
from .data_generator import SampleDataGenerator

__all__ = [
    'Config',
    'monitor_performance',
    'PerformanceMonitor',
    'setup_logging',
    'SampleDataGenerator'
]
