# ========================
# src/order_reports/utils/config.py
# ========================

"""
Configuration Management

Centralized configuration for the order report pipeline with environment support.
"""

import json
import os
from pathlib import Path
from typing import Dict, Any, Optional

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class Config:
    """
    Configuration class for the order report pipeline.
    Supports environment variables and default values.
    """

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        """
        Initialize configuration.

        Args:
            config_dict (dict): Optional configuration overrides
        """
        # Input files
        self.ORDERS_FILE = os.getenv('PIPELINE_ORDERS_FILE', 'data/order.csv')
        self.ITEMS_FILE = os.getenv('PIPELINE_ITEMS_FILE', 'data/order_item.csv')
        self.CSV_DELIMITER = os.getenv('PIPELINE_CSV_DELIMITER', ',')

        # Output reports
        self.OUTPUT_DIR = os.getenv('PIPELINE_OUTPUT_DIR', 'data/processed')
        self.SUMMARY_FILENAME = os.getenv('PIPELINE_SUMMARY_FILENAME', 'order_summary.csv')
        self.MONTHLY_FILENAME = os.getenv('PIPELINE_MONTHLY_FILENAME', 'monthly_avg.csv')

        # Default filter
        self.DEFAULT_STATUS = os.getenv('PIPELINE_STATUS', 'Complete')
        self.DEFAULT_ORIGIN = os.getenv('PIPELINE_ORIGIN', 'O')

        # Sample data generation
        self.SAMPLE_ORDERS = int(os.getenv('SAMPLE_ORDERS', '1000'))

        # API server
        self.API_PORT = int(os.getenv('API_PORT', '8000'))

        # Logging Configuration
        self.LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
        self.LOG_DIR = os.getenv('LOG_DIR', 'logs')
        self.LOG_FILE = os.getenv('LOG_FILE', 'pipeline.log')

        # Override with provided config
        if config_dict:
            self._update_from_dict(config_dict)

    def _update_from_dict(self, config_dict: Dict[str, Any]) -> None:
        """Update configuration from dictionary."""
        for key, value in config_dict.items():
            if hasattr(self, key.upper()):
                setattr(self, key.upper(), value)

    def get_data_paths(self) -> Dict[str, Path]:
        """Get all configured data paths as Path objects."""
        return {
            'orders_file': Path(self.ORDERS_FILE),
            'items_file': Path(self.ITEMS_FILE),
            'output_dir': Path(self.OUTPUT_DIR),
            'logs_dir': Path(self.LOG_DIR)
        }

    def ensure_directories(self) -> None:
        """Create necessary directories if they don't exist."""
        for path_name, path in self.get_data_paths().items():
            if path_name.endswith('_dir'):
                path.mkdir(parents=True, exist_ok=True)

    def validate_config(self) -> Dict[str, bool]:
        """
        Validate configuration values.

        Returns:
            dict: Validation results for each setting
        """
        validations = {}

        validations['csv_delimiter'] = len(self.CSV_DELIMITER) == 1
        validations['sample_orders'] = self.SAMPLE_ORDERS > 0
        validations['api_port'] = 1000 <= self.API_PORT <= 65535
        validations['summary_filename'] = bool(self.SUMMARY_FILENAME)
        validations['monthly_filename'] = bool(self.MONTHLY_FILENAME)
        validations['log_level'] = self.LOG_LEVEL.upper() in VALID_LOG_LEVELS

        return validations

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            attr: getattr(self, attr)
            for attr in dir(self)
            if not attr.startswith('_') and not callable(getattr(self, attr))
        }

    def save_to_file(self, file_path: str) -> None:
        """Save configuration to JSON file."""
        with open(file_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2, default=str)

    @classmethod
    def load_from_file(cls, file_path: str) -> 'Config':
        """Load configuration from JSON file."""
        with open(file_path, 'r') as f:
            config_dict = json.load(f)
        return cls(config_dict)

    def __str__(self) -> str:
        """String representation of configuration."""
        lines = ["Configuration Settings:"]
        for key, value in sorted(self.to_dict().items()):
            lines.append(f"  {key}: {value}")
        return "\n".join(lines)
