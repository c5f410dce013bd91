#!/usr/bin/env python3
# ========================
# scripts/run_sample_report.py
# ========================

"""
Generate a sample orders/items dataset and run the report pipeline on it.

Usage: python scripts/run_sample_report.py [num_orders]
"""

import sys
from pathlib import Path

from order_reports.pipeline import OrderPipeline
from order_reports.utils import Config, SampleDataGenerator, setup_logging


def main():
    """Generate sample data and build both reports from it."""
    config = Config()

    # Parse command line arguments
    if len(sys.argv) > 1:
        try:
            num_orders = int(sys.argv[1])
        except ValueError:
            print("Usage: python run_sample_report.py [num_orders]")
            print("Example: python run_sample_report.py 5000")
            sys.exit(1)
    else:
        num_orders = config.SAMPLE_ORDERS

    setup_logging(log_level=config.LOG_LEVEL)

    orders_file = 'data/sample/order.csv'
    items_file = 'data/sample/order_item.csv'
    output_dir = 'data/sample/reports'

    print("=" * 60)
    print("ORDER REPORT PIPELINE - SAMPLE RUN")
    print("=" * 60)
    print(f"Orders to generate: {num_orders:,}")
    print(f"Output directory: {output_dir}")
    print("=" * 60)

    # Step 1: Generate sample data
    print(f"\nStep 1: Generating {num_orders:,} orders of sample data...")
    generator = SampleDataGenerator(seed=42)
    stats = generator.generate_dataset(orders_file, items_file, num_orders)
    print(f"Generated {stats['total_orders']:,} orders and {stats['total_items']:,} items")

    # Step 2: Run the pipeline
    print("\nStep 2: Running order pipeline...")
    pipeline = OrderPipeline(
        orders_file, items_file, output_dir,
        status=config.DEFAULT_STATUS,
        origin=config.DEFAULT_ORIGIN,
        config=config
    )
    results = pipeline.run()

    # Step 3: Verify outputs
    print("\nStep 3: Verifying outputs...")
    missing_files = []
    for report_type, file_path in results['saved_files'].items():
        path = Path(file_path)
        if path.exists():
            print(f"OK {report_type}: {path.name} ({path.stat().st_size:,} bytes)")
        else:
            missing_files.append(file_path)
            print(f"MISSING {report_type}: {path.name}")

    if missing_files:
        print(f"\nWarning: {len(missing_files)} report files are missing!")
        sys.exit(1)

    print("\nAll report files generated successfully!")


if __name__ == '__main__':
    main()
