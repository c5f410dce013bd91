# ========================
# api_server.py
# ========================

"""
FastAPI Server for the Order Report Pipeline

Upload an orders file and an order items file and get back the
per-order summaries and monthly averages as JSON.
"""

import io
import logging
from dataclasses import asdict
from datetime import datetime

from fastapi import FastAPI, File, HTTPException, Query, UploadFile
import uvicorn

from order_reports import __version__
from order_reports.pipeline import (
    PipelineError,
    RecordParser,
    monthly_averages,
    parse_origin,
    parse_status,
    process_orders,
    split_header,
)
from order_reports.utils.config import Config
from order_reports.utils.logging_setup import setup_logging

# Configuration
config = Config()

# Setup logging
setup_logging(log_level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Order Report Pipeline API",
    description="Summarize orders by status and origin and average them per month",
    version=__version__
)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": "Order Report Pipeline API",
        "version": __version__,
        "endpoints": {
            "reports": "/reports - Upload orders and items CSV files, get summaries",
            "health": "/health - Health check",
            "api_docs": "/docs - API documentation"
        },
        "api_docs_url": "/docs",
        "quick_start": {
            "build_report": "POST /reports?status=Complete&origin=O (with orders_file and items_file)"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat()
    }


@app.post("/reports")
async def build_report(
    orders_file: UploadFile = File(..., description="Orders CSV: id,client_id,order_date,status,origin"),
    items_file: UploadFile = File(..., description="Items CSV: order_id,product_id,quantity,price,tax"),
    status: str = Query(config.DEFAULT_STATUS, description="Order status (Pending, Complete, Cancelled)"),
    origin: str = Query(config.DEFAULT_ORIGIN, description="Order origin (P or O)")
):
    """
    Run the order pipeline on two uploaded CSV files.

    Args:
        orders_file: Orders CSV with a header row
        items_file: Order items CSV with a header row
        status: Status token to keep
        origin: Origin token to keep

    Returns:
        dict: The filter, the order summaries and the monthly averages
    """
    try:
        status_value = parse_status(status)
        origin_value = parse_origin(origin)

        _, order_rows = split_header(await _read_upload(orders_file), orders_file.filename or 'orders_file',
                                     config.CSV_DELIMITER)
        _, item_rows = split_header(await _read_upload(items_file), items_file.filename or 'items_file',
                                    config.CSV_DELIMITER)

        parser = RecordParser()
        orders = parser.parse_orders(order_rows)
        items = parser.parse_items(item_rows)

        summaries = process_orders(orders, items, status_value, origin_value)
        averages = sorted(monthly_averages(orders, summaries), key=lambda a: (a.year, a.month))

    except PipelineError as e:
        logger.warning(f"Report request rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Report built: {len(summaries)} summaries, {len(averages)} monthly periods")

    return {
        "filter": {"status": status_value.value, "origin": origin_value.value},
        "parsing_stats": parser.get_statistics(),
        "summaries": [asdict(s) for s in summaries],
        "monthly_averages": [asdict(a) for a in averages]
    }


async def _read_upload(upload: UploadFile) -> io.StringIO:
    """Read an uploaded file as UTF-8 text."""
    content = await upload.read()
    try:
        text = content.decode('utf-8-sig')
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail=f"File {upload.filename} is not valid UTF-8 text")
    return io.StringIO(text, newline='')


def start_server(host: str = "0.0.0.0", port: int = config.API_PORT, reload: bool = False):
    """Start the FastAPI server."""
    logger.info(f"Starting Order Report Pipeline API server on {host}:{port}")
    uvicorn.run(
        "api_server:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info"
    )


if __name__ == "__main__":
    start_server(reload=True)
