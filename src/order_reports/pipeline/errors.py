# ========================
# src/order_reports/pipeline/errors.py
# ========================

"""
Pipeline Errors

Every error raised by the order pipeline derives from PipelineError.
None of them are recoverable: they abort the run at the point of failure.
"""

from typing import Optional, Sequence


class PipelineError(Exception):
    """Base class for order pipeline failures."""
    pass


class InvalidEnumError(PipelineError, ValueError):
    """Raised when a status or origin token is not recognized."""

    def __init__(self, field: str, token: str, expected: Sequence[str]):
        self.field = field
        self.token = token
        self.expected = tuple(expected)
        super().__init__(
            f"Invalid {field}: expected one of {', '.join(repr(e) for e in self.expected)}, "
            f"got {token!r}"
        )


class MalformedRecordError(PipelineError, ValueError):
    """Raised when a row has the wrong number of fields or a non-numeric value."""

    def __init__(self, kind: str, fields: Sequence[str], reason: str,
                 row_number: Optional[int] = None):
        self.kind = kind
        self.fields = list(fields)
        self.reason = reason
        self.row_number = row_number
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        location = f" at row {self.row_number}" if self.row_number is not None else ""
        return f"Malformed {self.kind} record{location}: {self.reason} (fields: {self.fields})"

    def with_row_number(self, row_number: int) -> "MalformedRecordError":
        """Return a copy of this error that names the data row it came from."""
        return MalformedRecordError(self.kind, self.fields, self.reason, row_number)


class InvalidFormatError(PipelineError, ValueError):
    """Raised when an order date has no '-'-separated year and month."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid date format: {value!r}")


class OrderLookupError(PipelineError, LookupError):
    """Raised when a summary refers to an order that is not in the order set."""

    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(f"No order with id {order_id} for summary")


class EmptyInputError(PipelineError):
    """Raised when an input file does not even contain a header row."""

    def __init__(self, file_path: str):
        self.file_path = file_path
        super().__init__(f"Empty CSV file: {file_path}")
