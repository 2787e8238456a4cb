"""Store failures raised by the data-access layer.

Route handlers translate these into HTTP responses; the message of each
exception is the store's own error text.
"""


class StoreError(Exception):
    """Any failure reported by the relational store."""


class DuplicateKeyError(StoreError):
    """An insert or update violated a uniqueness constraint."""


class NoRowsError(StoreError):
    """A statement expected to return a row returned none."""

    def __init__(self, message: str = "sql: no rows in result set"):
        super().__init__(message)
