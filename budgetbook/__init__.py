"""budgetbook: personal-finance bookkeeping backend (users, banks, buckets, line items)."""

__version__ = "0.1.0"
