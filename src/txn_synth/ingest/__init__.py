"""Ingest modules for comma-separated transaction logs."""

from txn_synth.ingest.csv_ingest import TokenDialect, iter_transactions, read_transactions

__all__ = ["TokenDialect", "iter_transactions", "read_transactions"]
