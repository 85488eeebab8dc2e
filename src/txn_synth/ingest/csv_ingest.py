"""Read blockId,sender,recipient,amount records - use standard csv when possible."""

from __future__ import annotations

import csv
import time
from collections.abc import Iterator
from pathlib import Path

from txn_synth.errors import MalformedInputError
from txn_synth.logging_config import get_logger
from txn_synth.schemas import Transaction

log = get_logger(__name__)

MIN_FIELDS = 4


class TokenDialect(csv.Dialect):
    """Plain comma splitting: quotes are ordinary token characters."""

    delimiter = ","
    quotechar = None
    quoting = csv.QUOTE_NONE
    escapechar = None
    doublequote = False
    skipinitialspace = False
    lineterminator = "\n"
    strict = False


def iter_transactions(filepath: str | Path, encoding: str = "utf-8") -> Iterator[Transaction]:
    """
    Yield transactions in file order. The first field (block id) and any fields past
    the fourth are ignored; there is no header row. Blank lines are skipped.
    Raises FileNotFoundError if the file is missing and MalformedInputError (with the
    1-based line number and raw line) for a line with fewer than four fields.
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(str(path))
    with open(path, encoding=encoding, newline="") as f:
        for line_number, raw in enumerate(f, start=1):
            line = raw.rstrip("\r\n")
            if not line:
                continue
            fields = next(csv.reader([line], dialect=TokenDialect))
            if len(fields) < MIN_FIELDS:
                raise MalformedInputError(line_number, line)
            yield Transaction(sender=fields[1], recipient=fields[2], amount=fields[3])


def read_transactions(filepath: str | Path, encoding: str = "utf-8") -> list[Transaction]:
    """Load the whole dataset into memory (order preserved)."""
    start = time.perf_counter()
    transactions = list(iter_transactions(filepath, encoding=encoding))
    incomplete = sum(1 for t in transactions if not t.is_complete)
    log.info(
        "Read %d transactions from %s (%d incomplete) in %.3fs",
        len(transactions),
        filepath,
        incomplete,
        time.perf_counter() - start,
    )
    return transactions
