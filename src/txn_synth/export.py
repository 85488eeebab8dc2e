"""Write a generated chain as sender,recipient,amount lines."""

from __future__ import annotations

import csv
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from txn_synth.ingest import TokenDialect
from txn_synth.schemas import Transaction


def write_chain(chain: Iterable[Transaction], stream: TextIO) -> int:
    """Write one line per transaction, in chain order. Returns lines written."""
    writer = csv.writer(stream, dialect=TokenDialect)
    count = 0
    for t in chain:
        writer.writerow(t.to_row())
        count += 1
    return count


def write_chain_file(chain: Iterable[Transaction], path: str | Path) -> int:
    """Write chain to `path` (UTF-8), creating parent directories."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8", newline="") as f:
        return write_chain(chain, f)
