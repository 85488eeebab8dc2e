"""Pytest fixtures: sample transaction logs, temporary config."""

from __future__ import annotations

from pathlib import Path

import pytest

from txn_synth.schemas import Transaction


def txn(sender: str, recipient: str, amount: str) -> Transaction:
    return Transaction(sender=sender, recipient=recipient, amount=amount)


@pytest.fixture
def sample_log(tmp_path: Path) -> Path:
    """Two components: {A,B,C} (three edges) and {D,E} (one edge)."""
    p = tmp_path / "transactions.csv"
    p.write_text("1,A,B,10\n2,B,C,10\n3,C,A,20\n4,D,E,5\n")
    return p


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    return [txn("A", "B", "10"), txn("B", "C", "10"), txn("C", "A", "20"), txn("D", "E", "5")]


@pytest.fixture
def config_path(tmp_path: Path) -> str:
    """Return path to a temporary config dir with default.yaml."""
    cfg_dir = tmp_path / "config"
    cfg_dir.mkdir()
    (cfg_dir / "default.yaml").write_text(
        """
app:
  log_level: ERROR
generation:
  seed: 11
  iterations: 3
  on_exhaustion: abort
extraction:
  merge: endpoint
  skip_incomplete: false
"""
    )
    return str(cfg_dir / "default.yaml")
