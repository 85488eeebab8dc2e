"""Run the full pipeline: ingest, estimate, extract largest component, generate chain."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from txn_synth import GENERATOR_VERSION
from txn_synth.chain import generate_chain
from txn_synth.config import generation_settings, get_config, get_config_hash
from txn_synth.distributions import DistributionTables, estimate_distributions
from txn_synth.ingest import read_transactions
from txn_synth.logging_config import get_logger
from txn_synth.network import ComponentSummary, extract_largest_component
from txn_synth.schemas import GenerationSettings, Transaction

log = get_logger(__name__)


@dataclass
class SynthesisResult:
    """Generated chain plus what was learned from the input."""

    chain: list[Transaction]
    tables: DistributionTables
    summary: ComponentSummary
    settings: GenerationSettings
    rows_read: int
    config_hash: str
    duration_seconds: float


def run_synthesis(
    input_path: str | Path,
    config_path: str | None = None,
    **overrides: Any,
) -> SynthesisResult:
    """
    Load transactions from input_path and generate a synthetic chain.
    `overrides` (seed, iterations, on_exhaustion, skip_repeats, merge, skip_incomplete)
    take precedence over config when not None.
    Raises FileNotFoundError, MalformedInputError, EmptyDatasetError, ChainGenerationError.
    """
    start = time.perf_counter()
    config = get_config(config_path)
    config_hash = get_config_hash(config)
    settings = generation_settings(config, **overrides)
    encoding = (config.get("ingest") or {}).get("encoding", "utf-8")

    transactions = read_transactions(input_path, encoding=encoding)
    tables = estimate_distributions(transactions)
    pool, summary = extract_largest_component(
        transactions, merge=settings.merge, skip_incomplete=settings.skip_incomplete
    )
    chain = generate_chain(
        tables,
        pool,
        settings.iterations,
        random.Random(settings.seed),
        on_exhaustion=settings.on_exhaustion,
        skip_repeats=settings.skip_repeats,
    )
    duration = time.perf_counter() - start
    log.info(
        "Synthesis complete: seed=%d iterations=%d config_hash=%s version=%s (%.3fs)",
        settings.seed,
        settings.iterations,
        config_hash[:12],
        GENERATOR_VERSION,
        duration,
    )
    return SynthesisResult(
        chain=chain,
        tables=tables,
        summary=summary,
        settings=settings,
        rows_read=len(transactions),
        config_hash=config_hash,
        duration_seconds=round(duration, 3),
    )


def describe_dataset(input_path: str | Path, config_path: str | None = None) -> dict[str, Any]:
    """Summarize what the generator would learn from input_path, without generating."""
    config = get_config(config_path)
    settings = generation_settings(config)
    encoding = (config.get("ingest") or {}).get("encoding", "utf-8")
    transactions = read_transactions(input_path, encoding=encoding)
    tables = estimate_distributions(transactions)
    _, summary = extract_largest_component(
        transactions, merge=settings.merge, skip_incomplete=settings.skip_incomplete
    )
    return {
        "rows_read": len(transactions),
        "complete_rows": tables.observations,
        "component_count": summary.component_count,
        "largest_component_size": summary.largest_size,
        "transactions_kept": summary.transactions_kept,
        "recipient_keys": len(tables.recipient_given_sender_amount),
        "sender_keys": len(tables.sender_given_recipient_amount),
        "amount_keys": len(tables.amount_given_sender_recipient),
    }
