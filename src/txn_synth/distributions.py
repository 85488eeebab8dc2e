"""Estimate conditional distributions of one transaction field given the other two."""

from __future__ import annotations

from dataclasses import dataclass

from txn_synth.logging_config import get_logger
from txn_synth.schemas import CompositeKey, Transaction

log = get_logger(__name__)

CountTable = dict[CompositeKey, dict[str, int]]
ConditionalTable = dict[CompositeKey, dict[str, float]]


@dataclass(frozen=True)
class DistributionTables:
    """The three conditional tables used by the chain generator."""

    recipient_given_sender_amount: ConditionalTable
    sender_given_recipient_amount: ConditionalTable
    amount_given_sender_recipient: ConditionalTable
    observations: int = 0


def _increment(table: CountTable, key: CompositeKey, outcome: str) -> None:
    inner = table.setdefault(key, {})
    inner[outcome] = inner.get(outcome, 0) + 1


def counts_to_probabilities(counts: CountTable) -> ConditionalTable:
    """Normalize each key's outcome counts into probabilities summing to 1."""
    probabilities: ConditionalTable = {}
    for key, inner in counts.items():
        total = sum(inner[outcome] for outcome in sorted(inner))
        probabilities[key] = {outcome: count / total for outcome, count in inner.items()}
    return probabilities


def estimate_distributions(transactions: list[Transaction]) -> DistributionTables:
    """
    Count (sender, amount)->recipient, (recipient, amount)->sender and
    (sender, recipient)->amount over complete transactions, then normalize.
    Keys are tuples, so ("ab", "c") and ("a", "bc") never alias.
    """
    recipient_counts: CountTable = {}
    sender_counts: CountTable = {}
    amount_counts: CountTable = {}
    observations = 0
    for t in transactions:
        if not t.is_complete:
            continue
        observations += 1
        _increment(recipient_counts, (t.sender, t.amount), t.recipient)
        _increment(sender_counts, (t.recipient, t.amount), t.sender)
        _increment(amount_counts, (t.sender, t.recipient), t.amount)

    skipped = len(transactions) - observations
    if skipped:
        log.info("Skipped %d incomplete transactions while estimating distributions", skipped)
    log.debug(
        "Distribution keys: by_sender_amount=%d by_recipient_amount=%d by_sender_recipient=%d",
        len(recipient_counts),
        len(sender_counts),
        len(amount_counts),
    )
    return DistributionTables(
        recipient_given_sender_amount=counts_to_probabilities(recipient_counts),
        sender_given_recipient_amount=counts_to_probabilities(sender_counts),
        amount_given_sender_recipient=counts_to_probabilities(amount_counts),
        observations=observations,
    )
