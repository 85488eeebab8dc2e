"""Order-1 chain: sample sender, recipient, amount given the previous transaction."""

from __future__ import annotations

import random

from txn_synth.distributions import ConditionalTable, DistributionTables
from txn_synth.errors import ChainGenerationError, EmptyDatasetError, SamplingExhaustionError
from txn_synth.logging_config import get_logger
from txn_synth.sampling import sample_with
from txn_synth.schemas import ON_EXHAUSTION_VALUES, CompositeKey, Transaction

log = get_logger(__name__)
PROGRESS_INTERVAL = 10000  # log progress every N steps


def _draw(
    table: ConditionalTable, key: CompositeKey, field: str, step: int, rng: random.Random
) -> str:
    try:
        return sample_with(table.get(key), rng, key=key)
    except SamplingExhaustionError as e:
        raise ChainGenerationError(step, field, key) from e


def next_transaction(
    tables: DistributionTables, previous: Transaction, rng: random.Random, step: int = 0
) -> Transaction:
    """
    One chain step: sender | (prev recipient, prev amount), then recipient |
    (sender, prev amount), then amount | (sender, recipient). Consumes three draws.
    Raises ChainGenerationError when a composite key has no observations.
    """
    sender = _draw(
        tables.sender_given_recipient_amount,
        (previous.recipient, previous.amount),
        "sender",
        step,
        rng,
    )
    recipient = _draw(
        tables.recipient_given_sender_amount, (sender, previous.amount), "recipient", step, rng
    )
    amount = _draw(tables.amount_given_sender_recipient, (sender, recipient), "amount", step, rng)
    return Transaction(sender=sender, recipient=recipient, amount=amount)


def generate_chain(
    tables: DistributionTables,
    pool: list[Transaction],
    iterations: int,
    rng: random.Random,
    on_exhaustion: str = "abort",
    skip_repeats: bool = False,
) -> list[Transaction]:
    """
    Seed with a uniformly chosen transaction from `pool` (the component-filtered set),
    then append iterations-1 sampled transactions. Returns exactly `iterations` items.

    on_exhaustion="abort" re-raises ChainGenerationError when a composite key has no
    observations; "reseed" substitutes a fresh pool transaction for that step.
    skip_repeats replaces a sampled transaction identical to the previous one with a
    fresh pool transaction.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")
    if on_exhaustion not in ON_EXHAUSTION_VALUES:
        raise ValueError(
            f"on_exhaustion must be one of {sorted(ON_EXHAUSTION_VALUES)}, got {on_exhaustion!r}"
        )
    if not pool:
        raise EmptyDatasetError("No transactions in the largest component to seed the chain")

    chain = [pool[rng.randrange(len(pool))]]
    reseeds = 0
    repeats = 0
    for step in range(2, iterations + 1):
        previous = chain[-1]
        try:
            new = next_transaction(tables, previous, rng, step=step)
        except ChainGenerationError as e:
            if on_exhaustion == "abort":
                raise
            reseeds += 1
            log.warning("Step %d: no observed %s for previous step; reseeding", step, e.field)
            new = pool[rng.randrange(len(pool))]
        else:
            if skip_repeats and new == previous:
                repeats += 1
                new = pool[rng.randrange(len(pool))]
        chain.append(new)
        if step % PROGRESS_INTERVAL == 0:
            log.info("Generated %d/%d transactions", step, iterations)

    log.info(
        "Generated chain of %d transactions (reseeds=%d, repeats_replaced=%d)",
        len(chain),
        reseeds,
        repeats,
    )
    return chain
