"""Label sender/recipient components and keep transactions touching the largest one."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from txn_synth.logging_config import get_logger
from txn_synth.schemas import MERGE_STRATEGY_VALUES, Transaction

log = get_logger(__name__)


@dataclass(frozen=True)
class ComponentSummary:
    """Outcome of component extraction for one dataset."""

    component_count: int
    largest_id: int | None
    largest_size: int
    members: frozenset[str]
    transactions_kept: int


def _label_endpoint(transactions: list[Transaction]) -> dict[str, int]:
    # Recipient takes the sender's id whenever the sender is labeled. Other
    # addresses sharing the recipient's old id keep it (no transitive merge).
    labels: dict[str, int] = {}
    next_id = 1
    for t in transactions:
        s_id = labels.get(t.sender)
        r_id = labels.get(t.recipient)
        if s_id is not None:
            labels[t.recipient] = s_id
        elif r_id is not None:
            labels[t.sender] = r_id
        else:
            labels[t.sender] = next_id
            labels[t.recipient] = next_id
            next_id += 1
    return labels


def _label_union_find(transactions: list[Transaction]) -> dict[str, int]:
    parent: dict[str, str] = {}
    root_ids: dict[str, int] = {}
    next_id = 1

    def find(addr: str) -> str:
        root = addr
        while parent[root] != root:
            root = parent[root]
        while parent[addr] != root:
            parent[addr], addr = root, parent[addr]
        return root

    for t in transactions:
        new = [a for a in dict.fromkeys((t.sender, t.recipient)) if a not in parent]
        if len(new) == 2 or (new and new[0] == t.sender == t.recipient):
            for a in new:
                parent[a] = t.sender
            root_ids[t.sender] = next_id
            next_id += 1
            continue
        for a in new:
            other = t.recipient if a == t.sender else t.sender
            parent[a] = find(other)
        rs, rr = find(t.sender), find(t.recipient)
        if rs == rr:
            continue
        # Older component (lower id) absorbs the newer one.
        keep, drop = (rs, rr) if root_ids[rs] < root_ids[rr] else (rr, rs)
        parent[drop] = keep
        del root_ids[drop]
    return {addr: root_ids[find(addr)] for addr in parent}


def label_components(transactions: list[Transaction], merge: str = "endpoint") -> dict[str, int]:
    """
    Single pass in input order assigning each address a component id (from 1).
    merge="endpoint" relabels only the recipient when an edge joins two labeled
    addresses; merge="union_find" merges whole components transitively.
    """
    if merge not in MERGE_STRATEGY_VALUES:
        raise ValueError(f"merge must be one of {sorted(MERGE_STRATEGY_VALUES)}, got {merge!r}")
    if merge == "union_find":
        return _label_union_find(transactions)
    return _label_endpoint(transactions)


def largest_component(labels: dict[str, int]) -> tuple[int | None, frozenset[str]]:
    """Return (id, members) of the strictly largest component; ties keep the lowest id."""
    sizes = Counter(labels.values())
    best_id: int | None = None
    best_size = 0
    for comp_id in sorted(sizes):
        if sizes[comp_id] > best_size:
            best_id, best_size = comp_id, sizes[comp_id]
    if best_id is None:
        return None, frozenset()
    return best_id, frozenset(a for a, c in labels.items() if c == best_id)


def extract_largest_component(
    transactions: list[Transaction],
    merge: str = "endpoint",
    skip_incomplete: bool = False,
) -> tuple[list[Transaction], ComponentSummary]:
    """
    Keep every transaction whose sender or recipient belongs to the largest component.
    Incomplete transactions take part in labeling unless skip_incomplete is set.
    Returns (filtered transactions in input order, summary).
    """
    source = [t for t in transactions if t.is_complete] if skip_incomplete else transactions
    labels = label_components(source, merge=merge)
    comp_id, members = largest_component(labels)
    kept = [t for t in source if t.sender in members or t.recipient in members]
    summary = ComponentSummary(
        component_count=len(set(labels.values())),
        largest_id=comp_id,
        largest_size=len(members),
        members=members,
        transactions_kept=len(kept),
    )
    log.info(
        "Components: %d; largest id=%s size=%d; kept %d of %d transactions",
        summary.component_count,
        comp_id,
        summary.largest_size,
        len(kept),
        len(source),
    )
    return kept, summary
