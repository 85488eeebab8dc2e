"""Tests for connected-component labeling and largest-component extraction."""

import pytest

from txn_synth.network import extract_largest_component, label_components, largest_component
from txn_synth.schemas import Transaction


def _txn(sender: str, recipient: str, amount: str = "1") -> Transaction:
    return Transaction(sender=sender, recipient=recipient, amount=amount)


def test_largest_component_wins_over_smaller(sample_transactions) -> None:
    kept, summary = extract_largest_component(sample_transactions)
    assert kept == sample_transactions[:3]
    assert summary.members == frozenset({"A", "B", "C"})
    assert summary.largest_size == 3
    assert summary.component_count == 2
    assert summary.transactions_kept == 3


def test_transactions_confined_to_small_component_excluded() -> None:
    txns = [_txn("D", "E"), _txn("A", "B"), _txn("E", "D"), _txn("B", "C"), _txn("C", "B")]
    kept, _ = extract_largest_component(txns)
    assert kept == [_txn("A", "B"), _txn("B", "C"), _txn("C", "B")]
    assert all({t.sender, t.recipient} <= {"A", "B", "C"} for t in kept)


def test_labeling_cases() -> None:
    labels = label_components(
        [
            _txn("A", "B"),  # neither labeled: fresh id 1
            _txn("B", "C"),  # only sender labeled
            _txn("D", "A"),  # only recipient labeled
            _txn("E", "F"),  # fresh id 2
        ]
    )
    assert labels == {"A": 1, "B": 1, "C": 1, "D": 1, "E": 2, "F": 2}


def test_endpoint_merge_is_not_transitive() -> None:
    # D->B relabels only B into D's component; A keeps id 1.
    txns = [_txn("A", "B"), _txn("C", "D"), _txn("D", "B")]
    labels = label_components(txns)
    assert labels == {"A": 1, "B": 2, "C": 2, "D": 2}
    kept, summary = extract_largest_component(txns)
    assert summary.members == frozenset({"B", "C", "D"})
    # A->B is kept because B is a member, pulling in non-member A.
    assert kept == txns


def test_union_find_merge_is_transitive() -> None:
    txns = [_txn("A", "B"), _txn("C", "D"), _txn("D", "B")]
    labels = label_components(txns, merge="union_find")
    assert set(labels.values()) == {1}
    _, summary = extract_largest_component(txns, merge="union_find")
    assert summary.members == frozenset({"A", "B", "C", "D"})
    assert summary.component_count == 1


def test_union_find_keeps_separate_components_apart(sample_transactions) -> None:
    labels = label_components(sample_transactions, merge="union_find")
    assert labels["A"] == labels["B"] == labels["C"] == 1
    assert labels["D"] == labels["E"] == 2


def test_union_find_self_loop_and_chains() -> None:
    txns = [_txn("A", "A"), _txn("B", "C"), _txn("C", "A"), _txn("X", "Y")]
    labels = label_components(txns, merge="union_find")
    assert labels["A"] == labels["B"] == labels["C"] == 1
    assert labels["X"] == labels["Y"] == 3


def test_tie_keeps_first_found_component() -> None:
    comp_id, members = largest_component({"A": 1, "B": 1, "C": 2, "D": 2})
    assert comp_id == 1
    assert members == frozenset({"A", "B"})


def test_empty_labeling() -> None:
    assert largest_component({}) == (None, frozenset())
    kept, summary = extract_largest_component([])
    assert kept == []
    assert summary.largest_id is None
    assert summary.largest_size == 0


def test_incomplete_transactions_still_label_addresses() -> None:
    # Amount is empty everywhere: the extractor still sees the addresses.
    txns = [_txn("A", "B", ""), _txn("B", "C", ""), _txn("D", "E", "")]
    kept, summary = extract_largest_component(txns)
    assert summary.members == frozenset({"A", "B", "C"})
    assert kept == txns[:2]


def test_skip_incomplete_filters_extractor_input() -> None:
    txns = [_txn("A", "B", ""), _txn("B", "C", ""), _txn("D", "E", "5")]
    kept, summary = extract_largest_component(txns, skip_incomplete=True)
    assert summary.members == frozenset({"D", "E"})
    assert kept == [txns[2]]


def test_unknown_merge_strategy_rejected() -> None:
    with pytest.raises(ValueError, match="merge must be one of"):
        label_components([_txn("A", "B")], merge="bfs")
